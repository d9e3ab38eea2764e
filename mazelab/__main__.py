"""Allow ``python -m mazelab``."""

from mazelab.cli import main

if __name__ == "__main__":
    main()
