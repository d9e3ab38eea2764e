"""Maze loading from text and YAML descriptions.

Text format::

    3 5          <- row and column counts
    0 0          <- start row and column
    W   W        <- grid rows; short rows are padded with spaces
    W W W
    W   E

YAML format::

    start: [0, 0]
    rows:
      - "    E"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Union

import yaml

from mazelab.exceptions import InvalidConfigurationError
from mazelab.logging import get_logger
from mazelab.model.grid import Grid
from mazelab.model.point import Point

logger = get_logger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _parse_int_pair(line: str, what: str) -> tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise InvalidConfigurationError(
            f"Expected two integers for {what}, got {line!r}"
        )
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidConfigurationError(
            f"Expected two integers for {what}, got {line!r}"
        ) from None


def parse_maze_text(text: str) -> Grid:
    """Parse the line-oriented maze format into a ``Grid``.

    Raises:
        InvalidConfigurationError: If the header is malformed, the grid has
            the wrong number of rows, a row is too long, or the resulting
            grid is invalid.
    """
    lines = text.splitlines()
    if len(lines) < 2:
        raise InvalidConfigurationError(
            "Maze text needs a dimensions line and a start line"
        )

    n_rows, n_cols = _parse_int_pair(lines[0], "dimensions")
    if n_rows < 1 or n_cols < 1:
        raise InvalidConfigurationError(
            f"Maze dimensions must be positive, got {n_rows}x{n_cols}"
        )
    start_row, start_col = _parse_int_pair(lines[1], "start point")

    body = lines[2:]
    # Trailing blank lines are editor noise, not grid rows
    while len(body) > n_rows and not body[-1].strip():
        body.pop()
    if len(body) != n_rows:
        raise InvalidConfigurationError(
            f"Expected {n_rows} grid rows, found {len(body)}"
        )

    rows: List[str] = []
    for idx, line in enumerate(body):
        if len(line) > n_cols:
            raise InvalidConfigurationError(
                f"Row {idx} has {len(line)} columns, expected {n_cols}"
            )
        rows.append(line.ljust(n_cols))

    return Grid(rows, Point(start_row, start_col))


def load_maze_yaml(yaml_str: str) -> Grid:
    """Load a maze from a YAML mapping with ``start`` and ``rows`` keys."""
    try:
        data: Any = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(f"Invalid maze YAML: {e}") from e
    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            "The provided YAML must map to a dictionary at top-level."
        )

    unknown = set(data) - {"start", "rows", "name"}
    if unknown:
        raise InvalidConfigurationError(
            f"Unrecognized maze keys: {', '.join(sorted(map(str, unknown)))}"
        )

    start = data.get("start")
    if (
        not isinstance(start, (list, tuple))
        or len(start) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in start)
    ):
        raise InvalidConfigurationError("'start' must be a [row, column] pair")

    rows = data.get("rows")
    if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
        raise InvalidConfigurationError("'rows' must be a list of strings")

    return Grid(rows, Point(start[0], start[1]))


def load_maze(path: Union[str, Path]) -> Grid:
    """Load a maze file, choosing the format from the file suffix.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidConfigurationError: If the content is not a valid maze.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Maze file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidConfigurationError(f"Maze file is not valid UTF-8: {e}") from e
    logger.debug("Loading maze from %s", path)
    if path.suffix.lower() in YAML_SUFFIXES:
        return load_maze_yaml(text)
    return parse_maze_text(text)
