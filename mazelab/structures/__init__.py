"""Linked containers: sequence, stack and queue."""

from mazelab.structures.node import LinkNode, Node
from mazelab.structures.queue import Queue
from mazelab.structures.sequence import Sequence
from mazelab.structures.stack import Stack

__all__ = ["Node", "LinkNode", "Sequence", "Stack", "Queue"]
