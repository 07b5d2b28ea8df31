"""Left/right side marker."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Which side of an edge: left or right."""

    LEFT = 0
    RIGHT = 1

    def other(self) -> Side:
        """The opposite side."""
        return Side.RIGHT if self is Side.LEFT else Side.LEFT