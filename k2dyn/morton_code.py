"""Morton (Z-order) codes that describe a path from the root of a quadtree."""

from __future__ import annotations

from collections.abc import Iterator

MAX_DEPTH = 64


class MortonCode:
    """A quadrant code (0-3) for each tree level, root level first.

    Code 0 holds the low column and the low row, 1 the high row, 2 the high
    column and 3 both high halves.
    """

    __slots__ = ("treedepth", "_codes")

    def __init__(self, treedepth: int) -> None:
        if treedepth < 0:
            raise ValueError(f"tree depth must not be negative, got {treedepth}")
        self.treedepth = treedepth
        self._codes = [0] * treedepth

    @classmethod
    def from_coordinates(cls, col: int, row: int, treedepth: int) -> MortonCode:
        """Build the code of the cell at (col, row) in a tree of this depth."""
        code = cls(treedepth)
        code.set_coordinates(col, row)
        return code

    def __len__(self) -> int:
        return self.treedepth

    def __iter__(self) -> Iterator[int]:
        return iter(self._codes)

    def __repr__(self) -> str:
        return f"MortonCode({self._codes!r})"

    def add(self, position: int, code: int) -> None:
        """Store the quadrant code for one level."""
        self._codes[position] = code

    def code_at(self, position: int) -> int:
        """Return the quadrant code stored for one level."""
        return self._codes[position]

    def leaf_child(self) -> int:
        """Return the code of the deepest level."""
        if self.treedepth == 0:
            raise IndexError("an empty morton code has no leaf child")
        return self._codes[self.treedepth - 1]

    def set_coordinates(self, col: int, row: int) -> None:
        """Overwrite every level with the path to (col, row)."""
        if self.treedepth > MAX_DEPTH:
            raise ValueError(
                f"depths higher than {MAX_DEPTH} are not supported, got {self.treedepth}"
            )
        if col < 0 or row < 0:
            raise ValueError("coordinates must not be negative")
        for position in range(self.treedepth):
            half_level = 1 << (self.treedepth - 1 - position)
            quadrant = (2 if col >= half_level else 0) + (1 if row >= half_level else 0)
            col %= half_level
            row %= half_level
            self._codes[position] = quadrant

    def to_coordinates(self, treedepth: int | None = None) -> tuple[int, int]:
        """Return (col, row) described by the first ``treedepth`` levels."""
        depth = self.treedepth if treedepth is None else treedepth
        if depth < 0 or depth > self.treedepth:
            raise ValueError(
                f"depth {depth} is outside the code's depth {self.treedepth}"
            )
        col = 0
        row = 0
        for level, code in enumerate(self._codes[:depth]):
            if code not in (0, 1, 2, 3):
                raise ValueError(f"invalid morton code value {code} at level {level}")
            weight = 1 << (depth - 1 - level)
            if code & 2:
                col += weight
            if code & 1:
                row += weight
        return col, row