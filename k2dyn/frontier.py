"""The frontier of a block: its leaf nodes that point to child blocks."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator
from typing import Any


class FrontierError(Exception):
    """Raised when a frontier operation would leave the frontier inconsistent."""


class Frontier:
    """Sorted preorders of frontier nodes, each paired with its child block."""

    __slots__ = ("_preorders", "_children")

    def __init__(
        self, preorders: Iterable[int] = (), children: Iterable[Any] = ()
    ) -> None:
        self._preorders = list(preorders)
        self._children = list(children)
        if len(self._preorders) != len(self._children):
            raise FrontierError(
                f"{len(self._preorders)} preorders but {len(self._children)} children"
            )
        if any(a > b for a, b in zip(self._preorders, self._preorders[1:])):
            raise FrontierError("frontier preorders must be sorted")

    def __len__(self) -> int:
        return len(self._preorders)

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        return iter(zip(self._preorders, self._children))

    def __repr__(self) -> str:
        return f"Frontier(preorders={self._preorders!r})"

    @property
    def preorders(self) -> tuple[int, ...]:
        return tuple(self._preorders)

    @property
    def children(self) -> tuple[Any, ...]:
        return tuple(self._children)

    def check(self, node_index: int, start: int = 0) -> tuple[bool, int]:
        """Scan forward from ``start`` for ``node_index``.

        Returns whether the node is on the frontier and the index the scan
        stopped at, to be passed as ``start`` on the next call.
        """
        count = len(self._preorders)
        if start >= count:
            return False, start
        index = start
        current = self._preorders[index]
        while index < count:
            current = self._preorders[index]
            if current >= node_index:
                break
            index += 1
        return current == node_index, index

    def child(self, index: int) -> Any:
        """Return the child block at a frontier position."""
        return self._children[index]

    def insertion_point(self, preorder: int) -> int:
        """Return the first position whose preorder is greater than ``preorder``."""
        return bisect_right(self._preorders, preorder)

    def extract(self, preorder_from: int, preorder_to: int) -> Frontier:
        """Move the entries between the two preorders into a new frontier.

        Bounds follow :meth:`insertion_point`: entries whose preorder is
        greater than ``preorder_from`` and not greater than ``preorder_to``.
        """
        from_index = self.insertion_point(preorder_from)
        if from_index == len(self._preorders):
            return Frontier()
        to_index = self.insertion_point(preorder_to)
        if to_index < from_index:
            raise FrontierError(
                f"extract range ends at {preorder_to}, before {preorder_from}"
            )
        extracted = Frontier(
            self._preorders[from_index:to_index], self._children[from_index:to_index]
        )
        del self._preorders[from_index:to_index]
        del self._children[from_index:to_index]
        return extracted

    def add(self, preorder: int, child: Any) -> None:
        """Insert a frontier node, keeping preorders sorted."""
        position = self.insertion_point(preorder)
        self._preorders.insert(position, preorder)
        self._children.insert(position, child)

    def fix_indexes(self, start: int, delta: int) -> None:
        """Subtract ``delta`` from every preorder that is at least ``start``."""
        if any(p >= start and p < delta for p in self._preorders):
            raise FrontierError(f"a preorder at or after {start} is lower than {delta}")
        self._preorders = [p - delta if p >= start else p for p in self._preorders]

    def collapse(self, from_preorder: int, to_preorder: int) -> None:
        """Remove the entries whose preorders lie in [from_preorder, to_preorder]."""
        if not self._preorders:
            return
        left = next(
            (i for i, p in enumerate(self._preorders) if p >= from_preorder), None
        )
        right = next(
            (
                i
                for i in reversed(range(len(self._preorders)))
                if self._preorders[i] <= to_preorder
            ),
            None,
        )
        if left is None or right is None or right < left:
            return
        del self._preorders[left : right + 1]
        del self._children[left : right + 1]