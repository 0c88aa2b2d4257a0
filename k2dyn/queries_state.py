"""Scratch state shared by the queries and updates on one block tree."""

from __future__ import annotations

from typing import Any

from k2dyn.morton_code import MortonCode

LEVEL_THRESHOLD_1 = 4
LEVEL_THRESHOLD_2 = 8
MAX_NODES_1 = 64
MAX_NODES_2 = 128


class QueriesState:
    """Work buffers, limits and the current morton code for a block tree."""

    def __init__(self, tree_depth: int, max_nodes_count: int, root: Any = None) -> None:
        if tree_depth < 0:
            raise ValueError(f"tree depth must not be negative, got {tree_depth}")
        if max_nodes_count < 1:
            raise ValueError(
                f"max nodes count must be positive, got {max_nodes_count}"
            )
        self.treedepth = tree_depth
        self.max_nodes_count = max_nodes_count
        self.root = root
        self.level_threshold_1 = LEVEL_THRESHOLD_1
        self.level_threshold_2 = LEVEL_THRESHOLD_2
        self.max_nodes_1 = min(MAX_NODES_1, max_nodes_count)
        self.max_nodes_2 = min(MAX_NODES_2, max_nodes_count)
        self.reset()

    @property
    def map_size(self) -> int:
        """Smallest power of two not below the max nodes count."""
        return 1 << (self.max_nodes_count - 1).bit_length()

    def reset(self) -> None:
        """Clear the work buffers and the morton code, keeping the limits."""
        self.mc = MortonCode(self.treedepth)
        self.not_yet_traversed: list[int] = []
        self.subtrees_count: list[Any] = []
        self.find_split_data = False
        self.subtrees_count_map = [0] * self.map_size
        self.relative_depth_map = [0] * self.map_size

    def __repr__(self) -> str:
        return (
            f"QueriesState(tree_depth={self.treedepth}, "
            f"max_nodes_count={self.max_nodes_count})"
        )