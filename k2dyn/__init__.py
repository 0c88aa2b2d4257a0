"""Building blocks for dynamic k2-trees: Morton codes, packed node topologies, block frontiers and query state."""

__version__ = "0.1.0"
__all__ = ["frontier", "morton_code", "queries_state", "topology"]