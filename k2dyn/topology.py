"""Bit-level topology of a block: four child bits per node, packed in 32-bit words."""

from __future__ import annotations

import struct

WORD_BITS = 32
NODE_BITS = 4


class TopologyError(Exception):
    """Raised when a topology operation is given an impossible range or size."""


def _words_for(bit_count: int) -> int:
    return -(-bit_count // WORD_BITS)


def _to_words(value: int, word_count: int) -> list[int]:
    raw = value.to_bytes(word_count * 4, "big")
    return [word for (word,) in struct.iter_unpack(">I", raw)]


class Topology:
    """Nodes stored in preorder, each node as four bits (child 0 first).

    Bits are addressed from 0 at the most significant bit of the first word.
    """

    __slots__ = ("_bits", "_words", "_nodes_count")

    def __init__(self, nodes_count: int = 0) -> None:
        if nodes_count < 0:
            raise TopologyError(f"nodes count must not be negative, got {nodes_count}")
        self._words = _words_for(nodes_count * NODE_BITS)
        self._bits = 0
        self._nodes_count = 0
        self.set_nodes_count(nodes_count)

    def __repr__(self) -> str:
        return (
            f"Topology(nodes_count={self._nodes_count}, "
            f"container={self.container!r})"
        )

    @property
    def nodes_count(self) -> int:
        return self._nodes_count

    @property
    def container_size(self) -> int:
        """Number of 32-bit words allocated."""
        return self._words

    @property
    def bit_size(self) -> int:
        return self._words * WORD_BITS

    @property
    def container(self) -> list[int]:
        """The allocated words, first word first."""
        return _to_words(self._bits, self._words)

    def nodes_capacity(self) -> int:
        return self._words * (WORD_BITS // NODE_BITS)

    def allocated_nodes(self) -> int:
        return self.bit_size // NODE_BITS

    def set_nodes_count(self, nodes_count: int) -> None:
        if nodes_count < 0:
            raise TopologyError(f"nodes count must not be negative, got {nodes_count}")
        if NODE_BITS * nodes_count > self.bit_size:
            raise TopologyError(
                f"container not big enough: {NODE_BITS * nodes_count} > {self.bit_size}"
            )
        self._nodes_count = nodes_count

    # bit primitives

    def _check_range(self, start: int, end: int) -> None:
        if start < 0 or start > end or end >= self.bit_size:
            raise TopologyError(
                f"bit range [{start}, {end}] outside a vector of {self.bit_size} bits"
            )

    def _read(self, start: int, end: int) -> int:
        self._check_range(start, end)
        width = end - start + 1
        return (self._bits >> (self.bit_size - 1 - end)) & ((1 << width) - 1)

    def _write(self, start: int, end: int, value: int) -> None:
        self._check_range(start, end)
        width = end - start + 1
        offset = self.bit_size - 1 - end
        field = (1 << width) - 1
        self._bits = (self._bits & ~(field << offset)) | ((value & field) << offset)

    def _resize(self, new_bit_size: int) -> None:
        new_words = _words_for(new_bit_size)
        if new_words == self._words:
            return
        if new_words > self._words:
            self._bits <<= (new_words - self._words) * WORD_BITS
        else:
            self._bits >>= (self._words - new_words) * WORD_BITS
        self._words = new_words

    def _shift_right(self, start: int, stop: int, shift: int) -> None:
        """Move bits [start, stop) right by ``shift`` and clear the gap."""
        if shift == 0:
            return
        if stop + shift > self.bit_size:
            self._resize(stop + shift)
        if stop > start:
            segment = self._read(start, stop - 1)
            self._write(start + shift, stop - 1 + shift, segment)
        self._write(start, start + shift - 1, 0)

    def _collapse_bits(self, start: int, end: int) -> None:
        if start > end:
            raise TopologyError(f"collapse start {start} is greater than end {end}")
        removed = end - start + 1
        size = self.bit_size
        if removed >= size:
            raise TopologyError(
                f"cannot collapse {removed} bits of a vector of {size} bits"
            )
        if start < 0 or end >= size:
            raise TopologyError(f"bit range [{start}, {end}] outside the vector")
        tail_width = size - 1 - end
        head = self._bits >> (size - start)
        tail = self._bits & ((1 << tail_width) - 1)
        self._bits = ((head << tail_width) | tail) << removed
        self._resize(size - removed)

    # node operations

    def child_exists(self, node_index: int, child_position: int) -> bool:
        if node_index >= self.nodes_capacity():
            return False
        return bool(self._read(NODE_BITS * node_index + child_position,
                               NODE_BITS * node_index + child_position))

    def read_node(self, node_index: int) -> int:
        """Return the node's four child bits, child 0 as the highest bit."""
        start = NODE_BITS * node_index
        return self._read(start, start + NODE_BITS - 1)

    def count_children(self, node_index: int) -> int:
        if node_index >= self._nodes_count:
            return 0
        return self.read_node(node_index).bit_count()

    def mark_child(self, node_index: int, child_position: int) -> bool:
        """Set a child bit; return whether it was already set."""
        position = NODE_BITS * node_index + child_position
        was_marked = bool(self._read(position, position))
        self._write(position, position, 1)
        return was_marked

    def insert_node_at(self, node_index: int, code: int) -> None:
        """Write a node that has only the child ``code`` set."""
        if code not in range(NODE_BITS):
            raise ValueError(f"child code must be in 0..3, got {code}")
        start = NODE_BITS * node_index
        self._write(start, start + NODE_BITS - 1, 1 << (NODE_BITS - 1 - code))
        if node_index + 1 > self._nodes_count:
            self.set_nodes_count(node_index + 1)

    def enlarge_to(self, node_capacity: int) -> None:
        self._resize(node_capacity * NODE_BITS)

    def shift_right_nodes_after(self, node_index: int, nodes_to_insert: int) -> None:
        """Open room for ``nodes_to_insert`` empty nodes after ``node_index``."""
        nodes_count = self._nodes_count
        next_size = nodes_count + nodes_to_insert
        if next_size > self.allocated_nodes():
            self.enlarge_to(next_size)
        self._shift_right(
            NODE_BITS * (node_index + 1),
            NODE_BITS * nodes_count,
            NODE_BITS * nodes_to_insert,
        )
        if node_index + 1 < nodes_count:
            self.set_nodes_count(nodes_count + nodes_to_insert)

    def collapse_nodes(self, first: int, last: int) -> None:
        """Remove nodes ``first`` to ``last`` inclusive."""
        self._collapse_bits(NODE_BITS * first, NODE_BITS * (last + 1) - 1)
        self.set_nodes_count(self._nodes_count - (last - first + 1))

    def extract_bits(self, start: int, end: int) -> list[int]:
        """Return bits [start, end] packed into words, left aligned."""
        if start > end:
            raise TopologyError(f"extract start {start} is greater than end {end}")
        width = end - start + 1
        word_count = _words_for(width)
        value = self._read(start, end) << (word_count * WORD_BITS - width)
        return _to_words(value, word_count)

    def copy_nodes_to(
        self, destination: Topology, src_start: int, dst_start: int, amount: int
    ) -> None:
        """Copy ``amount`` nodes into ``destination`` without changing its count."""
        if amount == 0:
            return
        width = NODE_BITS * amount
        value = self._read(NODE_BITS * src_start, NODE_BITS * src_start + width - 1)
        destination._write(
            NODE_BITS * dst_start, NODE_BITS * dst_start + width - 1, value
        )