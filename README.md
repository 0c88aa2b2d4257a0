# k2dyn

Building blocks for a dynamic k2-tree, a compact structure for sparse binary
matrices (adjacency matrices of graphs, for instance). The package has no
dependencies beyond the standard library.

## Modules

- `k2dyn.morton_code` — `MortonCode`: the quadrant path of a cell, one code
  (0–3) per tree level, root level first. Code 0 is the low column and low
  row, 1 the high row, 2 the high column, 3 both high halves.
  `MortonCode.from_coordinates(col, row, treedepth)` builds a code,
  `set_coordinates` overwrites one, `to_coordinates(treedepth)` reads
  `(col, row)` back from the first `treedepth` levels. `add`, `code_at` and
  `leaf_child` access single levels. Depths above 64 and negative
  coordinates raise `ValueError`.
- `k2dyn.topology` — `Topology`: a bitvector packed in 32-bit words holding
  four child bits per node in preorder. It can read nodes (`read_node`,
  `child_exists`, `count_children`), set child bits (`mark_child`), write a
  node with a single child (`insert_node_at`), grow (`enlarge_to`), open room
  for new nodes (`shift_right_nodes_after`), remove a range of nodes
  (`collapse_nodes`), extract a bit range as words (`extract_bits`) and copy
  nodes into another topology (`copy_nodes_to`). Impossible ranges or sizes
  raise `TopologyError`.
- `k2dyn.frontier` — `Frontier`: the sorted preorders of a block's frontier
  nodes, each paired with a child object. It supports a resumable forward
  scan (`check`), insertion in order (`add`), moving a range out into a new
  frontier (`extract`), renumbering (`fix_indexes`) and removing a range
  (`collapse`). Inconsistent input raises `FrontierError`.
- `k2dyn.queries_state` — `QueriesState`: working state for one tree of a
  given depth: a `MortonCode`, node-count limits, scratch lists and maps
  sized to the smallest power of two not below the maximum node count.
  `reset()` clears it while keeping the limits.

## Example

```python
from k2dyn.frontier import Frontier
from k2dyn.morton_code import MortonCode
from k2dyn.queries_state import QueriesState
from k2dyn.topology import Topology

mc = MortonCode.from_coordinates(5, 3, treedepth=3)
print(list(mc))                      # [2, 1, 3]
print(mc.to_coordinates(3))          # (5, 3)

topo = Topology(0)
topo.enlarge_to(8)
topo.insert_node_at(0, 2)            # node 0 gets child 2
print(topo.child_exists(0, 2))       # True
print(topo.count_children(0))        # 1

frontier = Frontier()
frontier.add(10, "block a")
frontier.add(3, "block b")
print(frontier.preorders)            # (3, 10)
print(frontier.check(10))            # (True, 1)

state = QueriesState(16, 256)
print(state.map_size)                # 256
```

## What the package does not do

It offers the parts a dynamic k2-tree is built from, not the tree itself:
there is no block or tree type that inserts, deletes or looks up points, no
row, column or full scans, no size measurement, and no storage or command
line tool.

## Running the tests

```
pip install .[test]
pytest
```