# dstructs

Classic data structures and algorithms in plain Python, with no
third-party dependencies.

## Contents

| Module | What it provides |
| --- | --- |
| `dstructs.graph` | `ListGraph` and `MatrixGraph`: undirected graphs as adjacency lists or a 0/1 matrix, with `dfs()`, `bfs()` and `render()`; `example_list_graph()`, `example_matrix_graph()`; matrix helpers `matrix_from_edges`, `dfs_recursive`, `dfs_iterative`, `bfs_from` and `read_simple_graphs` |
| `dstructs.weighted_list_graph` | `WeightedListGraph` and `Edge`, with `kruskal()`, `prim(start)` and `dijkstra(vs)`; `INF` marks a missing edge |
| `dstructs.weighted_matrix_graph` | `WeightedMatrixGraph` (built from a matrix or with `from_edges`), with the same algorithms |
| `dstructs.binary_heap` | `BinaryHeap`, a bounded max- or min-heap, and `HeapFullError` |
| `dstructs.priority_queue` | `PriorityQueue` (largest item on top) and `smallest_k` |
| `dstructs.linked_list` | `ListNode` and singly linked list functions: `create_list`, `to_values`, `list_length`, `reverse_list`, `kth_from_end`, `middle_node`, `reversed_values`, `merge_sorted`, `has_cycle`, `detect_cycle`, `is_intersected`, `first_common_node`, `delete_node` |
| `dstructs.hashtable` | `HashTable`, a separate-chaining set of integers, and `next_prime` |
| `dstructs.string_match` | `naive_index`, `compute_next` and `kmp` |
| `dstructs.binary_tree` | `TreeNode` and tree functions: recursive and iterative traversals, `node_count`, `depth`, `leaf_count`, `count_at_level`, `same_structure`, `is_balanced`, `is_complete`, `mirror`, `contains_node`, `lowest_common_ancestor`, `max_distance`, `to_linked_list`, `rebuild` |
| `dstructs.bstree` | `BinarySearchTree` with parent links, successor and predecessor |
| `dstructs.avltree` | `AVLTree` |
| `dstructs.rbtree` | `RedBlackTree` and `Color` |
| `dstructs.splay_tree` | `SplayTree` (top-down splaying) |
| `dstructs.huffman` | `build_huffman`, `HuffmanNode` and traversals |

The search trees share a shape: `insert`, `delete`, `search`,
`iterative_search`, `minimum`, `maximum`, `preorder()`, `inorder()`,
`postorder()` returning lists, and `describe()` returning one line per node
("`x is root`" or "`x is y's left child`"). `AVLTree`, `RedBlackTree` and
`SplayTree` hold each key once, and their `insert` returns `False` for a key
already present. `RedBlackTree.minimum()` and `maximum()` return keys and
raise `ValueError` on an empty tree; the other trees return nodes, or `None`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Binary search tree:

```python
from dstructs.bstree import BinarySearchTree

tree = BinarySearchTree()
for key in [1, 5, 4, 3, 2, 6]:
    tree.insert(key)

print(tree.inorder())   # [1, 2, 3, 4, 5, 6]
tree.delete(3)
print(tree.inorder())   # [1, 2, 4, 5, 6]
```

String matching (both return -1 when there is no match):

```python
from dstructs.string_match import kmp, naive_index

print(kmp("aaaabaabcacdd", "abaabcac"))          # 3
print(naive_index("aaaabaabcacdd", "abaabcac"))  # 3
```

Heaps and priority queues:

```python
from dstructs.binary_heap import BinaryHeap
from dstructs.priority_queue import smallest_k

heap = BinaryHeap(capacity=30, largest_first=False)
for value in [80, 40, 30]:
    heap.insert(value)
heap.remove(40)
print(list(heap))                       # array order of the heap

print(smallest_k([5, -6, 1, 3, 4], 2))  # [-6, 1]
```

`BinaryHeap.insert` raises `HeapFullError` at capacity; `remove` raises
`IndexError` on an empty heap and `ValueError` for a value it does not hold.

Hash table:

```python
from dstructs.hashtable import HashTable

table = HashTable(50)        # 53 buckets, the next listed prime
table.insert(7)
print(7 in table, len(table))
table.erase(7)
```

Graphs:

```python
from dstructs.graph import example_list_graph
from dstructs.weighted_matrix_graph import example_weighted_matrix_graph

graph = example_list_graph()
print(graph.dfs())
print(graph.bfs())

weighted = example_weighted_matrix_graph()
total, edges = weighted.kruskal()
total, order = weighted.prim(0)
prev, dist = weighted.dijkstra(3)
```

## Commands

```
dstructs-graph [list|matrix|simple]
dstructs-prim-list [prim|kruskal|dijkstra|print|dfs|bfs] [--start N] [--source N]
dstructs-prim-matrix [prim|kruskal|dijkstra|print|dfs|bfs] [--start N] [--source N]
```

`dstructs-graph` prints the example graph (adjacency list by default, or
matrix) with its depth-first and breadth-first orders. With `simple` it reads
graphs from standard input instead: each one is a line `n e` followed by `e`
lines `s t v` (vertex, vertex, weight), and it prints a recursive depth-first,
an iterative depth-first and a breadth-first order from vertex 0. Input ends
at end of file or when `n` is 0 or less.

`dstructs-prim-list` and `dstructs-prim-matrix` run an algorithm on the
example weighted graph, stored as adjacency lists or as a matrix. The default
is Prim from `--start` (0); `dijkstra` starts from `--source` (3).

## What it does not do

- Graphs are undirected only; there are no directed graph classes.
- Apart from `dstructs-graph simple`, nothing reads graphs interactively:
  graphs are built in code from vertex labels and edge tuples.
- There is no B-tree, and nothing is stored on disk.