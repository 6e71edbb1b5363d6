# drills

Classic algorithm and data-structure exercises as a small Python library.
It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `drills.arrays` | `three_sum`, `two_sum_sorted`, `two_sum_hashed`, `two_sum_brute`, `merge_sorted`, `remove_duplicates`, `remove_duplicates_at_most_twice`, `unique_sorted`, `min_subarray_len` |
| `drills.strings` | `is_subsequence`, `length_of_longest_substring`, `merge_alternately`, `reverse_words`, `is_palindrome`, `is_simple_palindrome` |
| `drills.sudoku` | `is_valid_sudoku` |
| `drills.sorting` | `bubble_sort`, `selection_sort`, `merge_sort`, `merge_sorted_sequences`, `includes` |
| `drills.bst` | `TreeNode`, `BinarySearchTree` |
| `drills.binary_tree` | `BinaryTree` |
| `drills.graph` | `Graph`, `WeightedEdge`, `WeightedGraph`, `UndirectedGraph`, `AdjacencyMatrix` |
| `drills.dijkstra` | `ShortestPathGraph` |
| `drills.linked_list` | `ListNode`, `LinkedList`, `reverse_nodes` |
| `drills.patterns` | `Beverage`, `Espresso`, `Milk`, `Mocha`, `Observer`, `Subject`, `SortStrategy`, `BubbleSortStrategy`, `MergeSortStrategy`, `Sorter`, `LightState`, `TrafficLight`, `Singleton` |
| `drills.metrics` | `KernelReport`, `percentage_execution_time` |
| `drills.allocator` | `MemoryAllocator`, `AllocationError` |
| `drills.thread_pool` | `ThreadPool` |
| `drills.producer_consumer` | `BoundedQueue`, `QueueClosed`, `ProducerConsumer`, `AtomicCounter`, `run_pipeline` |

## Arrays and strings

The functions take sequences and return new values. They do not change their input.
Two-sum functions return 1-based positions, or `[]` when no pair exists.

```python
from drills.arrays import three_sum, min_subarray_len, remove_duplicates
from drills.strings import reverse_words, is_palindrome

three_sum([-1, 0, 1, 2, -1, -4])        # [[-1, -1, 2], [-1, 0, 1]]
min_subarray_len(7, [2, 3, 1, 2, 4, 3])  # 2
remove_duplicates([1, 1, 2, 3, 3])       # [1, 2, 3]
reverse_words("  the sky   is blue ")    # "blue is sky the"
is_palindrome("A man, a plan, a canal: Panama")  # True
```

`is_valid_sudoku` checks a board of nine rows with nine cells each. An empty cell is `"."`.
It raises `ValueError` when the board has another shape.

## Trees

`BinarySearchTree` puts equal values in the left subtree.
It has `insert`, `remove`, `min` and four traversals: `inorder`, `preorder`, `postorder` and `level_order`. Each traversal returns a list.
It also supports `in`, `len()` and iteration in ascending order.
Removing a value that is not in the tree does nothing. Calling `min()` on an empty tree raises `ValueError`.

```python
from drills.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
tree.remove(30)
tree.inorder()      # [20, 40, 50, 60, 70, 80]
40 in tree          # True
```

`BinaryTree` places values in the same order. It offers `level_order`, `inorder_iterative` and `inorder_recursive`.

## Graphs

- **`Graph`** is a directed adjacency list. `Graph(n)` starts with the nodes `0 .. n - 1`.
  - `add_edge` ignores duplicate edges and raises `KeyError` for an unknown source node.
  - `bfs`, `dfs` and `dfs_mark_on_push` return the visited nodes in order.
  - `format()` returns a text listing with one line per node.
- **`WeightedGraph`** stores `WeightedEdge` objects.
- **`UndirectedGraph`** is an undirected adjacency list.
- **`AdjacencyMatrix`** is a directed graph stored as a 0/1 matrix.

```python
from drills.graph import Graph

graph = Graph(4)
graph.add_edge(0, 1)
graph.add_edge(1, 2)
graph.add_edge(2, 3)
graph.bfs(0)        # [0, 1, 2, 3]
```

`ShortestPathGraph.dijkstra(source)` returns a dict of shortest distances to every node. Nodes that cannot be reached get `math.inf`.
Negative edge weights are rejected with `ValueError`.

```python
from drills.dijkstra import ShortestPathGraph

g = ShortestPathGraph()
g.add_edge(0, 1, 4)
g.add_edge(1, 3, 1)
g.add_edge(0, 3, 21)
g.dijkstra(0)[3]    # 5
```

## Linked list

`LinkedList` offers:

- `push_front` and `push_back`
- `remove`, which unlinks the first matching value and ignores a missing one
- `reverse`, which reverses the list in place
- iteration and `len()`

`reverse_nodes(head)` reverses a bare chain of `ListNode`s and returns the new head.

## Design patterns

- **Decorator:** `Espresso(cost)` can be wrapped in `Milk` (default extra cost 1.2) or `Mocha` (default 1.5). Call `cost()` and `description()` on the result.
- **Observer:** `Subject.add_observer` registers each observer once. `notify()` calls `update()` on each registered observer.
- **Strategy:** `Sorter` sorts with a `BubbleSortStrategy` or a `MergeSortStrategy`. `set_strategy` swaps between them.
- **State:** `TrafficLight` starts in `LightState.RED` and cycles red, green, yellow through `advance()`. `handle()` describes the current state.
- **Singleton:** `Singleton.get_instance()` creates the single instance under a lock on first use. Calling `Singleton()` directly raises `TypeError`.

## Kernel metrics

`percentage_execution_time(metrics)` takes a mapping from kernel id to sub-function timings. It returns one `KernelReport` per kernel, in ascending order of id.
The timings are given as a mapping or as `(name, durations)` pairs.
Each report's `percentage` is the busy time as a share of the span between the `"start time"` and `"end time"` entries.
A zero span raises `ValueError`.

## Concurrency

`MemoryAllocator(size)` hands out blocks from the simulated addresses `0 .. size - 1`, first fit, behind a lock.
- `allocate` returns the start address of a block.
- `deallocate` releases a block.
- Both raise `AllocationError` when they cannot succeed.
- Freed blocks are not merged with their neighbours.

`ThreadPool(n)` runs callables on `n` worker threads.
- `submit` returns a `concurrent.futures.Future`.
- `shutdown()` runs the tasks already queued, then joins the workers. Leaving a `with` block calls it.
- Submitting after shutdown raises `RuntimeError`.

```python
from drills.thread_pool import ThreadPool

with ThreadPool(2) as pool:
    futures = [pool.submit(lambda i=i: i * i) for i in range(8)]
[f.result() for f in futures]   # [0, 1, 4, 9, 16, 25, 36, 49]
```

`BoundedQueue` (default `maxsize` 200; `None` for unbounded) blocks on `put` while full and on `get` while empty.
After `close()`, the remaining items can still be taken, and `get` then raises `QueueClosed`.

`ProducerConsumer` passes `0 .. count - 1` through a `BoundedQueue`. `run_pipeline(count, producer_callback, consumer_callback)` runs one producer thread and one consumer thread, and returns the values in the order they were consumed.

`AtomicCounter` is an integer that threads can `increment()` safely.

## What this package does not do

It is a library only. It has no command-line program, and importing its modules prints nothing.
The shortest-path search returns distances, not the routes that reach them.