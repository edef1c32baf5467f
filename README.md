# algokit

Classic algorithms and data structures in plain Python. There are no runtime
dependencies. Everything is a function or a small class that you import and
call.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.graphs`

- `articulation_points(vertex_count, adjacency)` returns the sorted
  articulation points of an undirected graph given as adjacency lists. When
  there are none it returns `[-1]`.
- `bridges(vertex_count, edges)` returns the bridges as `(u, v)` tuples in the
  order the depth-first search finds them.
- `is_bridge(vertex_count, edges, c, d)` tells whether the edge `c`–`d` is a
  bridge.
- `count_strongly_connected(vertex_count, edges)` counts the strongly connected
  components of a directed graph, using Kosaraju's method.
- `bfs_order(matrix, start)` and `dfs_order(matrix, start)` return the 0-based
  visiting order over an adjacency matrix.

### `algokit.notation`

Operands are single ASCII letters or digits. Every other character is treated
as an operator.

- `infix_to_postfix`, `infix_to_prefix`, `postfix_to_infix` (fully
  parenthesised), `postfix_to_prefix` and `prefix_to_postfix`.
- `precedence(op)` returns 3 for `^`, 2 for `*` and `/`, 1 for `+` and `-`,
  and -1 for anything else.
- `reverse_expression(expr)` reverses an expression and swaps the parentheses.

Malformed input, such as an unbalanced `)` or an operator without two
operands, raises `ValueError`.

### `algokit.hashing`

- `OpenAddressTable(size=10, probing=Probing.LINEAR)` is a fixed-size table of
  integer keys. `Probing` can be `LINEAR`, `QUADRATIC` or `DOUBLE`, where
  `DOUBLE` uses a second hash of `7 - key % 7`.
  - `insert(key)` returns the slot it used, or raises `ValueError` when no
    free slot can be reached.
  - The table supports `in`.
  - Iterating yields the slots in order, with `None` for an empty slot.
- `ChainedHashTable(size=10)` keeps each bucket sorted.
  - `insert(key)` adds a key.
  - `bucket(index)` returns a copy of one bucket.
  - The table supports `in`.

### `algokit.stacks`

- `previous_smaller(nums)` gives, for each element, the nearest earlier
  strictly smaller element, or -1 when there is none.
- `next_greater_circular(nums)` gives, for each element, the next strictly
  greater element with wrap-around, or -1 when there is none.
- `MinStack` provides `push`, `pop` (which returns the value), `top`,
  `minimum` and `len()`. Its minimum is kept in constant time and space. On an
  empty stack, `pop`, `top` and `minimum` raise `IndexError`.

### `algokit.greedy`

- `average_waiting_time(jobs)` returns the integer average wait when jobs run
  shortest first.
- `greedy_coin_change(target, coins=DEFAULT_COINS)` returns the list of coins
  picked largest first.
- `schedule_jobs(jobs, slots)` takes `(deadline, profit)` jobs and returns
  `(assignment, total_profit)`.
- `fractional_knapsack(items, capacity)` takes `(value, weight)` items.
- `select_meetings(meetings)` returns the `(start, end)` meetings chosen by end
  time. Meetings that touch or overlap are not both chosen.
- `platforms_needed(arrivals, departures)` and
  `platforms_by_chaining(schedule)` count railway platforms.
- `count_candies(ratings)` returns the number of candies needed so that
  higher-rated neighbours get more.

### `algokit.trees`

- `Node` is a dataclass with the fields `data`, `left`, `right` and `height`.
- `build_level_order(values)` builds a tree from level-order values, with
  `None` for a missing child.
- Traversals: `preorder`, `inorder`, `postorder`, `iterative_preorder`,
  `iterative_inorder` and `level_order`.
- Counts and measures: `count_nodes`, `count_leaves`, `count_full_nodes`,
  `node_sum` and `height`.
- Views: `boundary_order`, `top_view` and `bottom_view`.
- `path_to(root, key)` returns the values on the path from the root to `key`,
  or `[]` when `key` is not in the tree.
- `children_sum_transform(root)` modifies the tree in place.
- `burn_time(root, target)` returns the number of steps for fire starting at
  node `target` to reach every node.

### `algokit.bst`

- `bst_search`, `bst_insert` (equal keys go right), `bst_delete`,
  `inorder_predecessor` and `bst_from_preorder`.
- `avl_insert`, which ignores duplicate keys.

All of these work on `algokit.trees.Node`.

### `algokit.problems`

Short exercises:

- `min_flip_operations`
- `swap_first_letters`
- `cube_pairs`
- `fibonacciness`
- `floor_number`
- `max_multiple_sum`
- `mirror_string`
- `product_of_three`, which returns three distinct factors or `None`
- `seat_monkeys`
- `can_split_watermelon`
- `is_prime`

### `algokit.arrays`

- `max_window_sum(nums, k)` returns the largest sum of `k` consecutive
  elements.
- `longest_subarray_at_most(nums, k)` works on non-negative values only.
- `maze_paths(grid, end_row, end_col)` returns every simple path from `(0, 0)`
  as a string of `R`, `L`, `U` and `D` moves.
- `countdown_rows(n)` returns `[[0..n-1], [0..n-2], ..., [0]]`.

### `algokit.regression`

- `linear_cost(w, data=LINEAR_DATA)` and `gate_cost(w1, w2, data=OR_GATE_DATA)`
  compute the mean squared error.
- `train_linear(...)` and `train_gate(...)` fit weights by finite-difference
  gradient descent from a random start. Pass `seed` to make a run repeatable.

## Example

```python
from algokit.notation import infix_to_postfix, infix_to_prefix
from algokit.stacks import MinStack

print(infix_to_postfix("a+b*(c/d-e)"))   # abcd/e-*+
print(infix_to_prefix("a+b*(c/d-e)"))    # +a*b-/cde

stack = MinStack()
for value in (10, 5, 20):
    stack.push(value)
print(stack.minimum(), len(stack), stack.top())   # 5 3 20
```

## What it does not do

This package is a library only and has no command-line program. Trees are
built from Python values with `build_level_order`; it does not prompt for
them. The training functions return the fitted weights and print nothing.