# dsakit

A small, dependency-free collection of classic data structures and
algorithms in plain Python.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                | Contents                                                                      |
|-----------------------|-------------------------------------------------------------------------------|
| `dsakit.searching`    | `binary_search_iterative`, `binary_search_recursive`                          |
| `dsakit.sorting`      | `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` |
| `dsakit.stacks`       | `LinkedStack`, `ArrayStack`, `StackEmptyError`, `StackFullError`              |
| `dsakit.queues`       | `LinearQueue`, `CircularQueue`, `QueueEmptyError`, `QueueFullError`           |
| `dsakit.expression`   | `precedence`, `infix_to_postfix`, `infix_to_prefix`                           |
| `dsakit.graph`        | `MatrixGraph`, `ListGraph`                                                    |
| `dsakit.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList`, `CircularLinkedList`                  |
| `dsakit.sparse`       | `SparseMatrix`                                                                |
| `dsakit.trees`        | `TreeNode`, `BinarySearchTree`                                                |

### Searching and sorting

Both binary searches take a sorted sequence and a target and return an
index of the target, or `None` when it is absent. Every sort function
accepts any iterable and returns a new sorted list, leaving its input
untouched.

```python
from dsakit.searching import binary_search_iterative
from dsakit.sorting import merge_sort

values = merge_sort([38, 27, 43, 3, 9, 82, 10])
print(values)                               # [3, 9, 10, 27, 38, 43, 82]
print(binary_search_iterative(values, 43))  # 5
```

### Stacks and queues

`LinkedStack` is unbounded; `ArrayStack(capacity)` holds at most
`capacity` values. Popping or peeking an empty stack raises
`StackEmptyError` (an `IndexError`); pushing onto a full `ArrayStack`
raises `StackFullError` (an `OverflowError`). Iterating a stack goes
from top to bottom.

`LinearQueue(capacity)` accepts at most `capacity` values over its
whole life: slots freed by `dequeue` are not reused. `CircularQueue`
reuses them as a ring buffer. Both raise `QueueEmptyError` on underflow
and `QueueFullError` on overflow.

### Expressions

`infix_to_postfix` and `infix_to_prefix` convert expressions whose
operands are single letters or digits and whose operators are
`^ * / + -`, with parentheses. Spaces are ignored; an unmatched `)`
raises `ValueError`.

```python
from dsakit.expression import infix_to_postfix, infix_to_prefix

print(infix_to_postfix("a+b*c"))   # abc*+
print(infix_to_prefix("a+b*c"))    # +a*bc
```

### Graphs

`MatrixGraph(n)` and `ListGraph(n)` are undirected graphs on vertices
`0 .. n-1`. `add_edge` links two vertices both ways and `format()`
renders the matrix or the adjacency lists as text. `ListGraph` also
offers `neighbors(vertex)` (most recently added first), `dfs(start)`
and `bfs(start)`, which return vertices in visiting order.

### Linked lists

`SinglyLinkedList` supports `insert_first`, `insert_last`,
`insert_at`, `delete_first`, `delete_last`, `delete_at`,
`delete_value` and `index`. `DoublyLinkedList` has the same insert and
delete operations (without `delete_value` and `index`) and can be
iterated backwards with `reversed()`. `CircularLinkedList` supports
`insert_first` and `insert_last`; iterating it goes once around the
ring. Out-of-range indexes raise `IndexError`; a missing value raises
`ValueError`.

### Sparse matrices

`SparseMatrix(rows, cols)` stores only non-zero integers. It offers
`get`, `set`, `add`, `remove`, `transpose`, in-place `scale`,
`to_dense` and `SparseMatrix.from_dense`. Matrices of the same shape
can be added with `+` and multiplied with `@`:

```python
from dsakit.sparse import SparseMatrix

a = SparseMatrix.from_dense([[1, 0], [0, 2]])
b = SparseMatrix.from_dense([[0, 3], [4, 0]])
print((a @ b).to_dense())   # [[0, 3], [8, 0]]
```

### Binary search trees

`BinarySearchTree` keeps distinct values (duplicates are ignored) and
provides `insert`, `find`, `delete`, `minimum`, `copy`, the structural
queries `depth`, `level`, `height` and `sibling`, and the traversals
`in_order`, `pre_order` and `post_order`.

## Command-line tools

Two commands are installed; both read from standard input.

```
dsakit-search
```

reads a size, that many sorted integers and a target, then reports
where the target was found by the iterative and by the recursive
binary search.

```
dsakit-expr
```

reads one infix expression and prints its postfix and prefix forms.

## What it does not do

The structures live in memory only: nothing is saved to disk. The
graphs are unweighted and undirected, and the trees are not
self-balancing.