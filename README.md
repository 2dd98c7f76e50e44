# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no dependencies outside the standard library.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module              | Contents |
|---------------------|----------|
| `dsakit.arrays`     | `reverse_array`, `delete_at`, `insert_at`, `concatenate`, `merge_sorted`, `traverse_recursive` |
| `dsakit.searching`  | `binary_search`, `linear_search` |
| `dsakit.sorting`    | `bubble_sort`, `insertion_sort`, `selection_sort`, `shell_sort`, `merge_sort`, `radix_sort` |
| `dsakit.singly`     | `SinglyLinkedList` |
| `dsakit.doubly`     | `DoublyLinkedList` |
| `dsakit.stacks`     | `ArrayStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.queues`     | `ArrayQueue`, `LinkedQueue`, `CircularQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.trees`      | `TreeNode`, `insert`, `search`, `inorder`, `preorder`, `postorder` |
| `dsakit.boarding`   | `Passenger`, `BoardingList`, `main` (the `dsakit-boarding` command) |

## Arrays

The functions in `dsakit.arrays` never change their input; each returns a new
list (or, for `traverse_recursive`, an iterator).

```python
from dsakit.arrays import delete_at, insert_at, merge_sorted

insert_at([1, 2, 3, 4, 5], 2, 69)    # [1, 2, 69, 3, 4, 5]
delete_at([12, 3, 45, 6, 7], 2)      # [12, 3, 6, 7]
merge_sorted([1, 3, 5], [2, 4, 6])   # [1, 2, 3, 4, 5, 6]
```

`insert_at` accepts an index from 0 up to the length (which appends);
`delete_at` accepts an index of an existing element. Anything else raises
`IndexError`. When `merge_sorted` meets equal values, it takes the one from
the second sequence first.

## Searching and sorting

`binary_search` (on ascending input) and `linear_search` return an index, or
`None` when the value is absent. Every sort function takes any iterable and
returns a new sorted list. `radix_sort` handles non-negative integers only and
raises `ValueError` if given a negative one.

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search

numbers = merge_sort([3, 5, 1, 9, 2])   # [1, 2, 3, 5, 9]
binary_search(numbers, 9)               # 4
```

## Linked lists

Both list classes use 1-based positions and are iterable and sized.
`insert_at` accepts positions from 1 to `len + 1`; `delete_at` (singly only)
accepts positions of existing nodes. The delete methods return the removed
value and raise `IndexError` on an empty list or a bad position.

```python
from dsakit.singly import SinglyLinkedList

chain = SinglyLinkedList([10, 20, 30, 40])
chain.insert_at(3, 69)
list(chain)          # [10, 20, 69, 30, 40]
chain.search(30)     # 4
chain.delete_at_end()  # 40
```

`DoublyLinkedList` also supports `reversed()` and renders itself in both
directions:

```python
from dsakit.doubly import DoublyLinkedList

chain = DoublyLinkedList([10, 20, 30, 40])
chain.format_forward()    # ' 10 -> 20 -> 30 -> 40 -> NULL'
chain.format_backward()   # ' 40 -> 30 -> 20 -> 10 -> NULL'
```

## Stacks and queues

`ArrayStack(capacity=5)` is bounded and raises `StackOverflowError` when full;
`LinkedStack` is unbounded. Popping or peeking an empty stack raises
`StackUnderflowError`, a subclass of `IndexError`.

```python
from dsakit.stacks import ArrayStack, StackOverflowError

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflowError:
    ...
```

`ArrayQueue(capacity)` and `CircularQueue(capacity)` are bounded and raise
`QueueFullError` when full; `LinkedQueue` is unbounded and also offers
`rear()`. Reading from an empty queue raises `QueueEmptyError`, a subclass of
`IndexError`. A capacity below 1 raises `ValueError`.

```python
from dsakit.queues import CircularQueue

queue = CircularQueue(3)
queue.enqueue(5)
queue.enqueue(15)
queue.dequeue()      # 5
```

## Binary search trees

```python
from dsakit.trees import insert, inorder, search

root = None
for key in (50, 30, 20, 40, 70, 60, 80):
    root = insert(root, key)
list(inorder(root))     # [20, 30, 40, 50, 60, 70, 80]
search(root, 80)        # the TreeNode holding 80
```

Inserting a key that is already present leaves the tree unchanged. `search`
returns `None` for a missing key. `preorder` and `postorder` work on any tree
built from `TreeNode` values.

## Boarding list

`BoardingList` keeps `Passenger` records in boarding-group order: a group A
passenger joins at the front, a group C passenger at the back, and any other
group right after the block of group A passengers. `format()` renders it as
`id name group -> ... -> NULL`.

The `dsakit-boarding` command prints a sample list, adds one passenger and
prints the result:

```
dsakit-boarding --group B --id 25 --name asha
```

Any of `--group`, `--id` and `--name` left out is asked for at the prompt.
Only the first letter of the group is used. The command exits with status 1
if the ID is not a number or no group is given. The list lives only for the
run of the command; nothing is saved.