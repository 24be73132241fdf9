# dsakit

A small collection of classic data structures. Each one also has a
command-line demo.

| Module | What it provides |
| --- | --- |
| `dsakit.btree` | `BTree`: a B-tree of order 4 (at most three keys per node). It supports `insert`, `in`, `len()` and iteration in ascending order. Inserting a key that is already present raises `DuplicateKeyError`. |
| `dsakit.bst` | `BinarySearchTree`: an unbalanced binary search tree. `preorder()`, `inorder()` and `postorder()` return lists of keys. Inserting a key that is already present does nothing. |
| `dsakit.circular_queue` | `CircularQueue(size=4)`: a fixed-size ring buffer. `enqueue` raises `QueueOverflow` when the queue is full, and `dequeue` raises `QueueUnderflow` when it is empty. Iteration runs from front to back. `is_empty()` is also provided. |
| `dsakit.disjoint_set` | `DisjointSet(elements)`: elements addressed by index. `union(a, b)` moves the component of `a` into that of `b`. `connected(a, b)` tests whether two indices share a component. `status()` lists `(element, label)` pairs. A bad index raises `IndexError`. |
| `dsakit.doubly_linked` | `DoublyLinkedList`: `push_front` and `pop_front`, with iteration forwards and through `reversed()`. Popping from an empty list raises `EmptyListError`. |
| `dsakit.palindrome` | `normalize(text)` removes whitespace and lower-cases the text. `is_palindrome(text)` checks the normalized text. |
| `dsakit.linked_stack` | `LinkedStack`: an unbounded stack with `push`, `pop`, `top`, `is_empty` and `clear`. Iteration runs from the top down. `pop` and `top` raise `StackUnderflow` when the stack is empty. |
| `dsakit.array_stack` | `ArrayStack(capacity=5)`: a bounded stack. `push` raises `StackOverflow` when the stack is full, and `pop` raises `StackEmpty` when it is empty. `is_full()` is also provided. Iteration runs from the top down. |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from dsakit.btree import BTree
from dsakit.bst import BinarySearchTree
from dsakit.circular_queue import CircularQueue
from dsakit.palindrome import is_palindrome

tree = BTree()
for key in (8, 9, 10, 11, 15, 16, 17, 18, 20, 23):
    tree.insert(key)
print(list(tree))          # keys in ascending order
print(15 in tree, len(tree))

bst = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
print(bst.preorder(), bst.inorder(), bst.postorder())

queue = CircularQueue(4)
queue.enqueue(1)
queue.enqueue(2)
print(queue.dequeue(), list(queue))   # 1 [2]

print(is_palindrome("Never odd or even"))   # True
```

## Command-line demos

```
dsakit-btree            # inserts 8 9 10 11 15 16 17 18 20 23 and prints them in order
dsakit-bst              # builds a sample tree and prints its three traversals
dsakit-circular-queue   # menu: enqueue, dequeue, display, exit
dsakit-disjoint-set     # menu: create, union, find, exit
dsakit-doubly-linked    # menu: insertion, deletion, display, exit
dsakit-palindrome       # reads one line and reports whether it is a palindrome
dsakit-linked-stack     # menu: push, pop, top, empty, exit, display, count, destroy
dsakit-array-stack      # menu: push, pop, display, exit (capacity 5)
```

The menu demos read whitespace-separated choices and integer values from
standard input. When the input runs out, the demo stops.

## What it does not do

All structures live in memory only. Nothing is saved between runs. The
interactive demos work with integers only, and they cannot delete keys
from the trees.