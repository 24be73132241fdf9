"""An unbalanced binary search tree with the three depth-first traversals."""

from dataclasses import dataclass
from typing import Any, Optional

DEMO_KEYS = (50, 30, 20, 40, 70, 60, 80)


@dataclass
class _Node:
    key: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _walk(node, order):
    if node is None:
        return
    if order == "pre":
        yield node.key
    yield from _walk(node.left, order)
    if order == "in":
        yield node.key
    yield from _walk(node.right, order)
    if order == "post":
        yield node.key


class BinarySearchTree:
    """A binary search tree; inserting a key already present does nothing."""

    def __init__(self, keys=()):
        self._root = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key):
        """Insert ``key`` unless it is already in the tree."""
        if self._root is None:
            self._root = _Node(key)
            self._size = 1
            return
        node = self._root
        while key != node.key:
            side = "left" if key < node.key else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, _Node(key))
                self._size += 1
                return
            node = child

    def preorder(self):
        return list(_walk(self._root, "pre"))

    def inorder(self):
        return list(_walk(self._root, "in"))

    def postorder(self):
        return list(_walk(self._root, "post"))

    def __len__(self):
        return self._size


def main(argv=None):
    """Build the demonstration tree and print its three traversals."""
    tree = BinarySearchTree(DEMO_KEYS)
    for title, keys in (("Preorder", tree.preorder()), ("Inorder", tree.inorder()),
                        ("Postorder", tree.postorder())):
        print(f"{title} Traversal Of Binary Search Tree")
        print(*keys, sep="\n")
    return 0