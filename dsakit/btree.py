"""A B-tree holding unique keys, at most three per node."""

from __future__ import annotations

import argparse
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

MAX_KEYS = 3
MIN_KEYS = 2

DEMO_KEYS = (8, 9, 10, 11, 15, 16, 17, 18, 20, 23)


class DuplicateKeyError(ValueError):
    """Raised when a key that is already in the tree is inserted again."""


@dataclass
class _Node:
    keys: list = field(default_factory=list)
    # Always one longer than ``keys``; ``None`` marks an absent subtree.
    children: list = field(default_factory=list)


def _split(node: _Node, pos: int, key: Any, child: Optional[_Node]) -> tuple[Any, _Node]:
    """Split a full node while inserting ``key``; return the promoted key and new right node."""
    median = MIN_KEYS + 1 if pos > MIN_KEYS else MIN_KEYS
    left_keys = node.keys[:median]
    left_children = node.children[: median + 1]
    right_keys = node.keys[median:]
    right_children = [None] + node.children[median + 1 :]

    if pos <= MIN_KEYS:
        left_keys.insert(pos, key)
        left_children.insert(pos + 1, child)
    else:
        right_keys.insert(pos - median, key)
        right_children.insert(pos - median + 1, child)

    promoted = left_keys.pop()
    right_children[0] = left_children.pop()
    node.keys = left_keys
    node.children = left_children
    return promoted, _Node(right_keys, right_children)


class BTree:
    """An ordered set of keys stored in a B-tree of order four."""

    def __init__(self):
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, value) -> None:
        """Add ``value``; raise DuplicateKeyError if it is already present."""
        promoted = self._insert(value, self._root)
        if promoted is not None:
            key, right = promoted
            self._root = _Node([key], [self._root, right])
        self._size += 1

    def _insert(self, value, node: Optional[_Node]):
        if node is None:
            return value, None
        pos = bisect_left(node.keys, value)
        if pos < len(node.keys) and node.keys[pos] == value:
            raise DuplicateKeyError(f"Duplicates are not permitted: {value!r}")
        promoted = self._insert(value, node.children[pos])
        if promoted is None:
            return None
        key, child = promoted
        if len(node.keys) < MAX_KEYS:
            node.keys.insert(pos, key)
            node.children.insert(pos + 1, child)
            return None
        return _split(node, pos, key, child)

    def __iter__(self) -> Iterator:
        yield from self._walk(self._root)

    def _walk(self, node: Optional[_Node]) -> Iterator:
        if node is None:
            return
        for child, key in zip(node.children, node.keys):
            yield from self._walk(child)
            yield key
        yield from self._walk(node.children[-1])

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value) -> bool:
        node = self._root
        while node is not None:
            pos = bisect_left(node.keys, value)
            if pos < len(node.keys) and node.keys[pos] == value:
                return True
            node = node.children[pos]
        return False


def main(argv=None) -> int:
    """Build the demonstration tree and print its keys in order."""
    parser = argparse.ArgumentParser(prog="btree", description=__doc__)
    parser.parse_args(argv)
    tree = BTree()
    for key in DEMO_KEYS:
        tree.insert(key)
    print(" ".join(str(key) for key in tree))
    return 0