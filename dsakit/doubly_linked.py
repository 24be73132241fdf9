"""A doubly linked list with insertion and deletion at the head."""

import sys
from dataclasses import dataclass
from typing import Any, Optional


class EmptyListError(IndexError):
    """Raised when removing from an empty list."""


@dataclass
class _Node:
    value: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """A doubly linked list that grows and shrinks at its head."""

    def __init__(self):
        self._head = None
        self._tail = None
        self._size = 0

    def push_front(self, value):
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def pop_front(self):
        if self._head is None:
            raise EmptyListError("List is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self):
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self):
        return self._size


def main(argv=None):
    """Run the interactive list menu on standard input."""
    tokens = (token for line in sys.stdin for token in line.split())
    items = DoublyLinkedList()
    while True:
        print("\n1.Insertion\n2.Deletion\n3.Display\n4.Exit\n\nEnter the choice:")
        choice = next(tokens, "4")
        if choice == "4":
            return 0
        try:
            if choice == "1":
                print("\nEnter the value:")
                items.push_front(int(next(tokens)))
            elif choice == "2":
                print(f"{items.pop_front()} is deleted")
            elif choice == "3":
                print("".join(f"{value}-->" for value in items) if items else "\nList is empty")
            else:
                print("\nInvalid option")
        except EmptyListError:
            print("\nList is empty")
        except ValueError:
            print("\nInvalid value")
        except StopIteration:
            return 0