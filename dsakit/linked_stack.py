"""An unbounded LIFO stack built from singly linked nodes."""

import sys
from dataclasses import dataclass
from typing import Any, Optional


class StackUnderflow(IndexError):
    """Raised when reading or removing from an empty stack."""


@dataclass
class _Node:
    value: Any
    below: Optional["_Node"] = None


class LinkedStack:
    """A stack whose elements are chained from the top down."""

    def __init__(self):
        self._top = None
        self._count = 0

    def push(self, value):
        self._top = _Node(value, self._top)
        self._count += 1

    def pop(self):
        value = self.top()
        self._top = self._top.below
        self._count -= 1
        return value

    def top(self):
        if self._top is None:
            raise StackUnderflow("The stack is empty")
        return self._top.value

    def is_empty(self):
        return self._top is None

    def clear(self):
        self._top = None
        self._count = 0

    def __iter__(self):
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __len__(self):
        return self._count


def main(argv=None):
    """Run the interactive stack menu on standard input."""
    tokens = (token for line in sys.stdin for token in line.split())
    stack = LinkedStack()
    print("\n1.Push\n2.Pop\n3.Top\n4.Empty\n5.Exit\n6.Display\n7.Stackcount\n8.Destroy")
    while True:
        print("Enter the choice:")
        choice = next(tokens, "5")
        if choice == "5":
            return 0
        if choice == "1":
            print("Enter the data:")
            raw = next(tokens, None)
            if raw is None:
                return 0
            try:
                stack.push(int(raw))
            except ValueError:
                print("The data is invalid")
        elif choice == "2":
            print(f"popped value={stack.pop()}" if stack else "Error:Trying to pop from empty stack")
        elif choice == "3":
            print(f"The top element in the stack is:{stack.top()}" if stack else "The stack is empty")
        elif choice == "4":
            print(f"stack is not empty and contains {len(stack)} elements" if stack else "stack is empty")
        elif choice == "6":
            print(" ".join(map(str, stack)) if stack else "stack is empty!!")
        elif choice == "7":
            print(f"The number of elements in stack={len(stack)}")
        elif choice == "8":
            stack.clear()
            print("All stack elements destroyed")
        else:
            print("The choice is invalid")