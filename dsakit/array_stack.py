"""A LIFO stack with a fixed capacity."""

import sys

DEFAULT_CAPACITY = 5


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackEmpty(IndexError):
    """Raised when popping from an empty stack."""


class ArrayStack:
    """A bounded stack; iteration runs from the top down."""

    def __init__(self, capacity=DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items = []

    def push(self, value):
        if self.is_full():
            raise StackOverflow("stack is full(stack overflow)")
        self._items.append(value)

    def pop(self):
        if not self._items:
            raise StackEmpty("stack is empty(stack underflow)")
        return self._items.pop()

    def __iter__(self):
        return reversed(self._items)

    def __len__(self):
        return len(self._items)

    def is_full(self):
        return len(self._items) >= self.capacity


def main(argv=None):
    """Run the interactive stack menu on standard input."""
    tokens = (token for line in sys.stdin for token in line.split())
    stack = ArrayStack()
    while True:
        print("STATIC IMPLEMENTATION OF STACK")
        print("---------------\n1.PUSH\n2.POP\n3.DISPLAY\n4.EXIT\n---------------")
        print("\n Enter your choice[1/2/3/4]:", end="", flush=True)
        choice = next(tokens, "4")
        if choice == "4":
            return 0
        try:
            if choice == "1":
                if stack.is_full():
                    raise StackOverflow("stack is full(stack overflow)")
                print("\n\n Enter the element to be pushed in stack:", end="", flush=True)
                stack.push(int(next(tokens)))
            elif choice == "2":
                print(f"\n\n Element popped from stack:{stack.pop()}")
            elif choice == "3":
                if not stack:
                    raise StackEmpty("stack is empty(stack underflow)")
                print("\n\n stack elements are:")
                for index, value in zip(range(len(stack) - 1, -1, -1), stack):
                    print(f"stack[{index}]:{value}")
            else:
                print("\n\n invalid choice")
        except (StackOverflow, StackEmpty) as exc:
            print(f"\n\n {exc}")
        except ValueError:
            print("\n\n invalid element")
        except StopIteration:
            return 0