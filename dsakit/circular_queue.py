"""A fixed-capacity FIFO queue stored in a ring of slots."""

import sys

DEFAULT_SIZE = 4


class QueueOverflow(Exception):
    """Raised when enqueueing onto a full queue."""


class QueueUnderflow(Exception):
    """Raised when dequeueing from an empty queue."""


class CircularQueue:
    """A bounded queue whose slots wrap around."""

    def __init__(self, size=DEFAULT_SIZE):
        if size < 1:
            raise ValueError("queue size must be positive")
        self.size = size
        self._slots = [None] * size
        self._front = 0
        self._count = 0

    def enqueue(self, value):
        if self._count == self.size:
            raise QueueOverflow("Queue Overflow")
        self._slots[(self._front + self._count) % self.size] = value
        self._count += 1

    def dequeue(self):
        if self._count == 0:
            raise QueueUnderflow("Queue underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._count -= 1
        self._front = (self._front + 1) % self.size if self._count else 0
        return value

    def __iter__(self):
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % self.size]

    def __len__(self):
        return self._count

    def is_empty(self):
        return self._count == 0


def main(argv=None):
    """Run the interactive queue menu on standard input."""
    queue = CircularQueue()
    tokens = (token for line in sys.stdin for token in line.split())
    while True:
        print("\n1.ENQUEUE-INSERT\n2.DEQUEUE-DELETE\n3.DISPLAY\n4.EXIT")
        print("Enter the choice:", end="", flush=True)
        choice = next(tokens, "4")
        if choice == "4":
            return 0
        try:
            if choice == "1":
                print("Enqueue-Insertion Operation")
                if len(queue) == queue.size:
                    raise QueueOverflow("Queue Overflow")
                print("Enter the element:", end="", flush=True)
                queue.enqueue(int(next(tokens)))
            elif choice == "2":
                print("Dequeue-Deletion Operation")
                print(f"The dequeued element is {queue.dequeue()}")
            elif choice == "3":
                print("Display Operation")
                if queue.is_empty():
                    print("Queue is empty")
                else:
                    print("Elements in a Queue are:" + "\t".join(map(str, queue)))
            else:
                print("INVALID CHOICE")
        except (QueueOverflow, QueueUnderflow) as exc:
            print(exc)
        except ValueError:
            print("INVALID ELEMENT")
        except StopIteration:
            return 0