"""Disjoint sets by component labels: union relabels, find compares labels."""

import sys


class DisjointSet:
    """Elements addressed by index, each carrying the label of its component."""

    def __init__(self, elements=()):
        self.elements = list(elements)
        self._labels = list(range(len(self.elements)))

    def _check(self, *indices):
        for index in indices:
            if not 0 <= index < len(self._labels):
                raise IndexError(f"index {index} out of range")

    def union(self, a, b):
        """Merge the component of index ``a`` into that of index ``b``."""
        self._check(a, b)
        old, new = self._labels[a], self._labels[b]
        self._labels = [new if label == old else label for label in self._labels]

    def connected(self, a, b):
        self._check(a, b)
        return self._labels[a] == self._labels[b]

    def status(self):
        """Each element paired with its component label."""
        return list(zip(self.elements, self._labels))


def main(argv=None):
    """Run the interactive disjoint-set menu on standard input."""
    tokens = (token for line in sys.stdin for token in line.split())
    sets = DisjointSet()
    print("\n1.CREATE\n2.UNION\n3.FIND\n4.EXIT")
    while True:
        print("\nEnter choice:", end="", flush=True)
        choice = next(tokens, "4")
        if choice == "4":
            return 0
        try:
            if choice == "1":
                print("Enter no. of elements in set:", end="", flush=True)
                count = int(next(tokens))
                print("Enter elements in set:", end="", flush=True)
                sets = DisjointSet([int(next(tokens)) for _ in range(count)])
            elif choice == "2":
                print("\nEnter the index of elements(2 indices)which are to connected(union):")
                sets.union(int(next(tokens)), int(next(tokens)))
                print("\nElement status-after-union")
                for element, label in sets.status():
                    print(f"{element}\t\t{label}")
                print("\nElements have been successfully connected(union operation)")
            elif choice == "3":
                print("\nEnter the index of elements(2 indices)whose is to be checked(Find operation):")
                a, b = int(next(tokens)), int(next(tokens))
                word = "connected" if sets.connected(a, b) else "not connected"
                print(f"\nElements at indices {a} & {b} are {word}")
            else:
                print("\nWrong choice,please select a valid choice")
        except StopIteration:
            return 0
        except ValueError:
            print("\nInvalid number")
        except IndexError as exc:
            print(f"\n{exc}")