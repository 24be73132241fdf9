"""Palindrome check that ignores whitespace and letter case."""

from __future__ import annotations

import argparse
import sys


def normalize(text: str) -> str:
    """Drop whitespace and lower-case the rest."""
    return "".join(ch.lower() for ch in text if not ch.isspace())


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same backwards, ignoring whitespace and case."""
    processed = normalize(text)
    stack = list(processed)
    reversed_text = "".join(stack.pop() for _ in range(len(stack)))
    return processed == reversed_text


def main(argv=None) -> int:
    """Read one line from standard input and report whether it is a palindrome."""
    parser = argparse.ArgumentParser(prog="palindrome", description=__doc__)
    parser.parse_args(argv)
    print("Enter a string:", end="", flush=True)
    line = sys.stdin.readline().rstrip("\n")
    print("Palindrome" if is_palindrome(line) else "Not a palindrome")
    return 0