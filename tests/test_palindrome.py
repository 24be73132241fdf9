import io

import pytest

from dsakit.palindrome import is_palindrome, main, normalize


@pytest.mark.parametrize("text", ["madam", "Never odd or even", "A Santa at NASA", "", " ", "x"])
def test_palindromes(text):
    assert is_palindrome(text)


@pytest.mark.parametrize("text", ["hello", "ab", "Palindrome"])
def test_not_palindromes(text):
    assert not is_palindrome(text)


def test_punctuation_counts():
    assert not is_palindrome("ab,a")


@pytest.mark.parametrize("text", ["Hello World", "  Tab\tbed\n", "MiXeD cAsE"])
def test_normalize_invariants(text):
    result = normalize(text)
    assert not any(ch.isspace() for ch in result)
    assert result == result.lower()
    assert normalize(result) == result
    assert len(result) == sum(1 for ch in text if not ch.isspace())


def test_normalize_value():
    assert normalize("Race Car") == "racecar"


def test_main_palindrome(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Step on no pets\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Palindrome\n")


def test_main_not_palindrome(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Not a palindrome\n")