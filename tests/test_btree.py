import random

import pytest

from dsakit.btree import BTree, DuplicateKeyError, main

SOURCE_KEYS = [8, 9, 10, 11, 15, 16, 17, 18, 20, 23]


def build(keys):
    tree = BTree()
    for key in keys:
        tree.insert(key)
    return tree


def test_source_keys_come_out_sorted():
    tree = build(SOURCE_KEYS)
    assert list(tree) == sorted(SOURCE_KEYS)
    assert len(tree) == len(SOURCE_KEYS)


def test_empty_tree():
    tree = BTree()
    assert list(tree) == []
    assert len(tree) == 0
    assert 8 not in tree


def test_duplicate_rejected_and_tree_unchanged():
    tree = build(SOURCE_KEYS)
    with pytest.raises(DuplicateKeyError):
        tree.insert(15)
    assert list(tree) == sorted(SOURCE_KEYS)
    assert len(tree) == len(SOURCE_KEYS)


def test_duplicate_in_single_node():
    tree = build([8])
    with pytest.raises(DuplicateKeyError):
        tree.insert(8)
    assert len(tree) == 1


def test_membership():
    tree = build(SOURCE_KEYS)
    for key in SOURCE_KEYS:
        assert key in tree
    for key in (7, 12, 19, 24):
        assert key not in tree


@pytest.mark.parametrize("seed", range(10))
def test_random_orders_stay_sorted(seed):
    rng = random.Random(seed)
    keys = rng.sample(range(1000), 200)
    tree = build(keys)
    assert list(tree) == sorted(keys)
    assert len(tree) == len(keys)
    assert all(key in tree for key in keys)


def test_descending_insertion():
    keys = list(range(50, 0, -1))
    tree = build(keys)
    assert list(tree) == sorted(keys)


def test_main_prints_sorted_keys(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.split() == [str(key) for key in sorted(SOURCE_KEYS)]