import io

import pytest

from dsakit.circular_queue import CircularQueue, QueueOverflow, QueueUnderflow, main


def test_fifo_order():
    queue = CircularQueue(4)
    values = [10, 20, 30]
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


def test_default_size_matches_source():
    queue = CircularQueue()
    assert queue.size == 4


def test_overflow_when_full():
    queue = CircularQueue(4)
    for value in range(4):
        queue.enqueue(value)
    with pytest.raises(QueueOverflow):
        queue.enqueue(99)
    assert list(queue) == list(range(4))


def test_underflow_when_empty():
    queue = CircularQueue(4)
    with pytest.raises(QueueUnderflow):
        queue.dequeue()


def test_wraparound_keeps_order():
    queue = CircularQueue(4)
    for value in (1, 2, 3, 4):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    queue.enqueue(5)
    queue.enqueue(6)
    assert list(queue) == [3, 4, 5, 6]
    assert len(queue) == 4
    with pytest.raises(QueueOverflow):
        queue.enqueue(7)


def test_many_cycles():
    queue = CircularQueue(3)
    out = []
    for value in range(30):
        queue.enqueue(value)
        if len(queue) == 3:
            out.append(queue.dequeue())
    while not queue.is_empty():
        out.append(queue.dequeue())
    assert out == list(range(30))


def test_invalid_size():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n7\n3\n2\n2\n9\n4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "The dequeued element is 7" in out
    assert "Queue underflow" in out
    assert "INVALID CHOICE" in out