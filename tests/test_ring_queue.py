import pytest

from egakeru.ring_queue import RingQueue


def test_fifo_order():
    q = RingQueue(4)
    for v in ["a", "b", "c"]:
        q.enqueue(v)
    assert [q.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert len(q) == 0


def test_full_queue_raises():
    q = RingQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    with pytest.raises(OverflowError):
        q.enqueue(3)
    assert len(q) == 2


def test_empty_dequeue_and_peek_raise():
    q = RingQueue(2)
    with pytest.raises(IndexError):
        q.dequeue()
    with pytest.raises(IndexError):
        q.peek()


def test_peek_does_not_remove():
    q = RingQueue(3)
    q.enqueue("x")
    assert q.peek() == "x"
    assert len(q) == 1
    assert q.dequeue() == "x"


def test_wraps_around():
    q = RingQueue(3)
    out = []
    for v in range(10):
        q.enqueue(v)
        if len(q) == q.capacity:
            out.append(q.dequeue())
    while len(q):
        out.append(q.dequeue())
    assert out == list(range(10))


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        RingQueue(0)