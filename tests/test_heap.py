import pytest

from sckit.heap import Heap, HeapItem

ARR = [1, 0, 4, 5, 7, 9, 8, 6, 3, 2]


def test_single_item():
    heap = Heap()
    heap.add(100, "test")
    elem = heap.pop()
    assert elem == HeapItem(100, "test")
    heap.add(100, "test")
    elem = heap.pop()
    assert elem.key == 100
    assert elem.data == "test"


def test_add_pop_interleaved():
    heap = Heap()
    for i in range(1000):
        heap.add(i, i)
        elem = heap.pop()
        assert elem.key == elem.data == i
    assert len(heap) == 0


def test_min_order():
    heap = Heap()
    for k in ARR:
        heap.add(k, k * 2)
    for i in range(10):
        elem = heap.pop()
        assert elem.key == i
        assert elem.data == i * 2


def test_max_order_with_negated_keys():
    heap = Heap()
    for k in ARR:
        heap.add(-k, k * 2)
    for i in range(10):
        elem = heap.pop()
        assert -elem.key == 9 - i
        assert elem.data == (9 - i) * 2


def test_example_priorities():
    heap = Heap()
    for priority, name in [(1, "first"), (4, "fourth"), (5, "fifth"), (3, "third"), (2, "second")]:
        heap.add(priority, name)
    names = [heap.pop().data for _ in range(5)]
    assert names == ["first", "second", "third", "fourth", "fifth"]


def test_peek_then_pop():
    heap = Heap()
    heap.add(9, 9)
    assert heap.peek() == HeapItem(9, 9)
    assert len(heap) == 1
    assert heap.pop() == HeapItem(9, 9)


def test_shuffled_input_pops_sorted():
    arr = list(range(100))
    for i in range(100):
        j = (i * 15) % 100
        arr[i], arr[j] = arr[j], arr[i]
    heap = Heap()
    for k in arr:
        heap.add(k, k)
    for i in range(100):
        elem = heap.pop()
        assert elem.key == i
        assert elem.data == i


def test_empty_heap_raises():
    heap = Heap()
    with pytest.raises(IndexError):
        heap.peek()
    with pytest.raises(IndexError):
        heap.pop()


def test_size_and_clear():
    heap = Heap()
    assert len(heap) == 0
    heap.add(1, None)
    assert len(heap) == 1
    heap.clear()
    assert len(heap) == 0
    heap.add(1, None)
    assert len(heap) == 1


def test_max_size_enforced():
    heap = Heap(3)
    for k in range(3):
        heap.add(k)
    with pytest.raises(OverflowError):
        heap.add(5)
    assert len(heap) == 3
    assert heap.pop().key == 0
    heap.add(5)
    assert len(heap) == 3


def test_negative_max_size_rejected():
    with pytest.raises(ValueError):
        Heap(-1)