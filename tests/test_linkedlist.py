import pytest

from minift.linkedlist import LinkedList, Node


def test_init_keeps_order():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.push_front("a")
    assert list(lst) == ["a", "b", "c"]
    assert lst.head is node


def test_push_back_appends():
    lst = LinkedList(["a"])
    node = lst.push_back("b")
    assert list(lst) == ["a", "b"]
    assert lst.last() is node


def test_push_front_on_empty_becomes_head_and_last():
    lst = LinkedList()
    node = lst.push_front(7)
    assert lst.head is node
    assert lst.last() is node


def test_len_counts_nodes():
    lst = LinkedList(range(5))
    lst.push_front(-1)
    lst.push_back(5)
    assert len(lst) == 7


def test_last_returns_node_with_content():
    lst = LinkedList(["x", "y", "z"])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == "z"
    assert tail.next is None


def test_clear_calls_delete_in_order_and_empties():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_each_content():
    seen = []
    LinkedList(["p", "q"]).iterate(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value + 100

    original = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        original.map(func, deleted.append)
    assert deleted == [101, 102]
    assert list(original) == [1, 2, 3, 4]


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str)) == []