import pytest

from prique.linked_list import LinkedList
from prique.pair import Pair


def make(*keys):
    items = LinkedList()
    for key in keys:
        items.push_back(Pair(key, f"v{key}"))
    return items


def keys(items):
    return [p.key for p in items]


def assert_consistent(items):
    forward = keys(items)
    assert list(reversed(forward)) == [p.key for p in reversed(items)]
    assert len(forward) == len(items)


def test_push_back_and_front():
    items = make(2, 3)
    items.push_front(Pair(1, "a"))
    assert keys(items) == [1, 2, 3]
    assert_consistent(items)


@pytest.mark.parametrize("index", range(6))
def test_push_at_every_position(index):
    items = make(0, 1, 2, 3, 4)
    items.push_at(index, Pair(99, "new"))
    assert items.at_position(index).value.value == "new"
    assert len(items) == 6
    assert [k for k in keys(items) if k != 99] == [0, 1, 2, 3, 4]
    assert_consistent(items)


def test_push_at_out_of_range():
    items = make(1)
    with pytest.raises(IndexError):
        items.push_at(2, Pair(5, "x"))


@pytest.mark.parametrize("index", range(5))
def test_remove_at_every_position(index):
    source = [10, 11, 12, 13, 14]
    items = make(*source)
    removed = items.remove_at(index)
    assert removed.key == source[index]
    assert keys(items) == source[:index] + source[index + 1:]
    assert_consistent(items)


def test_remove_at_out_of_range():
    with pytest.raises(IndexError):
        make(1, 2).remove_at(2)


def test_remove_ends():
    items = make(1, 2, 3)
    assert items.remove_back().key == 3
    assert items.remove_front().key == 1
    assert items.remove_back().key == 2
    assert items.head is None and items.tail is None
    assert len(items) == 0


@pytest.mark.parametrize("method", ["remove_back", "remove_front"])
def test_remove_from_empty(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


def test_find_and_find_index():
    items = make(4, 5, 6)
    node = items.find(Pair(5, "q"))
    assert node.value.value == "v5"
    assert items.find(Pair(7, "q")) is None
    assert items.find_index(Pair(6, "q")) == 2
    assert items.find_index(Pair(7, "q")) == len(items)
    assert LinkedList().find_index(Pair(1, "a")) == 0


def test_at_position_out_of_range():
    with pytest.raises(IndexError):
        make(1).at_position(1)


def test_unlink_middle_node():
    items = make(1, 2, 3)
    node = items.at_position(1)
    assert items.unlink(node).key == 2
    assert keys(items) == [1, 3]
    assert_consistent(items)


def test_insert_before_head_and_middle():
    items = make(2, 4)
    items.insert_before(items.head, Pair(1, "a"))
    items.insert_before(items.tail, Pair(3, "c"))
    assert keys(items) == [1, 2, 3, 4]
    assert items.head.value.key == 1
    assert_consistent(items)


def test_show(capsys):
    items = LinkedList()
    items.show()
    items.push_back(Pair(1, "a"))
    items.push_back(Pair(2, "b"))
    items.show()
    assert capsys.readouterr().out == (
        "List is empty!\n"
        "(1|a)->(2|b)->/0\n"
        "head: (1|a) tail: (2|b)\n"
        "(2|b)->(1|a)->/0\n"
        "head: (1|a) tail: (2|b)\n"
    )