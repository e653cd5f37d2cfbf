import pytest

from prique.dynamic_array import DynamicArray
from prique.pair import Pair


def make(*keys):
    array = DynamicArray()
    for key in keys:
        array.push_back(Pair(key, f"v{key}"))
    return array


def test_push_back_keeps_order():
    array = make(1, 2, 3)
    assert [p.key for p in array] == [1, 2, 3]
    assert len(array) == 3


def test_push_front_reverses():
    array = DynamicArray()
    for key in (1, 2, 3):
        array.push_front(Pair(key, "x"))
    assert [p.key for p in array] == [3, 2, 1]


def test_push_at_middle_and_end():
    array = make(1, 3)
    array.push_at(1, Pair(2, "b"))
    array.push_at(3, Pair(4, "d"))
    assert [p.key for p in array] == [1, 2, 3, 4]


def test_push_at_out_of_range():
    array = make(1)
    with pytest.raises(IndexError):
        array.push_at(2, Pair(9, "z"))


def test_capacity_starts_at_one_and_covers_size():
    array = DynamicArray()
    assert array.capacity() == 0
    array.push_back(Pair(1, "a"))
    assert array.capacity() == 1
    for key in range(2, 20):
        array.push_back(Pair(key, "a"))
        cap = array.capacity()
        assert cap >= len(array)
        assert cap & (cap - 1) == 0


def test_capacity_shrinks_when_emptied():
    array = make(*range(8))
    full = array.capacity()
    while len(array):
        array.remove_back()
        assert array.capacity() >= len(array)
    assert array.capacity() < full


def test_remove_back_and_front():
    array = make(1, 2, 3)
    assert array.remove_back().key == 3
    assert array.remove_front().key == 1
    assert [p.key for p in array] == [2]


def test_remove_at():
    array = make(1, 2, 3)
    assert array.remove_at(1).key == 2
    assert [p.key for p in array] == [1, 3]
    with pytest.raises(IndexError):
        array.remove_at(2)


@pytest.mark.parametrize("method", ["remove_back", "remove_front"])
def test_remove_from_empty(method):
    with pytest.raises(IndexError):
        getattr(DynamicArray(), method)()


def test_find_by_key():
    array = make(5, 7, 9)
    assert array.find(Pair(7, "other")) == 1
    assert array.find(Pair(8, "x")) == -1


def test_index_access_bounds():
    array = make(1, 2)
    assert array.at_position(1).key == 2
    assert array[0].key == 1
    with pytest.raises(IndexError):
        array.at_position(2)
    with pytest.raises(IndexError):
        array[-1]


def test_setitem():
    array = make(1, 2)
    array[1] = Pair(42, "z")
    assert array[1].value == "z"
    with pytest.raises(IndexError):
        array[2] = Pair(0, "a")


def test_copy_is_independent():
    array = make(1, 2, 3)
    duplicate = array.copy()
    duplicate[0].key = 100
    duplicate.push_back(Pair(4, "d"))
    assert [p.key for p in array] == [1, 2, 3]
    assert duplicate.capacity() >= array.capacity()
    assert array.copy().capacity() == array.capacity()


def test_show(capsys):
    array = DynamicArray()
    array.push_back(Pair(1, "a"))
    array.push_back(Pair(2, "b"))
    array.show()
    DynamicArray().show()
    assert capsys.readouterr().out == "[(1|a); (2|b)]\n[]\n"