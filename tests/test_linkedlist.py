import pytest

from arraylist.linkedlist import CANARY, POISON, ArrayList, ListError, Node


def _check_links(lst):
    slot = 0
    seen = 0
    while True:
        nxt = lst.nodes[slot].next
        assert lst.nodes[nxt].prev == slot
        slot = nxt
        if slot == 0:
            break
        seen += 1
    assert seen == len(lst)


def test_initial_state():
    lst = ArrayList(1)
    assert lst.capacity == 2
    assert lst.head == 0
    assert lst.tail == 0
    assert lst.free == 1
    assert len(lst) == 0
    assert lst.nodes[0].value == CANARY
    assert lst.nodes[1] == Node(-1, 0, POISON)


def test_free_chain_of_larger_list():
    lst = ArrayList(3)
    assert [n.next for n in lst.nodes[1:]] == [2, 3, 0]
    assert all(n.is_free for n in lst.nodes[1:])


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayList(0)


def test_insert_returns_slot_and_grows():
    lst = ArrayList(1)
    slot = lst.insert(0, 10)
    assert slot == 1
    assert lst.capacity == 4
    assert lst.free == 2
    assert lst.values() == [10]
    assert lst.head == 1 and lst.tail == 1


def test_insert_order():
    lst = ArrayList(1)
    a = lst.insert(0, 1)
    lst.insert(a, 2)
    lst.insert(0, 3)
    assert lst.values() == [3, 1, 2]
    assert len(lst) == 3
    _check_links(lst)


def test_insert_after_free_slot_rejected():
    lst = ArrayList(2)
    with pytest.raises(ListError, match="can't insert"):
        lst.insert(1, 5)


@pytest.mark.parametrize("index", [-1, 2, 100])
def test_insert_out_of_range(index):
    lst = ArrayList(1)
    with pytest.raises(ListError):
        lst.insert(index, 5)


def test_delete_unlinks():
    lst = ArrayList(4)
    a = lst.insert(0, 1)
    b = lst.insert(a, 2)
    lst.insert(b, 3)
    lst.delete(b)
    assert lst.values() == [1, 3]
    assert lst.nodes[b].is_free
    assert lst.nodes[b].value == POISON
    _check_links(lst)


def test_delete_lower_slot_becomes_free():
    lst = ArrayList(4)
    a = lst.insert(0, 1)
    lst.insert(a, 2)
    lst.delete(a)
    assert lst.free == a
    assert lst.insert(0, 9) == a
    assert lst.values() == [9, 2]


@pytest.mark.parametrize("index", [0, 3, 50])
def test_delete_invalid(index):
    lst = ArrayList(2)
    lst.insert(0, 1)
    with pytest.raises(ListError, match="can't delete"):
        lst.delete(index)


def test_many_inserts_keep_links():
    lst = ArrayList(1)
    for value in range(20):
        lst.insert(lst.tail, value)
    assert lst.values() == list(range(20))
    assert lst.capacity >= 21
    _check_links(lst)