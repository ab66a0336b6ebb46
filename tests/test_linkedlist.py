import pytest

from basickit.linkedlist import LinkedList, Node, find_intersection


def sorted_list(values):
    result = LinkedList()
    for value in values:
        result.insert_sorted(value)
    return result


def test_constructor_keeps_order():
    values = [5, 3, 9, 1]
    assert list(LinkedList(values)) == values
    assert len(LinkedList(values)) == len(values)


def test_empty_list():
    empty = LinkedList()
    assert len(empty) == 0
    assert list(empty) == []
    assert empty.head is None and empty.tail is None


def test_push_front_and_back():
    ll = LinkedList()
    ll.push_back(2)
    ll.push_front(1)
    ll.push_back(3)
    assert list(ll) == [1, 2, 3]
    assert ll.head.value == 1
    assert ll.tail.value == 3


def test_insert_sorted_source_example():
    srcs = [3, 2, 8, 9, 1, 7]
    ll = sorted_list(srcs)
    assert list(ll) == sorted(srcs)
    assert ll.tail.value == max(srcs)


def test_insert_sorted_with_duplicates_stays_sorted():
    values = [4, 4, 1, 4, 9, 1]
    ll = sorted_list(values)
    assert list(ll) == sorted(values)


def test_delete_at_source_example():
    srcs = [3, 2, 8, 9, 1, 7]
    ll = sorted_list(srcs)
    expected = sorted(srcs)
    assert ll.delete_at(2) == expected.pop(1)
    assert list(ll) == expected
    with pytest.raises(IndexError):
        ll.delete_at(7)
    assert ll.delete_at(5) == expected.pop(4)
    assert list(ll) == expected
    assert ll.tail.value == expected[-1]


def test_delete_head_and_only_element():
    ll = LinkedList([7])
    assert ll.delete_at(1) == 7
    assert ll.head is None and ll.tail is None
    with pytest.raises(IndexError):
        ll.delete_at(1)


def test_delete_position_zero_rejected():
    ll = LinkedList([1, 2])
    with pytest.raises(IndexError):
        ll.delete_at(0)


def test_merge_source_example():
    srcs = [3, 12, 8, 19, 1, 17]
    srcs2 = [13, 22, 18, 29, 11, 27]
    l1 = sorted_list(srcs)
    l2 = sorted_list(srcs2)
    result = l1.merge(l2)
    assert result is l1
    assert list(l1) == sorted(srcs + srcs2)
    assert list(l2) == sorted(srcs2)


def test_merge_into_empty():
    l1 = LinkedList()
    l1.merge(LinkedList([1, 5, 6]))
    assert list(l1) == [1, 5, 6]


def test_reverse():
    values = [1, 2, 3, 4, 5]
    ll = LinkedList(values)
    ll.reverse()
    assert list(ll) == values[::-1]
    assert ll.tail.value == values[0]
    ll.push_back(0)
    assert list(ll)[-1] == 0


def test_reverse_short_lists():
    one = LinkedList([8])
    one.reverse()
    assert list(one) == [8]
    empty = LinkedList()
    empty.reverse()
    assert list(empty) == []


def test_nth_from_end():
    values = list(range(10, 19))
    ll = LinkedList(values)
    assert ll.nth_from_end(4) == values[-4]
    assert ll.nth_from_end(1) == values[-1]
    assert ll.nth_from_end(len(values)) == values[0]


def test_nth_from_end_too_short():
    with pytest.raises(IndexError):
        LinkedList([1, 2, 3]).nth_from_end(4)
    with pytest.raises(ValueError):
        LinkedList([1]).nth_from_end(0)


def test_middle():
    assert LinkedList([10, 20, 30]).middle() == 20
    assert LinkedList([10, 20, 30, 40]).middle() == 20
    assert LinkedList([10]).middle() == 10
    with pytest.raises(IndexError):
        LinkedList().middle()


def test_has_cycle():
    ll = LinkedList([1, 2, 3, 4, 5])
    assert ll.has_cycle() is False
    ll.tail.next = ll.head.next.next
    assert ll.has_cycle() is True


def test_self_loop_is_cycle():
    ll = LinkedList([1])
    ll.tail.next = ll.head
    assert ll.has_cycle() is True
    assert LinkedList().has_cycle() is False


def test_remove_consecutive_duplicates():
    values = [1, 1, 2, 3, 3, 3, 4, 4]
    ll = LinkedList(values)
    removed = ll.remove_consecutive_duplicates()
    assert list(ll) == sorted(set(values))
    assert removed == len(values) - len(set(values))
    assert ll.tail.value == 4
    ll.push_back(9)
    assert list(ll)[-1] == 9


def test_remove_duplicates_keeps_non_consecutive():
    ll = LinkedList([1, 2, 1])
    assert ll.remove_consecutive_duplicates() == 0
    assert list(ll) == [1, 2, 1]


def test_split_odd_even():
    values = list(range(1, 12))
    ll = LinkedList(values)
    odd, even = ll.split_odd_even()
    assert list(odd) == values[0::2]
    assert list(even) == values[1::2]
    assert list(ll) == values


def test_split_single_and_empty():
    odd, even = LinkedList([5]).split_odd_even()
    assert list(odd) == [5] and list(even) == []
    odd, even = LinkedList().split_odd_even()
    assert list(odd) == [] and list(even) == []


def test_find_intersection():
    l2 = LinkedList([10, 20, 30, 40])
    shared = l2.head.next.next
    l1 = LinkedList([1, 2])
    l1.tail.next = shared
    l1.tail = l2.tail
    assert find_intersection(l1, l2) is shared
    assert list(l1) == [1, 2, 30, 40]


def test_find_intersection_none():
    assert find_intersection(LinkedList([1, 2]), LinkedList([1, 2])) is None
    assert find_intersection(LinkedList(), LinkedList([1])) is None


def test_node_identity_equality():
    a = Node(1)
    b = Node(1)
    assert a != b
    assert a == a