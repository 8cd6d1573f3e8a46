import pytest

from algopractice.linked_list import ListNode, from_values, odd_even_list


@pytest.mark.parametrize("values", [[1], [4, 9], [1, 2, 3, 4, 5], [2, 1, 3, 5, 6, 4, 7]])
def test_round_trip(values):
    assert list(from_values(values)) == values


def test_empty_list_is_none():
    assert from_values([]) is None
    assert odd_even_list(None) is None


@pytest.mark.parametrize("values", [[1], [4, 9], [1, 2, 3], [1, 2, 3, 4, 5], [2, 1, 3, 5, 6, 4, 7], list(range(20))])
def test_odd_even_order(values):
    head = odd_even_list(from_values(values))
    assert list(head) == values[::2] + values[1::2]


def test_nodes_are_reused():
    head = from_values([10, 20, 30, 40])
    originals = []
    node = head
    while node is not None:
        originals.append(node)
        node = node.next
    result = odd_even_list(head)
    relinked = []
    node = result
    while node is not None:
        relinked.append(node)
        node = node.next
    assert result is head
    assert sorted(map(id, relinked)) == sorted(map(id, originals))
    assert relinked[-1].next is None


def test_default_node():
    node = ListNode()
    assert list(node) == [0]