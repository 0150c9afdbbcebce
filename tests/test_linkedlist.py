import pytest

from algokit.linkedlist import (
    Node,
    build_list,
    remove_smaller_than_right,
    reverse,
    to_list,
)


def test_build_and_to_list_round_trip():
    values = [3, 1, 4, 1, 5]
    assert to_list(build_list(values)) == values


def test_build_empty():
    assert build_list([]) is None
    assert to_list(None) == []


def test_build_links_nodes():
    head = build_list([1, 2])
    assert head == Node(1, Node(2))


def test_reverse_round_trip():
    values = [1, 2, 3, 4]
    reversed_head = reverse(build_list(values))
    assert to_list(reversed_head) == values[::-1]
    assert to_list(reverse(reversed_head)) == values


def test_reverse_empty():
    assert reverse(None) is None


def test_remove_worked_example():
    head = build_list([12, 15, 10, 11, 5, 6, 2, 3])
    assert to_list(remove_smaller_than_right(head)) == [15, 11, 6, 3]


def test_remove_empty():
    assert remove_smaller_than_right(None) is None


@pytest.mark.parametrize(
    "values",
    [[1], [5, 4, 3, 2, 1], [1, 2, 3, 4, 5], [2, 2, 1, 2], [7, -1, 7, 0, -3]],
)
def test_remove_keeps_only_suffix_maxima(values):
    result = to_list(remove_smaller_than_right(build_list(values)))
    assert all(a >= b for a, b in zip(result, result[1:]))
    assert result[-1] == values[-1]
    assert result[0] == max(values)
    remaining = iter(values)
    assert all(item in remaining for item in result)


def test_remove_descending_is_unchanged():
    values = [5, 4, 3, 2, 1]
    assert to_list(remove_smaller_than_right(build_list(values))) == values