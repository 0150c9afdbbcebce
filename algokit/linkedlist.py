"""Singly linked lists and pruning of nodes smaller than a later node."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """A singly linked list node."""

    value: Any
    next: Node | None = None


def build_list(values: Iterable[Any]) -> Node | None:
    """Build a linked list holding ``values`` in order; return its head."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = tail = node
        else:
            tail.next = node
            tail = node
    return head


def to_list(head: Node | None) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    values: list[Any] = []
    while head is not None:
        values.append(head.value)
        head = head.next
    return values


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return the new head."""
    previous: Node | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def remove_smaller_than_right(head: Node | None) -> Node | None:
    """Drop every node that has a greater value somewhere after it.

    The list is changed in place; the new head is returned.
    """
    if head is None:
        return None
    head = reverse(head)
    assert head is not None
    largest = head.value
    kept = head
    current = head.next
    while current is not None:
        if current.value < largest:
            kept.next = current.next
        else:
            largest = current.value
            kept = current
        current = current.next
    return reverse(head)