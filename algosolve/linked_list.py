"""Singly linked lists and the classic algorithms that work on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    __slots__ = ("val", "next")

    def __init__(self, val: int = 0, next: ListNode | None = None) -> None:
        self.val = val
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"

    def values(self) -> list[int]:
        """Return the values from this node to the end of the list.

        Raises ``ValueError`` if the list loops back on itself.
        """
        seen: set[int] = set()
        result: list[int] = []
        node: ListNode | None = self
        while node is not None:
            if id(node) in seen:
                raise ValueError("list contains a cycle")
            seen.add(id(node))
            result.append(node.val)
            node = node.next
        return result


def _walk(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by taking over its successor. It must not be the tail."""
    if node.next is None:
        raise ValueError("cannot delete the last node this way")
    node.val = node.next.val
    node.next = node.next.next


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or ``None``."""
    in_a = set(_walk(head_a))
    return next((node for node in _walk(head_b) if node in in_a), None)


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether the list loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    values = [node.val for node in _walk(head)]
    return values == values[::-1]


def merge_two_lists(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Splice two sorted lists into one sorted list; on ties ``list2`` goes first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    nodes = list(_walk(head))
    if not 1 <= n <= len(nodes):
        raise IndexError(f"n={n} is out of range for a list of {len(nodes)}")
    if n == len(nodes):
        return nodes[0].next
    nodes[-n - 1].next = nodes[-n].next
    return head


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where the cycle begins, or ``None`` if there is no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return fast


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right and return its new head."""
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None:
        return None
    nodes = list(_walk(head))
    k %= len(nodes)
    if k == 0:
        return head
    new_head = nodes[-k]
    nodes[-k - 1].next = None
    nodes[-1].next = head
    return new_head