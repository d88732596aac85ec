"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList", "delete_node"]


@dataclass(eq=False)
class Node:
    """One link: a payload and the link after it."""

    content: Any
    next: Node | None = None


def delete_node(node: Node | None, release: Callable[[Any], object] | None) -> None:
    """Hand ``node``'s content to ``release`` and detach the node.

    Nothing happens when either argument is ``None``.
    """
    if node is None or release is None:
        return
    release(node.content)
    node.next = None


class LinkedList:
    """Singly linked list addressed through its head node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the final node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, release: Callable[[Any], object] | None = None) -> None:
        """Empty the list, passing each content to ``release`` in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content