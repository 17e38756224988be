"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass
class Node:
    """One link of a list: its content and the link after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its head, its tail and its length."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Add ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Add ``content`` at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or ``None`` for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def pop_front(self, deleter: Deleter = None) -> Any:
        """Remove the first node, hand its content to ``deleter`` and return it."""
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        if deleter is not None:
            deleter(node.content)
        return node.content

    def clear(self, deleter: Deleter = None) -> None:
        """Remove every node, front to back, handing each content to ``deleter``."""
        while self.head is not None:
            self.pop_front(deleter)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], deleter: Deleter = None) -> "LinkedList":
        """Return a new list of ``func(content)`` for every content.

        If ``func`` fails, the contents built so far are handed to
        ``deleter`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(deleter)
            raise
        return result