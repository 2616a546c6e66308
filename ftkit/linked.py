"""A singly linked list of arbitrary contents.

Nodes are exposed so a caller can hold on to one and later remove it.
Iterating a list yields the contents, front to back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = field(default=None, repr=False)


class LinkedList:
    """A singly linked list built from :class:`Node` objects."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the back and return its new node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on each content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list holding f(content) for each content.

        If f raises part way, the contents already produced are passed to
        delete (when given), front to back, and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def remove(self, node: Node, delete: Deleter = None) -> None:
        """Unlink node from the list, passing its content to delete when given.

        Raises ValueError if node is not part of this list.
        """
        previous: Optional[Node] = None
        for current in self._nodes():
            if current is node:
                break
            previous = current
        else:
            raise ValueError("node is not in this list")
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next
        if self._tail is node:
            self._tail = previous
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each content to delete (when given), front to back."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following