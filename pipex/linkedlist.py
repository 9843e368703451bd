"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


def delete_node(node: Optional[Node], delete: Deleter) -> None:
    """Hand the node's content to delete and detach the node from its successor.

    Nothing happens when node or delete is missing.
    """
    if node is None or delete is None:
        return
    delete(node.content)
    node.next = None


class LinkedList:
    """A chain of Node objects starting at head."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Optional[Node]) -> None:
        """Make node the new head; the old list follows it."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Attach node (and any nodes chained after it) at the end."""
        if node is None:
            return
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        last = None
        for node in self._nodes():
            last = node
        return last

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, handing every content to delete when one is given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on every content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list holding f(content) for every content.

        If f raises, the contents already produced are handed to delete,
        and the exception propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result