"""A left-leaning red-black tree ordered by a three-way comparison function."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


class Color(IntEnum):
    """Colour of a tree node."""

    BLACK = 0
    RED = 1


@dataclass
class Node(Generic[T]):
    """A tree node holding one item; new nodes start red."""

    item: T
    left: Node[T] | None = None
    right: Node[T] | None = None
    color: Color = Color.RED


def color(node: Node | None) -> Color:
    """Return the node's colour; a missing node counts as black."""
    return Color.BLACK if node is None else node.color


def _toggle(node: Node) -> None:
    node.color = Color.BLACK if node.color is Color.RED else Color.RED


def _rotate_left(node: Node) -> Node:
    pivot = node.right
    pivot.color = node.color
    node.color = Color.RED
    node.right = pivot.left
    pivot.left = node
    return pivot


def _rotate_right(node: Node) -> Node:
    pivot = node.left
    pivot.color = node.color
    node.color = Color.RED
    node.left = pivot.right
    pivot.right = node
    return pivot


def _flip_colors(node: Node) -> None:
    _toggle(node)
    if node.left is not None:
        _toggle(node.left)
    if node.right is not None:
        _toggle(node.right)


def _balance(node: Node) -> Node:
    if color(node.left) is Color.BLACK and color(node.right) is Color.RED:
        node = _rotate_left(node)
    if color(node.left) is Color.RED and color(node.left.left) is Color.RED:
        node = _rotate_right(node)
    if color(node.left) is Color.RED and color(node.right) is Color.RED:
        _flip_colors(node)
    return node


class RedBlackTree(Generic[T]):
    """Items kept unique and ordered by ``compare(stored, other)``.

    ``compare`` returns a negative number, zero or a positive number, as the
    stored item sorts before, equal to or after the other one.
    """

    def __init__(self, compare: Comparator) -> None:
        self.compare = compare
        self.root: Node[T] | None = None
        self._size = 0

    def _insert(self, node: Node[T] | None, item: T) -> tuple[Node[T], bool]:
        if node is None:
            return Node(item), True
        order = self.compare(node.item, item)
        if order > 0:
            node.left, inserted = self._insert(node.left, item)
        elif order < 0:
            node.right, inserted = self._insert(node.right, item)
        else:
            return node, False
        if inserted:
            node = _balance(node)
        return node, inserted

    def insert(self, item: T | None) -> bool:
        """Insert an item; return False if it is missing or an equal one is stored."""
        if item is None:
            return False
        self.root, inserted = self._insert(self.root, item)
        self.root.color = Color.BLACK
        if inserted:
            self._size += 1
        return inserted

    def search(self, probe: Any) -> T | None:
        """Return the first stored item (in pre-order) that compares equal to the probe."""
        if probe is None:
            return None
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if self.compare(node.item, probe) == 0:
                return node.item
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return None

    def print_all(self, printer: Callable[[T], Any]) -> None:
        """Hand every item to the printer, in order."""
        for item in self:
            printer(item)

    def print_filtered(self, probe: Any, printer: Callable[[T], Any]) -> None:
        """Hand items to the printer, in order.

        Only the root item is checked against the probe and skipped when it
        does not compare equal; the items of both subtrees are all printed.
        """
        if self.root is None:
            return
        for item in self._walk(self.root.left):
            printer(item)
        if self.compare(self.root.item, probe) == 0:
            printer(self.root.item)
        for item in self._walk(self.root.right):
            printer(item)

    def clear(self) -> None:
        """Remove every item."""
        self.root = None
        self._size = 0

    @staticmethod
    def _walk(node: Node[T] | None) -> Iterator[T]:
        stack: list[Node[T]] = []
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.item
            node = node.right

    def __iter__(self) -> Iterator[T]:
        return self._walk(self.root)

    def __len__(self) -> int:
        return self._size