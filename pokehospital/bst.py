"""Binary search tree ordered by a user supplied comparator."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


class Traversal(enum.Enum):
    """Order in which the tree's elements are visited."""

    INORDER = "inorder"
    PREORDER = "preorder"
    POSTORDER = "postorder"


@dataclass(slots=True)
class _Node(Generic[T]):
    element: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


class BinarySearchTree(Generic[T]):
    """A binary search tree that admits repeated values.

    The comparator takes two elements and returns 0 when they are equal,
    a positive number when the first is greater and a negative number when
    it is smaller. Equal elements are stored to the left.
    """

    def __init__(self, comparator: Comparator) -> None:
        if comparator is None:
            raise ValueError("a comparator is required")
        self._comparator = comparator
        self._root: Optional[_Node[T]] = None
        self._size = 0

    def insert(self, element: T) -> "BinarySearchTree[T]":
        """Insert an element and return the tree."""
        new_node = _Node(element)
        if self._root is None:
            self._root = new_node
        else:
            node = self._root
            while True:
                if self._comparator(element, node.element) <= 0:
                    if node.left is None:
                        node.left = new_node
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new_node
                        break
                    node = node.right
        self._size += 1
        return self

    def remove(self, element: T) -> T:
        """Remove the first stored element equal to ``element`` and return it.

        Raises KeyError if no equal element is stored.
        """
        parent: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            comparison = self._comparator(element, node.element)
            if comparison == 0:
                break
            parent = node
            node = node.left if comparison < 0 else node.right
        if node is None:
            raise KeyError(element)

        if node.left is not None and node.right is not None:
            replacement = self._detach_maximum_of_left(node)
            replacement.left = node.left
            replacement.right = node.right
        else:
            replacement = node.right if node.right is not None else node.left

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

        self._size -= 1
        return node.element

    @staticmethod
    def _detach_maximum_of_left(node: _Node[T]) -> _Node[T]:
        """Unlink the greatest node of ``node``'s left subtree and return it."""
        owner = node
        maximum = node.left
        assert maximum is not None
        while maximum.right is not None:
            owner = maximum
            maximum = maximum.right
        if owner is node:
            owner.left = maximum.left
        else:
            owner.right = maximum.left
        return maximum

    def find(self, element: T) -> Optional[T]:
        """Return the stored element equal to ``element``, or None."""
        node = self._root
        while node is not None:
            comparison = self._comparator(element, node.element)
            if comparison == 0:
                return node.element
            node = node.left if comparison < 0 else node.right
        return None

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self._walk(Traversal.INORDER)

    def _walk(self, order: Traversal) -> Iterator[T]:
        if order is Traversal.INORDER:
            return self._inorder()
        if order is Traversal.PREORDER:
            return self._preorder()
        if order is Traversal.POSTORDER:
            return self._postorder()
        raise ValueError(f"unknown traversal: {order!r}")

    def _inorder(self) -> Iterator[T]:
        stack: List[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.element
            node = node.right

    def _preorder(self) -> Iterator[T]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.element
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _postorder(self) -> Iterator[T]:
        stack = [(self._root, False)] if self._root is not None else []
        while stack:
            node, visited = stack.pop()
            if visited:
                yield node.element
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def for_each(self, order: Traversal, function: Callable[[T], bool]) -> int:
        """Call ``function`` on each element in ``order`` until it returns False.

        Returns how many times the function was called.
        """
        calls = 0
        for element in self._walk(order):
            calls += 1
            if not function(element):
                break
        return calls

    def to_list(self, order: Traversal, limit: Optional[int] = None) -> List[T]:
        """Return the elements in ``order``, at most ``limit`` of them."""
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")
        result: List[T] = []
        if limit == 0:
            return result
        for element in self._walk(order):
            result.append(element)
            if limit is not None and len(result) >= limit:
                break
        return result