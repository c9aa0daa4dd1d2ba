"""Binary min-heap ordered by a user supplied comparator."""

from __future__ import annotations

from typing import Any, Callable, Generic, List, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


class MinHeap(Generic[T]):
    """A binary heap that keeps the smallest element at its root.

    The comparator takes two elements and returns 0 when they are equal,
    a positive number when the first is greater and a negative number when
    it is smaller.
    """

    def __init__(self, comparator: Comparator) -> None:
        if comparator is None:
            raise ValueError("a comparator is required")
        self._comparator = comparator
        self._elements: List[T] = []

    def push(self, element: T) -> int:
        """Insert an element and return the new size of the heap."""
        self._elements.append(element)
        self._sift_up(len(self._elements) - 1)
        return len(self._elements)

    def pop(self) -> T:
        """Remove and return the root element.

        Raises IndexError if the heap is empty.
        """
        if not self._elements:
            raise IndexError("pop from an empty heap")
        root = self._elements[0]
        last = self._elements.pop()
        if self._elements:
            self._elements[0] = last
            self._sift_down(0)
        return root

    def __len__(self) -> int:
        return len(self._elements)

    def _swap(self, a: int, b: int) -> None:
        elements = self._elements
        elements[a], elements[b] = elements[b], elements[a]

    def _sift_up(self, position: int) -> None:
        elements = self._elements
        while position > 0:
            parent = (position - 1) // 2
            if self._comparator(elements[position], elements[parent]) > 0:
                break
            self._swap(position, parent)
            position = parent

    def _sift_down(self, position: int) -> None:
        elements = self._elements
        size = len(elements)
        while True:
            left = 2 * position + 1
            if left >= size:
                return
            right = left + 1
            child = left
            if right < size and self._comparator(elements[left], elements[right]) > 0:
                child = right
            if self._comparator(elements[position], elements[child]) <= 0:
                return
            self._swap(position, child)
            position = child