"""Doubly linked list of students."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from hoersaal.student import Student


@dataclass(eq=False)
class ListNode:
    """One node of a :class:`StudentList`."""

    student: Student
    next: Optional[ListNode] = None
    prev: Optional[ListNode] = None


class StudentList:
    """A doubly linked list holding :class:`Student` records."""

    def __init__(self) -> None:
        self._front: Optional[ListNode] = None
        self._back: Optional[ListNode] = None
        self._size = 0

    def push_front(self, student: Student) -> None:
        """Insert a student at the beginning."""
        node = ListNode(student)
        if self._front is None:
            self._front = self._back = node
        else:
            node.next = self._front
            self._front.prev = node
            self._front = node
        self._size += 1

    def push_back(self, student: Student) -> None:
        """Append a student at the end."""
        node = ListNode(student)
        if self._back is None:
            self._front = self._back = node
        else:
            node.prev = self._back
            self._back.next = node
            self._back = node
        self._size += 1

    def pop_front(self) -> Student:
        """Remove and return the first student."""
        node = self._front
        if node is None:
            raise IndexError("pop from empty list")
        self._front = node.next
        if self._front is None:
            self._back = None
        else:
            self._front.prev = None
        node.next = None
        self._size -= 1
        return node.student

    def pop_back(self) -> Student:
        """Remove and return the last student."""
        node = self._back
        if node is None:
            raise IndexError("pop from empty list")
        self._back = node.prev
        if self._back is None:
            self._front = None
        else:
            self._back.next = None
        node.prev = None
        self._size -= 1
        return node.student

    def __bool__(self) -> bool:
        return self._front is not None

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[ListNode]:
        node = self._front
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Student]:
        return (node.student for node in self._nodes())

    def __reversed__(self) -> Iterator[Student]:
        node = self._back
        while node is not None:
            yield node.student
            node = node.prev

    def front(self) -> Student:
        """Return the first student without removing it."""
        if self._front is None:
            raise IndexError("list is empty")
        return self._front.student

    def back(self) -> Student:
        """Return the last student without removing it."""
        if self._back is None:
            raise IndexError("list is empty")
        return self._back.student

    def search(self, mat_nr: int) -> Optional[ListNode]:
        """Return the first node whose student has ``mat_nr``, or None."""
        return next(
            (node for node in self._nodes() if node.student.mat_nr == mat_nr), None
        )

    def remove(self, node: ListNode) -> None:
        """Unlink ``node`` from this list."""
        if not any(candidate is node for candidate in self._nodes()):
            raise ValueError("node is not part of this list")
        if node is self._front:
            self.pop_front()
        elif node is self._back:
            self.pop_back()
        else:
            assert node.prev is not None and node.next is not None
            node.prev.next = node.next
            node.next.prev = node.prev
            node.next = node.prev = None
            self._size -= 1