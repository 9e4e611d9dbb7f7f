"""Fixed-capacity queues backed by a slot array: linear, circular and double-ended."""

from typing import Optional


class QueueOverflow(Exception):
    """Raised when pushing onto a full queue."""


class QueueUnderflow(Exception):
    """Raised when popping from or peeking into an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")


class LinearQueue:
    """A queue whose rear never wraps: freed slots are reused only once it empties."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._slots: list[Optional[int]] = [None] * capacity
        self._front = -1
        self._rear = -1

    def push(self, value: int) -> None:
        """Append ``value`` at the rear."""
        if self._rear == len(self._slots) - 1:
            raise QueueOverflow("queue overflow")
        if self._front == -1:
            self._front = 0
        self._rear += 1
        self._slots[self._rear] = value

    def pop(self) -> int:
        """Remove and return the front value."""
        if self._front == -1:
            raise QueueUnderflow("queue underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front += 1
        return value

    def __len__(self) -> int:
        if self._front == -1:
            return 0
        return self._rear - self._front + 1

    def front(self) -> int:
        """Return the front value without removing it."""
        if self._front == -1:
            raise QueueUnderflow("no element in the queue")
        return self._slots[self._front]

    def rear(self) -> int:
        """Return the rear value without removing it."""
        if self._rear == -1:
            raise QueueUnderflow("queue is empty")
        return self._slots[self._rear]

    def slots(self) -> list[Optional[int]]:
        """Return a copy of the slot array; unused slots are None."""
        return list(self._slots)


class _Ring:
    """Shared state of the circular structures."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._slots: list[Optional[int]] = [None] * capacity
        self._front = -1
        self._rear = -1

    @property
    def _size(self) -> int:
        return len(self._slots)

    def _is_empty(self) -> bool:
        return self._front == -1

    def _is_full(self) -> bool:
        return (self._front == 0 and self._rear == self._size - 1) or (
            self._rear == self._front - 1
        )

    def _push_back(self, value: int) -> None:
        if self._is_full():
            raise QueueOverflow("overflow")
        if self._is_empty():
            self._front = self._rear = 0
        elif self._rear == self._size - 1:
            self._rear = 0
        else:
            self._rear += 1
        self._slots[self._rear] = value

    def _pop_front(self) -> int:
        if self._is_empty():
            raise QueueUnderflow("underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        elif self._front == self._size - 1:
            self._front = 0
        else:
            self._front += 1
        return value

    def __len__(self) -> int:
        if self._is_empty():
            return 0
        if self._rear >= self._front:
            return self._rear - self._front + 1
        return self._size - self._front + self._rear + 1

    def slots(self) -> list[Optional[int]]:
        """Return a copy of the slot array; unused slots are None."""
        return list(self._slots)


class CircularQueue(_Ring):
    """A queue whose rear wraps round to reuse slots freed at the front."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def push(self, value: int) -> None:
        """Append ``value`` at the rear."""
        self._push_back(value)

    def pop(self) -> int:
        """Remove and return the front value."""
        return self._pop_front()

    def __len__(self) -> int:
        return super().__len__()

    def slots(self) -> list[Optional[int]]:
        """Return a copy of the slot array; unused slots are None."""
        return super().slots()


class CircularDeque(_Ring):
    """A double-ended queue on a circular slot array."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def push_front(self, value: int) -> None:
        """Insert ``value`` before the front."""
        if self._is_full():
            raise QueueOverflow("overflow")
        if self._is_empty():
            self._front = self._rear = 0
        elif self._front == 0:
            self._front = self._size - 1
        else:
            self._front -= 1
        self._slots[self._front] = value

    def push_back(self, value: int) -> None:
        """Append ``value`` after the rear."""
        self._push_back(value)

    def pop_front(self) -> int:
        """Remove and return the front value."""
        return self._pop_front()

    def pop_back(self) -> int:
        """Remove and return the rear value."""
        if self._is_empty():
            raise QueueUnderflow("underflow")
        value = self._slots[self._rear]
        self._slots[self._rear] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        elif self._rear == 0:
            self._rear = self._size - 1
        else:
            self._rear -= 1
        return value

    def __len__(self) -> int:
        return super().__len__()

    def slots(self) -> list[Optional[int]]:
        """Return a copy of the slot array; unused slots are None."""
        return super().slots()