"""A stack built on one queue and a queue built on two stacks."""

from __future__ import annotations

from collections import deque


class QueueStack:
    """LIFO stack kept in a single FIFO queue, rotated on every push."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._queue.append(x)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> int:
        """Remove and return the top item."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top item without removing it."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Return True if the stack holds no items."""
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)


class StackQueue:
    """FIFO queue kept in two LIFO stacks."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, x: int) -> None:
        """Add ``x`` at the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> int:
        """Remove and return the front item."""
        self._refill()
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the front item without removing it."""
        self._refill()
        return self._outbox[-1]

    def empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)