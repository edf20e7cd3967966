import operator
from typing import Any, Dict, Generic, List, Optional, TypeVar

from core.errors import CapacityExceededError, EmptyContainerError, InvalidCapacityError

T = TypeVar("T")


class FixedArray(Generic[T]):
    """
    Contiguous buffer of a fixed capacity. Occupied slots are always
    `[0, size)`; freed slots are reset to None so no stale reference is kept.
    """

    kind = "array"

    def __init__(self, capacity: int):
        capacity = operator.index(capacity)
        if capacity <= 0:
            raise InvalidCapacityError("capacity must be greater than 0")
        self._buffer: List[Optional[T]] = [None] * capacity
        self._size = 0

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._buffer)

    def is_full(self) -> bool:
        return self._size == len(self._buffer)

    def is_empty(self) -> bool:
        return self._size == 0

    def snapshot(self) -> List[Dict[str, Any]]:
        return [
            {"index": index, "value": self._buffer[index]}
            for index in range(self._size)
        ]

    def _write_next(self, value: T):
        if self.is_full():
            raise CapacityExceededError(f"{self.kind} is full")
        self._buffer[self._size] = value
        self._size += 1

    def _require_items(self):
        if self.is_empty():
            raise EmptyContainerError(f"{self.kind} is empty")

    def __len__(self):
        return self._size

    def __repr__(self):
        values = ", ".join(repr(self._buffer[i]) for i in range(self._size))
        return f"{type(self).__name__}([{values}], capacity={self.capacity()})"


class StaticStack(FixedArray[T]):
    kind = "stack"

    def push(self, value: T):
        self._write_next(value)

    def pop(self) -> T:
        self._require_items()
        self._size -= 1
        value = self._buffer[self._size]
        self._buffer[self._size] = None
        return value  # type: ignore[return-value]

    def peek(self) -> T:
        self._require_items()
        return self._buffer[self._size - 1]  # type: ignore[return-value]


class StaticQueue(FixedArray[T]):
    """
    Bounded FIFO queue. The front is always slot 0, so dequeue shifts the
    remaining elements one slot to the left.
    """

    kind = "queue"

    def enqueue(self, value: T):
        self._write_next(value)

    def dequeue(self) -> T:
        self._require_items()
        value = self._buffer[0]
        self._size -= 1
        for index in range(self._size):
            self._buffer[index] = self._buffer[index + 1]
        self._buffer[self._size] = None
        return value  # type: ignore[return-value]

    def peek(self) -> T:
        self._require_items()
        return self._buffer[0]  # type: ignore[return-value]
