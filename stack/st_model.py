import itertools
from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from core.errors import EmptyContainerError

T = TypeVar("T")


class _StackNode(Generic[T]):
    __slots__ = ("node_id", "value", "below")

    def __init__(self, node_id: int, value: T, below: Optional["_StackNode[T]"]):
        self.node_id = node_id
        self.value = value
        self.below = below


class DynamicStack(Generic[T]):
    """Unbounded LIFO stack made of linked nodes; only the top is referenced."""

    def __init__(self):
        self._id_iter = itertools.count()
        self._top: Optional[_StackNode[T]] = None

    def push(self, value: T) -> Dict:
        node = _StackNode(next(self._id_iter), value, self._top)
        self._top = node
        return {"id": node.node_id, "value": value}

    def pop(self) -> T:
        if self._top is None:
            raise EmptyContainerError("stack is empty")
        old_top = self._top
        self._top = old_top.below
        old_top.below = None
        return old_top.value

    def pop_info(self) -> Dict:
        """Pop and return the removed node as an `{"id", "value"}` dict."""
        if self._top is None:
            raise EmptyContainerError("stack is empty")
        node_id = self._top.node_id
        return {"id": node_id, "value": self.pop()}

    def peek(self) -> T:
        if self._top is None:
            raise EmptyContainerError("stack is empty")
        return self._top.value

    def size(self) -> int:
        size = 0
        node = self._top
        while node is not None:
            size += 1
            node = node.below
        return size

    def is_empty(self) -> bool:
        return self._top is None

    def clear(self):
        node = self._top
        self._top = None
        while node is not None:
            below = node.below
            node.below = None
            node = below

    def snapshot(self) -> List[Dict]:
        # bottom -> top, matching the order a list-backed stack would hold
        return [{"id": node.node_id, "value": node.value} for node in self._nodes()][::-1]

    def _nodes(self) -> Iterator[_StackNode[T]]:
        node = self._top
        while node is not None:
            yield node
            node = node.below

    def __len__(self):
        return self.size()

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value
