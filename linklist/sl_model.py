import itertools
from typing import Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from core.errors import OutOfRangeError

T = TypeVar("T")


class ListNode(Generic[T]):
    __slots__ = ("node_id", "value", "next")

    def __init__(self, node_id: int, value: T):
        self.node_id = node_id
        self.value = value
        self.next: Optional["ListNode[T]"] = None


class LinkedList(Generic[T]):
    """
    Singly linked list that only tracks its head. Every node belongs to exactly
    one list; `clone()` is the only way to duplicate one and it never shares
    nodes with the source.
    """

    def __init__(self, values: Optional[Iterable[T]] = None):
        self._id_iter = itertools.count()
        self.head: Optional[ListNode[T]] = None
        if values is not None:
            for value in values:
                self.append(value)

    def _new_node(self, value: T) -> ListNode[T]:
        return ListNode(next(self._id_iter), value)

    # ---------- Queries ----------

    def get(self, index: int) -> T:
        return self._node_at(index).value

    def length(self) -> int:
        counter = 0
        node = self.head
        while node is not None:
            counter += 1
            node = node.next
        return counter

    def items(self) -> Iterator[Tuple[int, T]]:
        node = self.head
        index = 0
        while node is not None:
            yield index, node.value
            node = node.next
            index += 1

    def snapshot(self) -> List[Dict]:
        ordered = []
        node = self.head
        while node is not None:
            ordered.append({"id": node.node_id, "value": node.value})
            node = node.next
        return ordered

    # ---------- Mutations ----------

    def append(self, value: T) -> int:
        node = self._new_node(value)
        last = self._last_node()
        if last is None:
            self.head = node
        else:
            last.next = node
        return node.node_id

    def insert(self, index: int, value: T) -> int:
        if index < 0:
            raise OutOfRangeError(f"index {index} is out of range")

        if index == 0:
            node = self._new_node(value)
            node.next = self.head
            self.head = node
            return node.node_id

        # Resolves before anything is linked so a bad index leaves the list as-is.
        before = self._predecessor(index)
        node = self._new_node(value)
        if before.next is None:
            # index == length: new tail, nothing follows it
            before.next = node
        else:
            node.next = before.next
            before.next = node
        return node.node_id

    def delete(self, index: int) -> T:
        if index == 0:
            if self.head is None:
                raise OutOfRangeError("index 0 is out of range for an empty list")
            removed = self.head
            self.head = removed.next
            removed.next = None
            return removed.value

        before = self._predecessor(index)
        removed = before.next
        if removed is None:
            raise OutOfRangeError(f"index {index} is out of range")

        if removed.next is None:
            # tail: predecessor becomes the terminal node
            before.next = None
        else:
            before.next = removed.next
        removed.next = None
        return removed.value

    def clone(self) -> "LinkedList[T]":
        copied: "LinkedList[T]" = LinkedList()
        source = self.head
        if source is None:
            return copied

        tail = copied._new_node(source.value)
        copied.head = tail
        source = source.next
        while source is not None:
            node = copied._new_node(source.value)
            tail.next = node
            tail = node
            source = source.next
        return copied

    def clear(self):
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            node = following

    # ---------- Helpers ----------

    def _last_node(self) -> Optional[ListNode[T]]:
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _node_at(self, index: int) -> ListNode[T]:
        if index < 0 or self.head is None:
            raise OutOfRangeError(f"index {index} is out of range")
        node = self.head
        for _ in range(index):
            node = node.next
            if node is None:
                raise OutOfRangeError(f"index {index} is out of range")
        return node

    def _predecessor(self, index: int) -> ListNode[T]:
        try:
            return self._node_at(index - 1)
        except OutOfRangeError:
            raise OutOfRangeError(f"index {index} is out of range") from None

    def __len__(self):
        return self.length()

    def __iter__(self) -> Iterator[T]:
        for _, value in self.items():
            yield value

    def __repr__(self):
        return f"LinkedList([{', '.join(repr(value) for value in self)}])"
