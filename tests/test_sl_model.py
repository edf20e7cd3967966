"""Tests for the singly linked list model."""

import pytest

from core.errors import OutOfRangeError
from linklist.sl_model import LinkedList


def values_of(linked_list):
    return [linked_list.get(i) for i in range(linked_list.length())]


class TestQueries:
    def test_new_list_is_empty(self):
        linked_list = LinkedList()
        assert linked_list.length() == 0
        assert linked_list.head is None
        assert list(linked_list.items()) == []

    def test_get_on_empty_list_is_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            LinkedList().get(0)

    @pytest.mark.parametrize("index", [3, 10, -1])
    def test_get_outside_bounds_is_out_of_range(self, index):
        linked_list = LinkedList([1, 2, 3])
        with pytest.raises(OutOfRangeError):
            linked_list.get(index)

    def test_out_of_range_is_an_index_error(self):
        with pytest.raises(IndexError):
            LinkedList().get(0)

    def test_items_enumerates_index_value_pairs_lazily(self):
        linked_list = LinkedList(["a", "b"])
        items = linked_list.items()
        assert next(items) == (0, "a")
        assert next(items) == (1, "b")
        with pytest.raises(StopIteration):
            next(items)

    def test_len_and_iter_follow_the_chain(self):
        linked_list = LinkedList([4, 5, 6])
        assert len(linked_list) == 3
        assert list(linked_list) == [4, 5, 6]
        assert repr(linked_list) == "LinkedList([4, 5, 6])"


class TestAppendInsert:
    def test_append_adds_at_tail(self):
        linked_list = LinkedList()
        linked_list.append(1)
        linked_list.append(2)
        assert values_of(linked_list) == [1, 2]

    def test_insert_between_append_scenario(self):
        linked_list = LinkedList()
        linked_list.append(1)
        linked_list.append(2)
        linked_list.insert(1, 99)
        assert linked_list.get(0) == 1
        assert linked_list.get(1) == 99
        assert linked_list.get(2) == 2
        assert linked_list.length() == 3

    @pytest.mark.parametrize("initial", [[], [7], [7, 8, 9]])
    def test_insert_at_zero_becomes_head(self, initial):
        linked_list = LinkedList(initial)
        before = linked_list.length()
        linked_list.insert(0, "v")
        assert linked_list.get(0) == "v"
        assert linked_list.length() == before + 1

    def test_insert_at_length_appends(self):
        linked_list = LinkedList([1, 2])
        linked_list.insert(2, 3)
        assert values_of(linked_list) == [1, 2, 3]

    @pytest.mark.parametrize("index", [4, 100, -1])
    def test_insert_past_length_fails_without_mutation(self, index):
        linked_list = LinkedList([1, 2, 3])
        with pytest.raises(OutOfRangeError):
            linked_list.insert(index, 42)
        assert values_of(linked_list) == [1, 2, 3]

    @pytest.mark.parametrize("operation", ["insert", "delete"])
    def test_error_names_the_requested_index(self, operation):
        linked_list = LinkedList([1])
        args = (5, 0) if operation == "insert" else (5,)
        with pytest.raises(OutOfRangeError, match="index 5 is out of range"):
            getattr(linked_list, operation)(*args)

    def test_insert_past_end_of_empty_list(self):
        linked_list = LinkedList()
        with pytest.raises(OutOfRangeError):
            linked_list.insert(1, 42)
        assert linked_list.length() == 0


class TestDelete:
    @pytest.mark.parametrize("index", [0, 2, 4])
    def test_delete_shifts_later_elements(self, index):
        linked_list = LinkedList([10, 11, 12, 13, 14])
        before = values_of(linked_list)

        removed = linked_list.delete(index)

        assert removed == before[index]
        assert linked_list.length() == len(before) - 1
        for j in range(index):
            assert linked_list.get(j) == before[j]
        for j in range(index, linked_list.length()):
            assert linked_list.get(j) == before[j + 1]

    def test_delete_tail_makes_predecessor_terminal(self):
        linked_list = LinkedList([1, 2, 3])
        linked_list.delete(2)
        linked_list.append(4)
        assert values_of(linked_list) == [1, 2, 4]

    def test_delete_only_element_empties_list(self):
        linked_list = LinkedList(["x"])
        linked_list.delete(0)
        assert linked_list.head is None
        assert linked_list.length() == 0

    def test_delete_on_empty_list_is_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            LinkedList().delete(0)

    @pytest.mark.parametrize("index", [3, 7, -1])
    def test_delete_outside_bounds_fails_without_mutation(self, index):
        linked_list = LinkedList([1, 2, 3])
        with pytest.raises(OutOfRangeError):
            linked_list.delete(index)
        assert values_of(linked_list) == [1, 2, 3]


class TestClone:
    def test_clone_has_same_values(self):
        original = LinkedList([3, 1, 4, 1, 5])
        copied = original.clone()
        assert values_of(copied) == values_of(original)

    def test_clone_shares_no_nodes(self):
        original = LinkedList([1, 2, 3])
        copied = original.clone()

        original_nodes = []
        node = original.head
        while node is not None:
            original_nodes.append(node)
            node = node.next

        node = copied.head
        while node is not None:
            assert all(node is not other for other in original_nodes)
            node = node.next

    def test_mutating_source_leaves_clone_alone(self):
        original = LinkedList([1, 2, 3])
        copied = original.clone()

        original.append(4)
        original.delete(0)

        assert values_of(original) == [2, 3, 4]
        assert values_of(copied) == [1, 2, 3]

    def test_mutating_clone_leaves_source_alone(self):
        original = LinkedList([1, 2, 3])
        copied = original.clone()

        copied.insert(0, 0)
        copied.delete(3)

        assert values_of(copied) == [0, 1, 2]
        assert values_of(original) == [1, 2, 3]

    def test_clone_of_empty_list(self):
        copied = LinkedList().clone()
        assert copied.length() == 0
        copied.append(1)
        assert values_of(copied) == [1]


class TestClearAndSnapshot:
    def test_clear_unlinks_every_node(self):
        linked_list = LinkedList([1, 2, 3])
        first = linked_list.head
        second = first.next

        linked_list.clear()

        assert linked_list.head is None
        assert first.next is None
        assert second.next is None

    def test_snapshot_ids_are_unique_and_stable(self):
        linked_list = LinkedList(["a", "b"])
        before = linked_list.snapshot()
        linked_list.insert(1, "c")
        after = linked_list.snapshot()

        assert [item["value"] for item in after] == ["a", "c", "b"]
        assert after[0]["id"] == before[0]["id"]
        assert after[2]["id"] == before[1]["id"]
        assert len({item["id"] for item in after}) == 3
