"""End-to-end runs of the console lessons with scripted input."""

import pytest

from arrayviz import arr_lesson
from core import lesson
from linklist import sl_lesson
from stack import inventory_lesson, st_lesson
from stack.inventory_lesson import InventoryItem, parse_manufacture_date
from stack.st_model import DynamicStack


def last_section(output, header="== List =="):
    return output[output.rindex(header):]


# ---------- Linked list ----------


class TestListLesson:
    def test_append_insert_copy_delete(self, console, feed_input):
        feed_input("a", "1", "a", "2", "i", "1", "99", "c", "d", "0", "q", "")

        sl_lesson.run(console)

        final = last_section(console.file.getvalue())
        assert "[0] 99" in final
        assert "[1] 2" in final
        assert "[2]" not in final

    def test_list_after_insert_is_printed_in_order(self, console, feed_input):
        feed_input("a", "1", "a", "2", "i", "1", "99", "q", "")

        sl_lesson.run(console)

        final = last_section(console.file.getvalue())
        assert final.index("[0] 1") < final.index("[1] 99") < final.index("[2] 2")

    def test_invalid_menu_choice(self, console, feed_input):
        feed_input("z", "Q", "n")

        sl_lesson.run(console)

        assert "Your choice must be a, i, d, c, or q." in console.file.getvalue()

    def test_insert_index_past_length_is_asked_again(self, console, feed_input):
        feed_input("i", "5", "0", "7", "q", "")

        sl_lesson.run(console)

        output = console.file.getvalue()
        assert "5 is not a valid index." in output
        assert "[0] 7" in last_section(output)

    def test_delete_on_empty_list(self, console, feed_input):
        feed_input("d", "q", "")

        sl_lesson.run(console)

        assert "The list is empty; there is nothing to delete." in console.file.getvalue()

    def test_delete_index_is_bounded_by_last_element(self, console, feed_input):
        feed_input("a", "4", "d", "1", "0", "q", "")

        sl_lesson.run(console)

        output = console.file.getvalue()
        assert "1 is not a valid index." in output
        assert "The list is empty." in last_section(output)

    def test_non_numeric_value_is_rejected(self, console, feed_input):
        feed_input("a", "four", "4", "q", "")

        sl_lesson.run(console)

        output = console.file.getvalue()
        assert '"four" is not a valid whole number.' in output
        assert "[0] 4" in last_section(output)

    def test_running_again_starts_with_an_empty_list(self, console, feed_input):
        feed_input("a", "1", "q", "y", "q", "n")

        sl_lesson.run(console)

        output = console.file.getvalue()
        assert output.count("The list is empty.") == 2
        assert "The list is empty." in last_section(output)


# ---------- Dynamic stack ----------


class TestDynamicStackLesson:
    def test_values_unwind_in_reverse(self, console, feed_input):
        feed_input("3", "4", "5", "-1", "")

        st_lesson.run(console)

        output = console.file.getvalue()
        assert "Unwinding your stack:" in output
        assert output.index("[3]: 5") < output.index("[2]: 4") < output.index("[1]: 3")

    def test_prompt_counts_items(self, console, feed_input):
        feed_input("8", "-1", "n")

        st_lesson.run(console)

        output = console.file.getvalue()
        assert "What value would you like for item #1? (Enter -1 to stop entering values) " in output
        assert "What value would you like for item #2? " in output

    def test_stopping_immediately_unwinds_nothing(self, console, feed_input):
        feed_input("-1", "")

        st_lesson.run(console)

        output = console.file.getvalue()
        assert "Unwinding your stack:" in output
        assert "[1]:" not in output

    def test_unwind_empties_the_stack(self, console):
        stack = DynamicStack()
        stack.push("a")
        stack.push("b")

        st_lesson.unwind(stack, console, title="Leftovers:")

        assert stack.is_empty()
        assert "Leftovers:" in console.file.getvalue()


# ---------- Inventory bin ----------


class TestInventoryLesson:
    def test_item_description(self):
        item = InventoryItem(serial_number=12, lot_number=3, manufacture_date=parse_manufacture_date("2019-02-28"))
        assert item.describe() == "Serial number: 12\nLot number: 3\nManufacture date: 2019-02-28"

    def test_default_item(self):
        assert "Manufacture date: 1970-01-01" in InventoryItem().describe()

    def test_bad_date_is_rejected(self):
        with pytest.raises(ValueError):
            parse_manufacture_date("2020-13-01")

    def test_add_take_and_list_remaining(self, console, feed_input):
        feed_input(
            "t", "",
            "a", "100", "7", "2020-05-17",
            "a", "200", "8", "bad-date", "2021-01-02",
            "t", "",
            "x",
            "e",
        )

        inventory_lesson.run(console)

        output = console.file.getvalue()
        assert "There are no items to take." in output
        assert '"bad-date" is not a valid date (use YYYY-MM-DD).' in output
        assert '"x" is not a valid option.' in output

        taken = output[output.index("You've taken the following item:"):]
        assert taken.index("Serial number: 200") < taken.index("You had the following items")

        remaining = output[output.index("You had the following items remaining in the inventory stack:"):]
        assert "Serial number: 100" in remaining
        assert "Lot number: 7" in remaining
        assert "Manufacture date: 2020-05-17" in remaining
        assert "Serial number: 200" not in remaining

    def test_remaining_items_are_separated_newest_first(self, console, feed_input):
        feed_input(
            "a", "1", "1", "2020-01-01",
            "a", "2", "2", "2020-01-02",
            "E",
        )

        inventory_lesson.run(console)

        remaining = console.file.getvalue()
        remaining = remaining[remaining.index("You had the following items"):]
        assert remaining.index("Serial number: 2") < remaining.index("--------------------")
        assert remaining.index("--------------------") < remaining.index("Serial number: 1")

    def test_negative_serial_number_is_rejected(self, console, feed_input):
        feed_input("a", "-5", "5", "1", "2020-01-01", "e")

        inventory_lesson.run(console)

        output = console.file.getvalue()
        assert '"-5" is not a valid non-negative whole number.' in output
        assert "Serial number: 5" in output

    def test_exit_with_nothing_stored(self, console, feed_input):
        feed_input("e")

        inventory_lesson.run(console)

        assert "You had no items remaining in the inventory stack." in console.file.getvalue()


# ---------- Bounded stack and queue ----------


class TestStaticLessons:
    def test_stack_unwinds_from_top(self, console, feed_input):
        feed_input("3", "10", "20", "30", "")

        arr_lesson.run_static_stack(console)

        output = console.file.getvalue()
        assert "Unwinding your stack:" in output
        assert output.index("[3]: 30") < output.index("[2]: 20") < output.index("[1]: 10")

    def test_zero_capacity_is_asked_again(self, console, feed_input):
        feed_input("0", "1", "9", "")

        arr_lesson.run_static_stack(console)

        output = console.file.getvalue()
        assert "0 is not a valid capacity: capacity must be greater than 0." in output
        assert "[1]: 9" in output

    def test_negative_capacity_is_not_a_count(self, console, feed_input):
        feed_input("-2", "1", "9", "")

        arr_lesson.run_static_stack(console)

        assert '"-2" is not a valid non-negative whole number.' in console.file.getvalue()

    def test_queue_replays_in_order(self, console, feed_input):
        feed_input("3", "1", "2", "3", "n")

        arr_lesson.run_static_queue(console)

        output = console.file.getvalue()
        assert "How many items would you like to put in the queue? " in output
        assert "Replaying your queue:" in output
        assert output.index("[1]: 1") < output.index("[2]: 2") < output.index("[3]: 3")

    def test_running_again(self, console, feed_input):
        feed_input("1", "5", "yes", "1", "6", "no")

        arr_lesson.run_static_queue(console)

        output = console.file.getvalue()
        assert output.count("Replaying your queue:") == 2
        assert "[1]: 6" in output


# ---------- Entry points ----------


class TestRunLesson:
    @pytest.fixture(autouse=True)
    def captured_console(self, console, monkeypatch):
        monkeypatch.setattr(lesson, "default_console", console)
        monkeypatch.setattr(lesson.Settings, "from_environment", classmethod(lambda cls: cls()))

    def test_success_returns_zero(self, console):
        def _lesson(active_console):
            active_console.print("done")

        assert lesson.run_lesson(_lesson) == 0
        assert "done" in console.file.getvalue()

    def test_interrupt_returns_130(self):
        def _lesson(_console):
            raise KeyboardInterrupt

        assert lesson.run_lesson(_lesson) == 130

    def test_end_of_input_returns_130(self, feed_input):
        feed_input("a")

        assert sl_lesson.main() == 130

    def test_list_lesson_entry_point(self, console, feed_input):
        feed_input("q", "n")

        assert sl_lesson.main() == 0
        assert "== List ==" in console.file.getvalue()

    def test_each_bounded_demo_has_its_own_entry_point(self, console, feed_input):
        feed_input("1", "5", "n", "1", "6", "n")

        assert arr_lesson.main_queue() == 0
        assert arr_lesson.main_stack() == 0

        output = console.file.getvalue()
        assert output.index("Replaying your queue:") < output.index("Unwinding your stack:")
