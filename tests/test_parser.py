"""Tests for tally.parser module."""

from __future__ import annotations

import pytest

from tally.commands import AddTask, Bye, DeleteTask, FindTasks, ListTasks, SetCompletion
from tally.errors import InvalidFormatError, UnknownCommandError
from tally.parser import (
    INVALID_EVENT_FORMAT_ERROR_MSG,
    INVALID_NUMBER_ERROR_MSG,
    INVALID_TODO_FORMAT_ERROR_MSG,
    parse,
)
from tally.tasks import TaskType


class TestVerbs:
    """Tests for verb dispatch."""

    def test_list(self) -> None:
        """Test list ignores its argument."""
        assert parse("list") == ListTasks()
        assert parse("list everything please") == ListTasks()

    def test_verb_is_case_insensitive(self) -> None:
        """Test verbs match regardless of case."""
        assert parse("LIST") == ListTasks()
        assert parse("Todo read") == AddTask(TaskType.TODO, ("read",))

    def test_unknown_verb(self) -> None:
        """Test unrecognised verb."""
        with pytest.raises(UnknownCommandError) as exc_info:
            parse("foobar")
        assert exc_info.value.verb == "foobar"

    def test_empty_line_is_unknown(self) -> None:
        """Test an empty line has no known verb."""
        with pytest.raises(UnknownCommandError):
            parse("")

    def test_bye(self) -> None:
        """Test bye command."""
        assert parse("bye") == Bye()


class TestFind:
    """Tests for find parsing."""

    def test_query(self) -> None:
        """Test query is trimmed."""
        assert parse("find  book  ") == FindTasks("book")

    def test_query_keeps_inner_spaces(self) -> None:
        """Test multi-word query."""
        assert parse("find return book") == FindTasks("return book")

    def test_empty_query(self) -> None:
        """Test empty query is allowed."""
        assert parse("find") == FindTasks("")


class TestNumbers:
    """Tests for mark, unmark and delete parsing."""

    def test_mark(self) -> None:
        """Test mark with a number."""
        assert parse("mark 3") == SetCompletion(3, True)

    def test_unmark(self) -> None:
        """Test unmark with a number."""
        assert parse("unmark 2") == SetCompletion(2, False)

    def test_delete(self) -> None:
        """Test delete with a number."""
        assert parse("delete 1") == DeleteTask(1)

    @pytest.mark.parametrize("verb", ["mark", "unmark", "delete"])
    def test_non_numeric(self, verb: str) -> None:
        """Test non-numeric argument is a format error for every numeric verb."""
        with pytest.raises(InvalidFormatError) as exc_info:
            parse(f"{verb} abc")
        assert exc_info.value.message == INVALID_NUMBER_ERROR_MSG

    @pytest.mark.parametrize("argument", ["", "1.5", "1_000", "2 3"])
    def test_not_a_plain_integer(self, argument: str) -> None:
        """Test only plain base-10 integers are accepted."""
        with pytest.raises(InvalidFormatError):
            parse(f"mark {argument}")

    def test_huge_number(self) -> None:
        """Test a number too long to convert is a format error."""
        with pytest.raises(InvalidFormatError) as exc_info:
            parse("mark " + "1" * 5000)
        assert exc_info.value.message == INVALID_NUMBER_ERROR_MSG

    def test_negative_number_parses(self) -> None:
        """Test range checks are left to execution."""
        assert parse("delete -1") == DeleteTask(-1)


class TestTodo:
    """Tests for todo parsing."""

    def test_description(self) -> None:
        """Test todo with description."""
        assert parse("todo buy milk") == AddTask(TaskType.TODO, ("buy milk",))

    @pytest.mark.parametrize("line", ["todo", "todo ", "todo    "])
    def test_missing_description(self, line: str) -> None:
        """Test todo without description."""
        with pytest.raises(InvalidFormatError) as exc_info:
            parse(line)
        assert exc_info.value.message == INVALID_TODO_FORMAT_ERROR_MSG


class TestDeadline:
    """Tests for deadline parsing."""

    def test_description_and_date(self) -> None:
        """Test well-formed deadline."""
        assert parse("deadline return book /by 2024-03-05") == AddTask(
            TaskType.DEADLINE, ("return book", "2024-03-05")
        )

    def test_date_not_validated(self) -> None:
        """Test the date text is passed through unchecked."""
        command = parse("deadline essay /by next week")
        assert command == AddTask(TaskType.DEADLINE, ("essay", "next week"))

    @pytest.mark.parametrize(
        "line",
        [
            "deadline return book",
            "deadline return book /by",
            "deadline /by 2024-03-05",
            "deadline   /by   ",
            "deadline return book /BY 2024-03-05",
        ],
    )
    def test_malformed(self, line: str) -> None:
        """Test missing marker or empty parts."""
        with pytest.raises(InvalidFormatError) as exc_info:
            parse(line)
        assert "deadline" in exc_info.value.message

    def test_splits_on_first_marker_only(self) -> None:
        """Test a second /by stays in the date part."""
        command = parse("deadline a /by b /by c")
        assert command == AddTask(TaskType.DEADLINE, ("a", "b /by c"))


class TestEvent:
    """Tests for event parsing."""

    def test_all_parts(self) -> None:
        """Test well-formed event."""
        assert parse("event meeting /from Mon 2pm /to 4pm") == AddTask(
            TaskType.EVENT, ("meeting", "Mon 2pm", "4pm")
        )

    @pytest.mark.parametrize(
        "line",
        [
            "event meeting",
            "event meeting /from Mon 2pm",
            "event meeting /from /to 4pm",
            "event /from Mon /to Tue",
            "event meeting /from Mon /to",
        ],
    )
    def test_malformed(self, line: str) -> None:
        """Test missing marker or empty parts."""
        with pytest.raises(InvalidFormatError) as exc_info:
            parse(line)
        assert exc_info.value.message == INVALID_EVENT_FORMAT_ERROR_MSG

    def test_markers_are_textual(self) -> None:
        """Test markers split wherever they appear, in any order."""
        command = parse("event trip /to Paris /from Mon")
        assert command == AddTask(TaskType.EVENT, ("trip", "Paris", "Mon"))
