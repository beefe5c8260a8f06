# tests/test_table.py
from datetime import date

from tasklist.TODO.model import Task
from tasklist.TODO.store import TaskList
from tasklist.TODO.table import EMPTY_CELLS, HEADER, SEPARATOR, SIZE_BUFFER, render_table, wrap_content

TODAY = date(2024, 3, 1)


def _render(tasks, blocks=False):
    task_list = TaskList(tasks)
    task_list.refresh_due_tags(TODAY)
    return render_table(task_list, blocks=blocks)


def test_layout_constants_are_80_columns() -> None:
    assert len(SEPARATOR) == 80
    assert len(HEADER) == 80
    assert len(EMPTY_CELLS) == 35


def test_short_content_is_padded() -> None:
    assert wrap_content("Buy milk") == ["Buy milk".ljust(SIZE_BUFFER)]


def test_long_line_is_cut_into_fixed_chunks() -> None:
    content = "a" * SIZE_BUFFER + "b" * 10
    assert wrap_content(content) == ["a" * SIZE_BUFFER, "b" * 10 + " " * (SIZE_BUFFER - 10)]


def test_line_break_pads_current_line() -> None:
    chunks = wrap_content("first\nsecond")
    assert chunks == ["first".ljust(SIZE_BUFFER), "second".ljust(SIZE_BUFFER)]


def test_exact_width_line_makes_single_chunk() -> None:
    assert wrap_content("x" * SIZE_BUFFER + "\nnext") == ["x" * SIZE_BUFFER, "next".ljust(SIZE_BUFFER)]


def test_single_task_table_plain(sample_task) -> None:
    lines = _render([sample_task]).plain.split("\n")
    assert lines == [
        SEPARATOR,
        HEADER,
        SEPARATOR,
        "| 1  | 2024-03-01 | 09:05 | H | T |" + "Buy milk".ljust(SIZE_BUFFER) + "|",
        SEPARATOR,
    ]


def test_continuation_rows_and_numbering() -> None:
    tasks = [
        Task(priority="C", date="2024-02-01", time="08:00", content="x" * 50),
        Task(priority="L", date="2024-04-01", time="20:30", content="short"),
    ]
    lines = _render(tasks).plain.split("\n")
    assert lines[3] == "| 1  | 2024-02-01 | 08:00 | C | O |" + "x" * SIZE_BUFFER + "|"
    assert lines[4] == EMPTY_CELLS + "x" * 6 + " " * (SIZE_BUFFER - 6) + "|"
    assert lines[5] == SEPARATOR
    assert lines[6] == "| 2  | 2024-04-01 | 20:30 | L | I |" + "short".ljust(SIZE_BUFFER) + "|"
    assert lines[7] == SEPARATOR
    assert all(len(line) == 80 for line in lines)


def test_double_digit_index_fills_cell() -> None:
    tasks = [Task(priority="N", date="2024-03-01", time="12:00", content=str(i)) for i in range(10)]
    lines = _render(tasks).plain.split("\n")
    assert lines[-2].startswith("| 10 | 2024-03-01 |")


def test_blocks_are_coloured_spaces(sample_task) -> None:
    table = _render([sample_task], blocks=True)
    row = table.plain.split("\n")[3]
    assert row.startswith("| 1  | 2024-03-01 | 09:05 |   |   |")
    styles = {str(span.style) for span in table.spans}
    assert "on bright_yellow" in styles


def test_render_shows_due_tag_without_changing_it(sample_task) -> None:
    sample_task.due_tag = "O"
    row = render_table([sample_task], blocks=False).plain.split("\n")[3]
    assert row.startswith("| 1  | 2024-03-01 | 09:05 | H | O |")
    assert sample_task.due_tag == "O"
