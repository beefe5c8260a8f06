# TODO/table.py
from typing import Dict, Iterable, List

from rich.text import Text

from tasklist.TODO.model import Task

SIZE_BUFFER = 44  # width of the Task column

SEPARATOR = "+----+------------+-------+---+---+" + "-" * SIZE_BUFFER + "+"
HEADER = "| N  |    Date    | Time  | P | D |" + " " * 19 + "Task" + " " * 21 + "|"
EMPTY_CELLS = "|    |            |       |   |   |"

PRIORITY_COLORS: Dict[str, str] = {
    "C": "on bright_red",
    "H": "on bright_yellow",
    "N": "on bright_green",
    "L": "on bright_blue",
}
DUE_TAG_COLORS: Dict[str, str] = {
    "I": "on bright_green",
    "T": "on bright_yellow",
    "O": "on bright_red",
}


def wrap_content(content: str, width: int = SIZE_BUFFER) -> List[str]:
    """Cut every content line into `width`-sized chunks, padding the last chunk of each line."""
    chunks = []
    for line in content.split("\n"):
        for start in range(0, max(len(line), 1), width):
            chunks.append(line[start:start + width].ljust(width))
    return chunks


def _cell(letter: str, colors: Dict[str, str], blocks: bool) -> Text:
    if blocks:
        return Text(" ", style=colors.get(letter, ""))
    return Text(letter)


def render_task(number: int, task: Task, blocks: bool = True) -> Text:
    """One task as boxed rows, closed by a separator."""
    out = Text()
    for i, chunk in enumerate(wrap_content(task.content)):
        if i == 0:
            out.append(f"| {number:<2} | {task.date} | {task.time} | ")
            out.append_text(_cell(task.priority, PRIORITY_COLORS, blocks))
            out.append(" | ")
            out.append_text(_cell(task.due_tag, DUE_TAG_COLORS, blocks))
            out.append(" |")
        else:
            out.append(EMPTY_CELLS)
        out.append(chunk + "|\n")
    out.append(SEPARATOR + "\n")
    return out


def render_table(tasks: Iterable[Task], *, blocks: bool = True) -> Text:
    """
    Render the whole task list as a bordered table.

    Tasks are not modified; refresh their due tags first. With blocks=False
    the priority and due cells show their letter instead of a coloured block.
    """
    table = Text()
    table.append(f"{SEPARATOR}\n{HEADER}\n{SEPARATOR}\n")
    for number, task in enumerate(tasks, start=1):
        table.append_text(render_task(number, task, blocks=blocks))
    table.rstrip()
    return table
