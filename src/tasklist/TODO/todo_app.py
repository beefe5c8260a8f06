# TODO/todo_app.py
import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from rich.console import Console

from tasklist.TODO.model import CONTENT_ERROR, CONTENT_PROMPT, FIELDS, Field, Task, parse_content, parse_int
from tasklist.TODO.storage import JSON_FILE, load_tasks, save_tasks
from tasklist.TODO.store import TaskList
from tasklist.TODO.table import render_table

logger = logging.getLogger(__name__)

ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"
FIELD_PROMPT = "Input a field to edit (priority, date, time, task):"
NO_TASKS = "No tasks have been input"
EDITABLE_FIELDS = ("priority", "date", "time", "task")


class AppState(Enum):
    RUNNING = "running"
    ENDED = "ended"


class TaskApp:
    """
    The interactive menu loop.

    `read_line` returns one line of input without its newline and raises
    EOFError when input runs out; it defaults to console.input.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        path: Union[str, Path] = JSON_FILE,
        read_line: Optional[Callable[[], str]] = None,
    ):
        self.console = console or Console(highlight=False)
        self.path = Path(path)
        self.read_line = read_line or self.console.input
        self.tasks = TaskList()
        self.state = AppState.RUNNING
        self.actions: Dict[str, Callable[[], AppState]] = {
            "add": self.add_task,
            "print": self.print_tasks,
            "edit": self.edit_task,
            "delete": self.delete_task,
            "end": self.end_app,
        }

    # -------------------- console helpers --------------------
    def say(self, message: str) -> None:
        self.console.print(message, highlight=False)

    def ask(self, prompt: str) -> str:
        self.say(prompt)
        return self.read_line()

    def ask_field(self, field: Field) -> str:
        """Repeat the field's prompt until its parser accepts the answer."""
        value = field.parse(self.ask(field.prompt))
        while value is None:
            self.say(f"[yellow]{field.error}[/yellow]")
            value = field.parse(self.ask(field.prompt))
        return value

    def ask_content(self) -> Optional[str]:
        """Read lines until a blank one; None when the result is blank."""
        self.say(CONTENT_PROMPT)
        lines: List[str] = []
        line = self.read_line().strip()
        while line:
            lines.append(line)
            line = self.read_line().strip()
        content = parse_content(lines)
        if content is None:
            self.say(f"[yellow]{CONTENT_ERROR}[/yellow]")
        return content

    def ask_task_number(self) -> int:
        """Repeat until the answer is a number between 1 and the task count."""
        while True:
            number = parse_int(self.ask(f"Input the task number (1-{len(self.tasks)}):").strip())
            if number is not None and self.tasks.is_valid_number(number):
                return number
            self.say("[yellow]Invalid task number[/yellow]")

    def show_table(self) -> None:
        self.tasks.refresh_due_tags()
        blocks = self.console.color_system is not None
        self.console.print(render_table(self.tasks, blocks=blocks), soft_wrap=True, crop=False)

    # -------------------- actions --------------------
    def add_task(self) -> AppState:
        priority = self.ask_field(FIELDS["priority"])
        date = self.ask_field(FIELDS["date"])
        time = self.ask_field(FIELDS["time"])
        content = self.ask_content()
        if content is None:
            logger.debug("Discarded new task with blank content")
            return AppState.RUNNING
        self.tasks.add(Task(priority=priority, date=date, time=time, content=content))
        return AppState.RUNNING

    def print_tasks(self) -> AppState:
        if not self.tasks:
            self.say(NO_TASKS)
            return AppState.RUNNING
        self.show_table()
        self.console.print()
        return AppState.RUNNING

    def edit_task(self) -> AppState:
        if not self.tasks:
            self.say(NO_TASKS)
            return AppState.RUNNING

        self.print_tasks()
        number = self.ask_task_number()

        name = self.ask(FIELD_PROMPT).strip()
        while name not in EDITABLE_FIELDS:
            self.say("[yellow]Invalid field[/yellow]")
            name = self.ask(FIELD_PROMPT).strip()

        if name == "task":
            content = self.ask_content()
            if content is None:
                return AppState.RUNNING
            self.tasks.edit(number, "content", content)
        else:
            field = FIELDS[name]
            self.tasks.edit(number, field.attribute, self.ask_field(field))

        self.say("[green]The task is changed[/green]")
        return AppState.RUNNING

    def delete_task(self) -> AppState:
        if not self.tasks:
            self.say(NO_TASKS)
            return AppState.RUNNING

        self.print_tasks()
        number = self.ask_task_number()
        self.tasks.remove(number)
        self.say("[green]The task is deleted[/green]")
        return AppState.RUNNING

    def end_app(self) -> AppState:
        self.say("Tasklist exiting!")
        return AppState.ENDED

    def invalid_action(self) -> AppState:
        self.say("[yellow]The input action is invalid[/yellow]")
        return AppState.RUNNING

    # -------------------- main loop --------------------
    def load(self) -> None:
        self.tasks = TaskList(load_tasks(self.path))

    def save(self) -> None:
        save_tasks(self.tasks, self.path)

    def main_menu(self) -> None:
        """Load the task file, run commands until `end`, then save once."""
        self.load()
        self.state = AppState.RUNNING
        while self.state is AppState.RUNNING:
            try:
                action = self.ask(ACTION_PROMPT).strip()
                self.state = self.actions.get(action, self.invalid_action)()
            except EOFError:
                logger.info("Input closed, ending session")
                self.state = self.end_app()
        logger.debug("Session ended with %d task(s)", len(self.tasks))
        self.save()
