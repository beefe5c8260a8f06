# tests/conftest.py
from io import StringIO
from pathlib import Path
from typing import Callable, Iterable, List

import pytest
from rich.console import Console

from tasklist.TODO.model import Task
from tasklist.TODO.todo_app import TaskApp


class ScriptedInput:
    """Feeds canned lines to TaskApp; raises EOFError when they run out."""

    def __init__(self, lines: Iterable[str]):
        self.lines: List[str] = list(lines)

    def __call__(self) -> str:
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture()
def data_path(tmp_path: Path) -> Path:
    return tmp_path / "tasklist.json"


@pytest.fixture()
def console() -> Console:
    # No colour system: priority/due cells render as letters, markup is stripped.
    return Console(file=StringIO(), width=120, color_system=None, highlight=False)


@pytest.fixture()
def make_app(console: Console, data_path: Path) -> Callable[..., TaskApp]:
    def _make(*lines: str) -> TaskApp:
        return TaskApp(console=console, path=data_path, read_line=ScriptedInput(lines))

    return _make


@pytest.fixture()
def sample_task() -> Task:
    return Task(priority="H", date="2024-03-01", time="09:05", content="Buy milk")