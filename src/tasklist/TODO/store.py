# TODO/store.py
import logging
from datetime import date
from typing import Iterable, Iterator, List, Optional

from tasklist.TODO.model import Task

logger = logging.getLogger(__name__)


class TaskList:
    """Tasks in insertion order, addressed by 1-based display number."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, number: int) -> Task:
        return self._tasks[self._position(number)]

    def is_valid_number(self, number: int) -> bool:
        return 1 <= number <= len(self._tasks)

    def _position(self, number: int) -> int:
        if not self.is_valid_number(number):
            raise IndexError(f"task number {number} is out of range (1-{len(self._tasks)})")
        return number - 1

    def add(self, task: Task) -> int:
        """Append a task and return its display number."""
        self._tasks.append(task)
        logger.info("Added task %d (%s %s %s)", len(self._tasks), task.priority, task.date, task.time)
        return len(self._tasks)

    def remove(self, number: int) -> Task:
        """Delete the task shown as `number`; later tasks move up by one."""
        task = self._tasks.pop(self._position(number))
        logger.info("Deleted task %d", number)
        return task

    def edit(self, number: int, attribute: str, value: str) -> Task:
        """Replace one already-validated field of a task in place."""
        if attribute not in ("priority", "date", "time", "content"):
            raise ValueError(f"Unknown task field: {attribute}")
        task = self[number]
        setattr(task, attribute, value)
        logger.info("Edited task %d: %s", number, attribute)
        return task

    def refresh_due_tags(self, today: Optional[date] = None) -> None:
        """Recompute every due tag; called right before the table is shown."""
        for task in self._tasks:
            task.update_due_tag(today)
