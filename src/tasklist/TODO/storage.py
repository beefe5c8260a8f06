# TODO/storage.py
import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from tasklist.TODO.model import Task

logger = logging.getLogger(__name__)

JSON_FILE = Path("tasklist.json")


class PersistenceError(Exception):
    """The task file could not be read or written."""


def load_tasks(path: Union[str, Path] = JSON_FILE) -> List[Task]:
    """
    Read every task from the JSON file.
    A missing file is an empty list; anything unreadable raises PersistenceError.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No task file at %s, starting empty", path)
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise PersistenceError(f"{path} is not valid JSON: {e}") from e
    except OSError as e:
        raise PersistenceError(f"Could not read {path}: {e}") from e

    if not isinstance(raw, list):
        raise PersistenceError(f"{path} must contain a list of tasks")

    tasks = []
    for position, entry in enumerate(raw, start=1):
        try:
            tasks.append(Task.from_dict(entry))
        except ValueError as e:
            raise PersistenceError(f"{path}: task {position} is malformed ({e})") from e

    logger.info("Loaded %d task(s) from %s", len(tasks), path)
    return tasks


def save_tasks(tasks: Iterable[Task], path: Union[str, Path] = JSON_FILE) -> None:
    """Overwrite the JSON file with the given tasks."""
    path = Path(path)
    data = [task.to_dict() for task in tasks]
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4)
    except OSError as e:
        raise PersistenceError(f"Could not write {path}: {e}") from e
    logger.info("Saved %d task(s) to %s", len(data), path)
