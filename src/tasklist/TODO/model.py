# TODO/model.py
import re
from dataclasses import dataclass
from datetime import date as Date, datetime
from typing import Any, Callable, Dict, List, NamedTuple, Optional

PRIORITIES = ("C", "H", "N", "L")
INTEGER_RE = re.compile(r"-?\d+", re.ASCII)


def parse_int(value: str) -> Optional[int]:
    """Plain ASCII integer with an optional minus sign; no underscores, "+" or inner spaces."""
    if not INTEGER_RE.fullmatch(value):
        return None
    return int(value)


def parse_priority(value: str) -> Optional[str]:
    """Return the uppercase priority letter, or None if it is not C, H, N or L."""
    letter = value.strip().upper()
    if letter not in PRIORITIES:
        return None
    return letter


def parse_date(value: str) -> Optional[str]:
    """
    Accept yyyy-m-d with any digit count per part and return yyyy-mm-dd.
    Returns None for non-integer parts or a date that does not exist (e.g. Feb 30).
    """
    parts = value.strip().split("-")
    if len(parts) != 3:
        return None
    numbers = [parse_int(part) for part in parts]
    if None in numbers:
        return None
    year, month, day = numbers
    try:
        Date(year, month, day)
    except ValueError:
        return None
    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_time(value: str) -> Optional[str]:
    """Accept h:m with hour 0-23 and minute 0-59 and return hh:mm, else None."""
    parts = value.strip().split(":")
    if len(parts) != 2:
        return None
    numbers = [parse_int(part) for part in parts]
    if None in numbers:
        return None
    hour, minute = numbers
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None
    return f"{hour:02d}:{minute:02d}"


def parse_content(lines: List[str]) -> Optional[str]:
    """Join trimmed lines into task content, dropping blank trailing lines. None if nothing is left."""
    stripped = [line.strip() for line in lines]
    while stripped and not stripped[-1]:
        stripped.pop()
    content = "\n".join(stripped)
    if not content.strip():
        return None
    return content


@dataclass
class Task:
    priority: str
    date: str
    time: str
    content: str
    due_tag: str = "I"  # stale until update_due_tag() runs

    def update_due_tag(self, today: Optional[Date] = None) -> str:
        """Recompute the due tag against today's local date (T, I or O)."""
        if today is None:
            today = datetime.now().date()
        year, month, day = (int(part) for part in self.date.split("-"))
        days_left = (Date(year, month, day) - today).days
        if days_left == 0:
            self.due_tag = "T"
        elif days_left > 0:
            self.due_tag = "I"
        else:
            self.due_tag = "O"
        return self.due_tag

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority": self.priority,
            "date": self.date,
            "time": self.time,
            "content": self.content,
            "dueTag": self.due_tag,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """
        Build a task from its stored form, running every field through its parser.
        Raises ValueError naming the first missing or invalid field.
        """
        if not isinstance(data, dict):
            raise ValueError("task entry is not an object")

        values = {}
        for key, parser in (("priority", parse_priority), ("date", parse_date), ("time", parse_time)):
            raw = data.get(key)
            parsed = parser(raw) if isinstance(raw, str) else None
            if parsed is None:
                raise ValueError(f"invalid {key}: {raw!r}")
            values[key] = parsed

        raw_content = data.get("content")
        content = parse_content(raw_content.split("\n")) if isinstance(raw_content, str) else None
        if content is None:
            raise ValueError(f"invalid content: {raw_content!r}")

        # dueTag is recomputed before display, the stored value is not trusted
        return cls(content=content, **values)


class Field(NamedTuple):
    attribute: str
    prompt: str
    error: str
    parse: Callable[[str], Optional[str]]


FIELDS: Dict[str, Field] = {
    "priority": Field("priority", "Input the task priority (C, H, N, L):", "The input priority is invalid", parse_priority),
    "date": Field("date", "Input the date (yyyy-mm-dd):", "The input date is invalid", parse_date),
    "time": Field("time", "Input the time (hh:mm):", "The input time is invalid", parse_time),
}

CONTENT_PROMPT = "Input a new task (enter a blank line to end):"
CONTENT_ERROR = "The task is blank"
