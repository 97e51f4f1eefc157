"""Persistent study data: sessions, todos, reminders and flashcard decks."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, ClassVar

from .flashcard import Deck

DEFAULT_DATA_PATH = "study_data.json"

_DATE_FORMAT = "%Y-%m-%d"
_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_U32_MAX = 2**32 - 1
_PERIOD_NAMES = ("OneDay", "ThreeDays", "OneWeek", "Custom")


def _now_str() -> str:
    return datetime.now().strftime(_DATETIME_FORMAT)


def _get(data: Any, key: str, what: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be an object")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing {what} field {key!r}") from None


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name!r} must be a non-negative integer")
    return value


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name!r} must be a number")
    return float(value)


def _as_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name!r} must be a string")
    return value


def _as_opt_str(value: Any, name: str) -> str | None:
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{name!r} must be a string or null")
    return value


def _as_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name!r} must be a boolean")
    return value


def _as_list(value: Any, name: str) -> list[Any]:
    if not isinstance(value, list):
        raise ValueError(f"{name!r} must be a list")
    return value


@dataclass
class StudySession:
    """Minutes studied on one day, optionally under a description."""

    date: str
    minutes: float
    description: str | None = None

    def _to_dict(self) -> dict[str, Any]:
        return {"date": self.date, "minutes": self.minutes, "description": self.description}

    @classmethod
    def _from_dict(cls, data: Any) -> StudySession:
        return cls(
            date=_as_str(_get(data, "date", "session"), "date"),
            minutes=_as_float(_get(data, "minutes", "session"), "minutes"),
            description=_as_opt_str(_get(data, "description", "session"), "description"),
        )


@dataclass
class Todo:
    """A to-do item."""

    id: int
    text: str
    completed: bool = False
    created_at: str = field(default_factory=_now_str)

    def _to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "created_at": self.created_at,
        }

    @classmethod
    def _from_dict(cls, data: Any) -> Todo:
        return cls(
            id=_as_int(_get(data, "id", "todo"), "id"),
            text=_as_str(_get(data, "text", "todo"), "text"),
            completed=_as_bool(_get(data, "completed", "todo"), "completed"),
            created_at=_as_str(_get(data, "created_at", "todo"), "created_at"),
        )


@dataclass(frozen=True)
class NotificationPeriod:
    """How long before a reminder's due date to notify.

    The name is one of OneDay, ThreeDays, OneWeek or Custom; only Custom carries days.
    """

    name: str
    days: int | None = None

    ONE_DAY: ClassVar[NotificationPeriod]
    THREE_DAYS: ClassVar[NotificationPeriod]
    ONE_WEEK: ClassVar[NotificationPeriod]

    def __post_init__(self) -> None:
        if self.name not in _PERIOD_NAMES:
            raise ValueError(f"unknown notification period {self.name!r}")
        if self.name == "Custom":
            days = self.days
            if isinstance(days, bool) or not isinstance(days, int) or not 0 <= days <= _U32_MAX:
                raise ValueError("a custom notification period needs a day count")
        elif self.days is not None:
            raise ValueError(f"notification period {self.name!r} takes no day count")

    def to_json(self) -> Any:
        """Return the stored form: the name, or {"Custom": days}."""
        if self.name == "Custom":
            return {"Custom": self.days}
        return self.name

    @classmethod
    def from_json(cls, value: Any) -> NotificationPeriod:
        """Parse the stored form; raises ValueError if malformed."""
        if isinstance(value, str):
            if value == "Custom":
                raise ValueError("a custom notification period needs a day count")
            return cls(value)
        if isinstance(value, dict) and len(value) == 1 and "Custom" in value:
            return cls("Custom", value["Custom"])
        raise ValueError(f"invalid notification period {value!r}")


NotificationPeriod.ONE_DAY = NotificationPeriod("OneDay")
NotificationPeriod.THREE_DAYS = NotificationPeriod("ThreeDays")
NotificationPeriod.ONE_WEEK = NotificationPeriod("OneWeek")


@dataclass
class Reminder:
    """Something due on a date, with the periods to be notified ahead."""

    id: int
    title: str
    description: str | None
    due_date: str
    created_at: str = field(default_factory=_now_str)
    notification_periods: list[NotificationPeriod] = field(default_factory=list)
    is_completed: bool = False

    def _to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "due_date": self.due_date,
            "created_at": self.created_at,
            "notification_periods": [p.to_json() for p in self.notification_periods],
            "is_completed": self.is_completed,
        }

    @classmethod
    def _from_dict(cls, data: Any) -> Reminder:
        periods = _as_list(_get(data, "notification_periods", "reminder"), "notification_periods")
        return cls(
            id=_as_int(_get(data, "id", "reminder"), "id"),
            title=_as_str(_get(data, "title", "reminder"), "title"),
            description=_as_opt_str(_get(data, "description", "reminder"), "description"),
            due_date=_as_str(_get(data, "due_date", "reminder"), "due_date"),
            created_at=_as_str(_get(data, "created_at", "reminder"), "created_at"),
            notification_periods=[NotificationPeriod.from_json(p) for p in periods],
            is_completed=_as_bool(_get(data, "is_completed", "reminder"), "is_completed"),
        )


@dataclass
class StudyData:
    """Everything the application stores, saved as JSON after each change."""

    sessions: list[StudySession] = field(default_factory=list)
    todos: list[Todo] = field(default_factory=list)
    reminders: list[Reminder] = field(default_factory=list)
    decks: list[Deck] = field(default_factory=list)
    next_deck_id: int = 1
    path: Path = field(default=Path(DEFAULT_DATA_PATH), compare=False, repr=False)

    @classmethod
    def load(cls, path: str | Path = DEFAULT_DATA_PATH) -> StudyData:
        """Read data from a file, or return empty data when it does not exist.

        Raises ValueError when the file is not valid study data.
        """
        data_path = Path(path)
        if not data_path.exists():
            return cls(path=data_path)
        data = json.loads(data_path.read_text(encoding="utf-8"))
        return cls.from_dict(data, data_path)

    def save(self) -> None:
        """Write the data as indented JSON, replacing the file."""
        self.path.write_text(
            json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the data as a JSON-ready mapping."""
        return {
            "sessions": [s._to_dict() for s in self.sessions],
            "todos": [t._to_dict() for t in self.todos],
            "reminders": [r._to_dict() for r in self.reminders],
            "decks": [d.to_dict() for d in self.decks],
            "next_deck_id": self.next_deck_id,
        }

    @classmethod
    def from_dict(cls, data: Any, path: str | Path = DEFAULT_DATA_PATH) -> StudyData:
        """Build data from a mapping; raises ValueError if malformed."""
        what = "study data"
        return cls(
            sessions=[
                StudySession._from_dict(s)
                for s in _as_list(_get(data, "sessions", what), "sessions")
            ],
            todos=[Todo._from_dict(t) for t in _as_list(_get(data, "todos", what), "todos")],
            reminders=[
                Reminder._from_dict(r)
                for r in _as_list(_get(data, "reminders", what), "reminders")
            ],
            decks=[Deck.from_dict(d) for d in _as_list(_get(data, "decks", what), "decks")],
            next_deck_id=_as_int(_get(data, "next_deck_id", what), "next_deck_id"),
            path=Path(path),
        )

    # Sessions

    def add_session(self, date: str, minutes: float, description: str | None = None) -> None:
        """Add minutes to the session of that date and description, creating it if needed.

        Non-positive minutes are ignored and nothing is saved.
        """
        if minutes <= 0:
            return
        existing = next(
            (s for s in self.sessions if s.date == date and s.description == description),
            None,
        )
        if existing is not None:
            existing.minutes += minutes
        else:
            self.sessions.append(StudySession(date, minutes, description))
        self.save()

    def today_minutes(self, today: date | None = None) -> float:
        """Return the minutes recorded for today."""
        today_text = (today or date.today()).strftime(_DATE_FORMAT)
        return sum(s.minutes for s in self.sessions if s.date == today_text)

    def total_minutes(self) -> float:
        """Return all recorded minutes."""
        return sum(s.minutes for s in self.sessions)

    def last_n_days_minutes(self, days: int, today: date | None = None) -> float:
        """Return the minutes of sessions less than the given number of days old.

        Sessions with unreadable dates are skipped; future dates count.
        """
        today = today or date.today()
        total = 0.0
        for session in self.sessions:
            try:
                session_date = datetime.strptime(session.date, _DATE_FORMAT).date()
            except ValueError:
                continue
            if (today - session_date).days < days:
                total += session.minutes
        return total

    # Todos

    def add_todo(self, text: str) -> Todo:
        """Add an open todo, save, and return it."""
        todo = Todo(id=max((t.id for t in self.todos), default=0) + 1, text=text)
        self.todos.append(todo)
        self.save()
        return todo

    def toggle_todo(self, todo_id: int) -> bool:
        """Flip a todo's completion and save; returns the new state, False if not found."""
        completed = False
        todo = self._todo(todo_id)
        if todo is not None:
            todo.completed = not todo.completed
            completed = todo.completed
        self.save()
        return completed

    def update_todo_text(self, todo_id: int, text: str) -> None:
        """Change a todo's text and save; an unknown id does nothing."""
        todo = self._todo(todo_id)
        if todo is not None:
            todo.text = text
            self.save()

    def delete_todo(self, todo_id: int) -> None:
        """Remove a todo and save."""
        self.todos = [t for t in self.todos if t.id != todo_id]
        self.save()

    def clear_todos(self) -> None:
        """Remove all todos and save."""
        self.todos.clear()
        self.save()

    def clear_completed_todos(self) -> None:
        """Remove completed todos and save."""
        self.todos = [t for t in self.todos if not t.completed]
        self.save()

    def _todo(self, todo_id: int) -> Todo | None:
        return next((t for t in self.todos if t.id == todo_id), None)

    # Reminders

    def add_reminder(
        self,
        title: str,
        description: str | None,
        due_date: str,
        notification_periods: list[NotificationPeriod],
    ) -> Reminder:
        """Add an open reminder, save, and return it."""
        reminder = Reminder(
            id=max((r.id for r in self.reminders), default=0) + 1,
            title=title,
            description=description,
            due_date=due_date,
            notification_periods=list(notification_periods),
        )
        self.reminders.append(reminder)
        self.save()
        return reminder

    def update_reminder(
        self,
        reminder_id: int,
        title: str,
        description: str | None,
        due_date: str,
        notification_periods: list[NotificationPeriod],
    ) -> None:
        """Replace a reminder's details and save; an unknown id does nothing."""
        reminder = self._reminder(reminder_id)
        if reminder is not None:
            reminder.title = title
            reminder.description = description
            reminder.due_date = due_date
            reminder.notification_periods = list(notification_periods)
            self.save()

    def toggle_reminder(self, reminder_id: int) -> bool:
        """Flip a reminder's completion and save; returns the new state, False if not found."""
        completed = False
        reminder = self._reminder(reminder_id)
        if reminder is not None:
            reminder.is_completed = not reminder.is_completed
            completed = reminder.is_completed
        self.save()
        return completed

    def delete_reminder(self, reminder_id: int) -> None:
        """Remove a reminder and save."""
        self.reminders = [r for r in self.reminders if r.id != reminder_id]
        self.save()

    def clear_reminders(self) -> None:
        """Remove all reminders and save."""
        self.reminders.clear()
        self.save()

    def clear_completed_reminders(self) -> None:
        """Remove completed reminders and save."""
        self.reminders = [r for r in self.reminders if not r.is_completed]
        self.save()

    def _reminder(self, reminder_id: int) -> Reminder | None:
        return next((r for r in self.reminders if r.id == reminder_id), None)

    # Decks

    def add_deck(self, name: str, description: str | None = None) -> int:
        """Create a deck with the next deck id, save, and return the id."""
        deck_id = self.next_deck_id
        self.decks.append(Deck(name=name, description=description, id=deck_id))
        self.next_deck_id += 1
        self.save()
        return deck_id

    def deck(self, deck_id: int) -> Deck | None:
        """Return the deck with the given id, if any."""
        return next((d for d in self.decks if d.id == deck_id), None)

    def delete_deck(self, deck_id: int) -> None:
        """Remove a deck and save."""
        self.decks = [d for d in self.decks if d.id != deck_id]
        self.save()

    def due_cards_count(self, today: date | None = None) -> int:
        """Return the number of cards due across all decks."""
        return sum(len(deck.due_cards(today)) for deck in self.decks)