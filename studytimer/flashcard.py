"""Flashcards and decks with SM-2 style spaced repetition."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import IntEnum
from typing import Any

_DATE_FORMAT = "%Y-%m-%d"
_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

MIN_EASE = 1.3
MAX_EASE = 2.5
EASE_STEP = 0.15


def _today_str() -> str:
    return date.today().strftime(_DATE_FORMAT)


def _now_str() -> str:
    return datetime.now().strftime(_DATETIME_FORMAT)


def _round_half_away(value: float) -> int:
    return math.floor(value + 0.5) if value >= 0 else -math.floor(-value + 0.5)


class Grade(IntEnum):
    """How well a card was recalled; the integer is the grade's score."""

    AGAIN = 0
    HARD = 1
    GOOD = 2
    EASY = 3

    @property
    def label(self) -> str:
        """The name used when stored as JSON."""
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> Grade:
        """Parse a stored grade name; raises ValueError if unknown."""
        try:
            return cls[label.upper()]
        except (KeyError, AttributeError) as exc:
            raise ValueError(f"unknown grade {label!r}") from exc


@dataclass
class Review:
    """One review of a card."""

    date: str
    grade: Grade
    interval: int
    ease_factor: float

    def _to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "grade": self.grade.label,
            "interval": self.interval,
            "ease_factor": self.ease_factor,
        }

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> Review:
        return cls(
            date=str(data["date"]),
            grade=Grade.from_label(data["grade"]),
            interval=int(data["interval"]),
            ease_factor=float(data["ease_factor"]),
        )


@dataclass
class Card:
    """A two-sided card and its review schedule."""

    deck_id: int
    front: str
    back: str
    id: int = 0
    tags: set[str] = field(default_factory=set)
    created_at: str = field(default_factory=_today_str)
    reviews: list[Review] = field(default_factory=list)
    current_interval: int = 1
    current_ease_factor: float = MAX_EASE
    due_date: str = field(default_factory=_today_str)
    is_new: bool = True

    def add_review(self, grade: Grade, today: date | None = None) -> None:
        """Record a review and reschedule the card."""
        today = today or date.today()
        today_text = today.strftime(_DATE_FORMAT)
        ease = self.current_ease_factor
        interval = self.current_interval

        if grade is Grade.AGAIN:
            new_interval, new_ease = 1, max(ease - EASE_STEP, MIN_EASE)
        elif grade is Grade.HARD:
            new_interval = max(_round_half_away(interval * 1.2), 1)
            new_ease = max(ease - EASE_STEP, MIN_EASE)
        elif grade is Grade.GOOD:
            new_interval, new_ease = max(_round_half_away(interval * ease), 1), ease
        else:
            new_interval = max(_round_half_away(interval * ease * 1.3), 1)
            new_ease = min(ease + EASE_STEP, MAX_EASE)

        self.reviews.append(Review(today_text, grade, new_interval, new_ease))
        self.current_interval = new_interval
        self.current_ease_factor = new_ease
        try:
            self.due_date = (today + timedelta(days=new_interval)).strftime(_DATE_FORMAT)
        except OverflowError:
            self.due_date = today_text
        self.is_new = False

    def to_dict(self) -> dict[str, Any]:
        """Return the card as a JSON-ready mapping."""
        return {
            "id": self.id,
            "deck_id": self.deck_id,
            "front": self.front,
            "back": self.back,
            "tags": sorted(self.tags),
            "created_at": self.created_at,
            "reviews": [review._to_dict() for review in self.reviews],
            "current_interval": self.current_interval,
            "current_ease_factor": self.current_ease_factor,
            "due_date": self.due_date,
            "is_new": self.is_new,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Card:
        """Build a card from a mapping; raises ValueError if malformed."""
        if not isinstance(data, dict):
            raise ValueError("card must be an object")
        try:
            return cls(
                id=int(data["id"]),
                deck_id=int(data["deck_id"]),
                front=str(data["front"]),
                back=str(data["back"]),
                tags=set(data["tags"]),
                created_at=str(data["created_at"]),
                reviews=[Review._from_dict(item) for item in data["reviews"]],
                current_interval=int(data["current_interval"]),
                current_ease_factor=float(data["current_ease_factor"]),
                due_date=str(data["due_date"]),
                is_new=bool(data["is_new"]),
            )
        except KeyError as exc:
            raise ValueError(f"missing card field {exc.args[0]!r}") from exc
        except TypeError as exc:
            raise ValueError(f"invalid card: {exc}") from exc


@dataclass
class Deck:
    """A named collection of cards."""

    name: str
    description: str | None = None
    id: int = 0
    created_at: str = field(default_factory=_now_str)
    cards: list[Card] = field(default_factory=list)

    def add_card(self, front: str, back: str) -> int:
        """Add a new card and return its id."""
        card_id = max((card.id for card in self.cards), default=0) + 1
        self.cards.append(Card(deck_id=self.id, front=front, back=back, id=card_id))
        return card_id

    def due_cards(self, today: date | None = None) -> list[Card]:
        """Return the cards due on or before the given day."""
        today_text = (today or date.today()).strftime(_DATE_FORMAT)
        return [card for card in self.cards if card.due_date <= today_text]

    def card(self, card_id: int) -> Card | None:
        """Return the card with the given id, if any."""
        return next((card for card in self.cards if card.id == card_id), None)

    def to_dict(self) -> dict[str, Any]:
        """Return the deck as a JSON-ready mapping."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": self.created_at,
            "cards": [card.to_dict() for card in self.cards],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Deck:
        """Build a deck from a mapping; raises ValueError if malformed."""
        if not isinstance(data, dict):
            raise ValueError("deck must be an object")
        try:
            description = data["description"]
            return cls(
                id=int(data["id"]),
                name=str(data["name"]),
                description=None if description is None else str(description),
                created_at=str(data["created_at"]),
                cards=[Card.from_dict(item) for item in data["cards"]],
            )
        except KeyError as exc:
            raise ValueError(f"missing deck field {exc.args[0]!r}") from exc
        except TypeError as exc:
            raise ValueError(f"invalid deck: {exc}") from exc