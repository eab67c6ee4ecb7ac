"""
Game record data model.

Represents one row of the combined games dataset.
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict

COUNT_FIELDS = ("reviews", "plays", "playing", "backlogs", "wishlists")
TEXT_FIELDS = ("id", "name", "date", "developer", "genre", "platform")


@dataclass(frozen=True)
class GameRecord:
    """
    One video game with its engagement counts and categorical attributes.
    Created by the loader, never mutated afterwards.
    """
    id: str  # Opaque identifier
    name: str
    date: str  # Kept as text, never parsed
    reviews: int
    plays: int
    playing: int
    backlogs: int
    wishlists: int
    developer: str  # Comma-separated labels
    genre: str  # Comma-separated labels
    platform: str  # Comma-separated labels
    final_rating: float  # <= 0 means unrated

    def __post_init__(self):
        for field_name in COUNT_FIELDS:
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Invalid {field_name}: {value!r}. Must be an integer")
            if value < 0:
                raise ValueError(f"Invalid {field_name}: {value}. Must be non-negative")

        if isinstance(self.final_rating, bool) or not isinstance(self.final_rating, (int, float)):
            raise ValueError(f"Invalid final_rating: {self.final_rating!r}. Must be a number")
        if not math.isfinite(self.final_rating):
            raise ValueError(f"Invalid final_rating: {self.final_rating}. Must be finite")

    @classmethod
    def from_row(cls, row: Dict[str, str]) -> "GameRecord":
        """
        Decode one CSV row (column name -> raw text) into a record.

        Raises:
            KeyError: If a required column is missing
            ValueError: If a count or the rating cannot be decoded
        """
        values = {name: str(row[name]) for name in TEXT_FIELDS}
        for name in COUNT_FIELDS:
            values[name] = _parse_count(name, row[name])
        values["final_rating"] = _parse_rating(row["final_rating"])
        return cls(**values)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return asdict(self)


def _parse_count(name: str, raw) -> int:
    text = str(raw).strip()
    if not text.isdigit():
        raise ValueError(f"Column {name}: {raw!r} is not a non-negative integer")
    return int(text)


def _parse_rating(raw) -> float:
    text = str(raw).strip()
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Column final_rating: {raw!r} is not a number") from None
