"""
Field selectors.

Enumerations naming the record columns the analysis can read, so callers
pass a checked selector instead of a free-form column name.
"""

from enum import Enum

from gamelens.models.game import GameRecord


class CategoricalField(Enum):
    """Multi-valued text columns that records can be grouped by."""
    DEVELOPER = "developer"
    GENRE = "genre"
    PLATFORM = "platform"

    @property
    def label(self) -> str:
        return self.value

    def extract(self, record: GameRecord) -> str:
        return getattr(record, self.value)

    def __call__(self, record: GameRecord) -> str:
        return self.extract(record)

    @classmethod
    def from_name(cls, name: str) -> "CategoricalField":
        """
        Resolve a column name (case-insensitive).

        Raises:
            ValueError: If the name is not a categorical column
        """
        return _resolve(cls, name)


class NumericField(Enum):
    """Numeric columns usable as metrics or plot axes."""
    REVIEWS = ("reviews", "Reviews")
    PLAYS = ("plays", "Plays")
    PLAYING = ("playing", "Playing")
    BACKLOGS = ("backlogs", "Backlogs")
    WISHLISTS = ("wishlists", "Wishlists")
    FINAL_RATING = ("final_rating", "Final Rating")

    def __init__(self, column: str, title: str):
        self.column = column
        self.title = title

    @property
    def label(self) -> str:
        return self.column

    def extract(self, record: GameRecord) -> float:
        return float(getattr(record, self.column))

    def __call__(self, record: GameRecord) -> float:
        return self.extract(record)

    @classmethod
    def from_name(cls, name: str) -> "NumericField":
        """
        Resolve a column name (case-insensitive).

        Raises:
            ValueError: If the name is not a numeric column
        """
        return _resolve(cls, name)


def _resolve(enum_cls, name: str):
    key = str(name).strip().lower()
    for member in enum_cls:
        if member.label == key:
            return member
    supported = ", ".join(member.label for member in enum_cls)
    raise ValueError(f"Unsupported {enum_cls.__name__} '{name}'. Supported: {supported}")


# Design Rationale and Trade-offs:
#
# 1. Why raise on an unknown field name instead of falling back to developer?
#    - A typo in settings would otherwise print a developer ranking under
#      the wrong title with no error
#    - The message lists the supported columns
#    - Trade-off: a bad configuration stops the run before any output
