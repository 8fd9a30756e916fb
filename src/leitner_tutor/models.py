"""Data classes for the flashcard scheduling domain."""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class CardNotFoundError(LookupError):
    """Raised when a card is not present in any bucket."""


class DuplicateCardError(ValueError):
    """Raised when a card with the same front and back already exists."""


class AnswerDifficulty(IntEnum):
    WRONG = 0
    HARD = 1
    EASY = 2


@dataclass(frozen=True)
class Flashcard:
    """A single flashcard.

    Cards are compared and hashed by ``(front, back)`` only, so two cards
    with the same content are the same card wherever a bucket set is involved.
    """

    front: str
    back: str
    hint: str = field(default="", compare=False)
    tags: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self):
        if not isinstance(self.front, str) or not self.front.strip():
            raise ValueError("Flashcard front must be non-empty text")
        if not isinstance(self.back, str) or not self.back.strip():
            raise ValueError("Flashcard back must be non-empty text")
        if self.hint is None:
            object.__setattr__(self, "hint", "")
        tags = (self.tags,) if isinstance(self.tags, str) else tuple(self.tags or ())
        object.__setattr__(self, "tags", tags)


# Keys are bucket indices, values the cards currently in that bucket.
BucketMap = dict[int, set[Flashcard]]


@dataclass(frozen=True)
class PracticeRecord:
    card_front: str
    card_back: str
    timestamp: int  # ms since epoch
    difficulty: AnswerDifficulty
    previous_bucket: Optional[int] = None
    new_bucket: Optional[int] = None


@dataclass
class ProgressStats:
    total_cards: int
    cards_learned: int
    completion_percentage: float
    cards_by_bucket: dict[int, int] = field(default_factory=dict)
    learning_threshold: int = 3


@dataclass
class PracticeSession:
    cards: list[Flashcard]
    day: int
