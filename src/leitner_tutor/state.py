"""In-memory container for buckets, review history and the day counter."""
import logging
from typing import Iterable, Optional

from leitner_tutor.models import BucketMap, DuplicateCardError, Flashcard, PracticeRecord

logger = logging.getLogger(__name__)


class FlashcardState:
    """Owns the spaced-repetition state for one learner.

    Invariants: every card sits in at most one bucket, the history only
    grows, and the day counter never goes backwards. Not thread-safe; the
    caller serialises access.
    """

    def __init__(self, cards: Optional[Iterable[Flashcard]] = None, day: int = 0):
        if day < 0:
            raise ValueError(f"day must be non-negative, got {day}")
        self._initial_cards = list(cards or [])
        self._buckets: BucketMap = {0: set(self._initial_cards)}
        self._history: list[PracticeRecord] = []
        self._day = day

    def reset(self, cards: Optional[Iterable[Flashcard]] = None) -> None:
        """Put every initial card back in bucket 0 and clear history and day."""
        if cards is not None:
            self._initial_cards = list(cards)
        self._buckets = {0: set(self._initial_cards)}
        self._history = []
        self._day = 0

    def get_buckets(self) -> BucketMap:
        return self._buckets

    def set_buckets(self, buckets: BucketMap) -> None:
        self._buckets = buckets

    def get_history(self) -> list[PracticeRecord]:
        return list(self._history)

    def add_history_record(self, record: PracticeRecord) -> None:
        self._history.append(record)

    def get_current_day(self) -> int:
        return self._day

    def increment_day(self) -> int:
        self._day += 1
        return self._day

    def all_cards(self) -> list[Flashcard]:
        return [card for index in sorted(self._buckets) for card in self._buckets[index]]

    def find_card(self, front: str, back: str) -> Optional[Flashcard]:
        for cards in self._buckets.values():
            for card in cards:
                if card.front == front and card.back == back:
                    return card
        return None

    def find_card_bucket(self, card: Flashcard) -> Optional[int]:
        for index, cards in self._buckets.items():
            if card in cards:
                return index
        return None

    def add_card(self, card: Flashcard) -> None:
        """Insert a new card into bucket 0."""
        if self.find_card(card.front, card.back) is not None:
            raise DuplicateCardError(f"Card already exists: {card.front!r}")
        self._buckets.setdefault(0, set()).add(card)
        logger.debug("Inserted card %r into bucket 0", card.front)
