"""Flashcard session logic with Leitner bucket scheduling."""
import logging
import time
from typing import Iterable, Optional

from leitner_tutor.algorithm import (
    LEARNING_THRESHOLD, compute_progress, get_hint, practice, update,
)
from leitner_tutor.models import (
    AnswerDifficulty, CardNotFoundError, Flashcard, PracticeRecord, PracticeSession, ProgressStats,
)
from leitner_tutor.state import FlashcardState

logger = logging.getLogger(__name__)


def _require_card(state: FlashcardState, front: str, back: str) -> Flashcard:
    card = state.find_card(front, back)
    if card is None:
        raise CardNotFoundError(f"Card not found: {front!r}")
    return card


def get_practice_session(state: FlashcardState) -> PracticeSession:
    day = state.get_current_day()
    due = practice(state.get_buckets(), day)
    cards = sorted(due, key=lambda c: (c.front, c.back))
    logger.info("Returning %d cards for day %d", len(cards), day)
    return PracticeSession(cards=cards, day=day)


def record_flashcard_result(
    state: FlashcardState, front: str, back: str, difficulty: AnswerDifficulty,
) -> PracticeRecord:
    """Apply a review outcome to a card and append it to the history."""
    difficulty = AnswerDifficulty(difficulty)
    card = _require_card(state, front, back)
    previous_bucket = state.find_card_bucket(card)
    state.set_buckets(update(state.get_buckets(), card, difficulty))
    new_bucket = state.find_card_bucket(card)
    record = PracticeRecord(
        card_front=card.front,
        card_back=card.back,
        timestamp=int(time.time() * 1000),
        difficulty=difficulty,
        previous_bucket=previous_bucket,
        new_bucket=new_bucket,
    )
    state.add_history_record(record)
    logger.info("Card %r moved from bucket %s to %s", card.front, previous_bucket, new_bucket)
    return record


def get_card_hint(state: FlashcardState, front: str, back: str) -> str:
    card = _require_card(state, front, back)
    logger.info("Hint requested for card %r", front)
    return get_hint(card)


def get_progress(state: FlashcardState, learning_threshold: int = LEARNING_THRESHOLD) -> ProgressStats:
    return compute_progress(state.get_buckets(), learning_threshold)


def advance_day(state: FlashcardState) -> int:
    new_day = state.increment_day()
    logger.info("Day advanced to %d", new_day)
    return new_day


def create_flashcard(
    state: FlashcardState,
    front: str,
    back: str,
    hint: str = "",
    tags: Optional[Iterable[str]] = None,
) -> Flashcard:
    """Create a new card in bucket 0.

    Raises ValueError for a blank front/back and DuplicateCardError when a card
    with the same front and back is already tracked.
    """
    if isinstance(tags, str):
        tags = [tags]
    card = Flashcard(
        front=(front or "").strip(),
        back=(back or "").strip(),
        hint=(hint or "").strip(),
        tags=tuple(t.strip() for t in (tags or []) if t and t.strip()),
    )
    state.add_card(card)
    logger.info("New card added: %r", card.front)
    return card
