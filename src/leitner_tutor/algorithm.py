"""Leitner bucket scheduling algorithm."""
from collections.abc import Mapping
from typing import Optional, Union

from leitner_tutor.models import (
    AnswerDifficulty, BucketMap, CardNotFoundError, Flashcard, ProgressStats,
)

LEARNING_THRESHOLD = 3


def to_bucket_sets(buckets: BucketMap) -> list[set[Flashcard]]:
    """Convert the bucket map into a dense list where index i holds bucket i.

    Missing buckets become empty sets. The list is sized to the highest
    bucket index, so memory grows with that index rather than the card count.
    """
    if not buckets:
        return []
    max_bucket = max(0, *buckets.keys())
    bucket_sets = [set() for _ in range(max_bucket + 1)]
    for index, cards in buckets.items():
        bucket_sets[index] = set(cards)
    return bucket_sets


def get_bucket_range(buckets: BucketMap) -> Optional[tuple[int, int]]:
    non_empty = [index for index, cards in buckets.items() if cards]
    if not non_empty:
        return None
    return min(non_empty), max(non_empty)


def practice(
    buckets: Union[list[set[Flashcard]], BucketMap],
    day: int,
) -> set[Flashcard]:
    """Select the cards due for review on a given day.

    A card in bucket i is due on day d when d % (i + 1) == 0, so bucket 0 is
    practiced every day and higher buckets progressively less often.

    Args:
        buckets: Either the dense list from ``to_bucket_sets`` or the bucket
            map itself, which is walked sparsely.
        day: Current day number, starting at 0.

    Returns:
        Set of due flashcards.
    """
    if day < 0:
        raise ValueError(f"day must be non-negative, got {day}")
    entries = buckets.items() if isinstance(buckets, Mapping) else enumerate(buckets)
    due = set()
    for index, cards in entries:
        if day % (index + 1) == 0:
            due.update(cards)
    return due


def update(
    buckets: BucketMap,
    card: Flashcard,
    difficulty: AnswerDifficulty,
) -> BucketMap:
    """Move a card to its next bucket after a practice trial.

    WRONG sends the card back to bucket 0, HARD promotes it one bucket and
    EASY promotes it two. The map is updated in place and returned.

    Raises:
        CardNotFoundError: if the card is in no bucket. The map is untouched.
        ValueError: if ``difficulty`` is not a known answer difficulty.
    """
    difficulty = AnswerDifficulty(difficulty)

    current_bucket = None
    for index, cards in buckets.items():
        if card in cards:
            current_bucket = index
            break
    if current_bucket is None:
        raise CardNotFoundError(f"Card not found in any bucket: {card.front!r}")

    if difficulty == AnswerDifficulty.WRONG:
        new_bucket = 0
    elif difficulty == AnswerDifficulty.HARD:
        new_bucket = current_bucket + 1
    else:
        new_bucket = current_bucket + 2
    new_bucket = max(0, new_bucket)

    buckets[current_bucket].discard(card)
    buckets.setdefault(new_bucket, set()).add(card)
    return buckets


def get_hint(card: Flashcard) -> str:
    return card.hint


def compute_progress(
    buckets: BucketMap,
    learning_threshold: int = LEARNING_THRESHOLD,
) -> ProgressStats:
    """Summarise learning progress from the bucket map.

    Cards in buckets at or above ``learning_threshold`` count as learned.
    """
    total = 0
    learned = 0
    by_bucket = {}
    for index in sorted(buckets):
        size = len(buckets[index])
        if not size:
            continue
        total += size
        by_bucket[index] = size
        if index >= learning_threshold:
            learned += size

    completion = (learned / total) * 100 if total else 0.0
    return ProgressStats(
        total_cards=total,
        cards_learned=learned,
        completion_percentage=completion,
        cards_by_bucket=by_bucket,
        learning_threshold=learning_threshold,
    )
