"""Progress labels and review history statistics."""
from leitner_tutor.models import AnswerDifficulty, PracticeRecord


def get_progress_label(percentage: float) -> str:
    if percentage >= 80:
        return "MASTERED"
    elif percentage >= 50:
        return "PROGRESSING"
    elif percentage > 0:
        return "LEARNING"
    return "NOT STARTED"


def get_progress_color(percentage: float) -> str:
    if percentage >= 80:
        return "green"
    elif percentage >= 50:
        return "yellow"
    elif percentage > 0:
        return "dark_orange"
    return "red"


def get_review_stats(history: list[PracticeRecord]) -> dict:
    """Aggregate the review history into counts and a retention rate."""
    counts = {d: 0 for d in AnswerDifficulty}
    promotions = 0
    demotions = 0
    for record in history:
        counts[record.difficulty] += 1
        if record.previous_bucket is None or record.new_bucket is None:
            continue
        if record.new_bucket > record.previous_bucket:
            promotions += 1
        elif record.new_bucket < record.previous_bucket:
            demotions += 1

    total = len(history)
    recalled = total - counts[AnswerDifficulty.WRONG]
    retention = round(recalled / total * 100, 1) if total else 0.0
    return {
        "reviews": total,
        "wrong": counts[AnswerDifficulty.WRONG],
        "hard": counts[AnswerDifficulty.HARD],
        "easy": counts[AnswerDifficulty.EASY],
        "retention_rate": retention,
        "promotions": promotions,
        "demotions": demotions,
    }


def get_card_history(history: list[PracticeRecord], front: str, back: str) -> list[PracticeRecord]:
    return [r for r in history if r.card_front == front and r.card_back == back]
