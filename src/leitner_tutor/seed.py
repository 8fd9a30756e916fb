"""Seed a fresh state with the starter deck of capital cities."""
from leitner_tutor.models import Flashcard
from leitner_tutor.state import FlashcardState

# (country, capital, hint)
CAPITALS = [
    ("France", "Paris", "Eiffel Tower"),
    ("Georgia", "Tbilisi", "Old Town"),
    ("Japan", "Tokyo", "Shibuya Crossing"),
    ("Canada", "Ottawa", "Parliament Hill"),
    ("Italy", "Rome", "Colosseum"),
    ("Australia", "Canberra", "Australian War Memorial"),
    ("Brazil", "Brasília", "Modernist Architecture"),
    ("Russia", "Moscow", "Red Square"),
    ("Egypt", "Cairo", "Pyramids of Giza"),
    ("India", "New Delhi", "India Gate"),
    ("South Korea", "Seoul", "Gyeongbokgung Palace"),
    ("Spain", "Madrid", "Royal Palace"),
]


def initial_cards() -> list[Flashcard]:
    return [
        Flashcard(
            front=f"What is the capital of {country}?",
            back=capital,
            hint=hint,
            tags=("capitals",),
        )
        for country, capital, hint in CAPITALS
    ]


def create_seeded_state(seed: bool = True) -> FlashcardState:
    """Build a state holding the starter deck in bucket 0, or an empty one."""
    return FlashcardState(cards=initial_cards() if seed else [])
