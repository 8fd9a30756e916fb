# tests/conftest.py
import pytest

from leitner_tutor.models import Flashcard
from leitner_tutor.seed import create_seeded_state
from leitner_tutor.state import FlashcardState


@pytest.fixture
def cards():
    """Three distinct cards for bucket tests."""
    return [
        Flashcard("What is 2 + 2?", "4", hint="Even number", tags=("math",)),
        Flashcard("Largest planet?", "Jupiter", hint="Gas giant", tags=("space",)),
        Flashcard("H2O is?", "Water"),
    ]


@pytest.fixture
def state(cards):
    """A fresh state holding the fixture cards in bucket 0."""
    return FlashcardState(cards=cards)


@pytest.fixture
def seeded_state():
    return create_seeded_state()
