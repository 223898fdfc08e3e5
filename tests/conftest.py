"""
Pytest configuration for tests at the root level.
"""

import pytest

from hitstand.common.card import Card, Rank, Suit
from hitstand.common.deck import Deck
from hitstand.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


def stacked_deck(*ranks: Rank) -> Deck:
    """
    Build a deck that deals ``ranks`` in the given order.

    Suits cycle so repeated ranks stay distinct cards.
    """
    suits = list(Suit)
    cards = [Card(suits[i % len(suits)], rank) for i, rank in enumerate(ranks)]
    # Deck.draw pops from the end
    return Deck(list(reversed(cards)))


@pytest.fixture
def make_deck():
    return stacked_deck
