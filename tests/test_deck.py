import random

import pytest

from hitstand.common.card import Card, Rank, Suit
from hitstand.common.deck import Deck, DeckExhaustedError


def test_deck_initialization():
    deck = Deck()
    assert isinstance(deck.cards, list)
    assert len(deck.cards) == 52
    assert not any(card.concealed for card in deck.cards)


def test_deck_initialization_with_custom_cards():
    cards = [
        Card(Suit.HEARTS, Rank.TWO),
        Card(Suit.DIAMONDS, Rank.ACE),
        Card(Suit.CLUBS, Rank.JACK),
    ]
    deck = Deck(cards)
    assert deck.cards == cards
    assert deck.cards is not cards


def test_default_deck_has_every_rank_and_suit_once():
    cards = Deck.initialize_default_deck()
    assert {(card.rank, card.suit) for card in cards} == {
        (rank, suit) for rank in Rank for suit in Suit
    }


def test_shuffled_deck_is_a_full_set():
    for _ in range(50):
        deck = Deck.shuffled()
        assert deck.size == 52
        assert len(set(deck.cards)) == 52


def test_shuffled_with_seeded_rng_is_reproducible():
    first = Deck.shuffled(random.Random(42))
    second = Deck.shuffled(random.Random(42))
    assert first.cards == second.cards
    assert first.cards != Deck.initialize_default_deck()


def test_shuffled_decks_are_independent():
    rng = random.Random(3)
    assert Deck.shuffled(rng).cards != Deck.shuffled(rng).cards


def test_deck_draw_takes_from_the_end():
    cards = [Card(Suit.HEARTS, Rank.TWO), Card(Suit.CLUBS, Rank.KING)]
    deck = Deck(cards)
    assert deck.draw() == Card(Suit.CLUBS, Rank.KING)
    assert deck.size == 1


def test_deck_repr():
    deck = Deck()
    assert repr(deck) == f"Deck({[repr(card) for card in deck.cards]})"


def test_deck_str():
    deck = Deck()
    assert str(deck) == "Deck of 52 cards"


def test_deck_draw_until_empty():
    deck = Deck.shuffled()
    drawn = [deck.draw() for _ in range(52)]
    assert len(set(drawn)) == 52
    assert deck.is_empty()
    assert len(deck) == 0


def test_deck_draw_empty_deck():
    deck = Deck([])
    with pytest.raises(DeckExhaustedError):
        deck.draw()


def test_deck_exhausted_is_an_index_error():
    assert issubclass(DeckExhaustedError, IndexError)
