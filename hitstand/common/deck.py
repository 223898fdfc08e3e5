"""
This module contains the Deck class, which represents a single 52-card deck.

>>> deck = Deck()
>>> deck.size
52
>>> deck.draw()
Card(Suit.CLUBS, Rank.ACE)
>>> deck.size
51
"""

import random
from typing import List, Optional

from hitstand.common.card import Card, Rank, Suit


class DeckExhaustedError(IndexError):
    """Raised when a card is drawn from an empty deck."""

    pass


class Deck:
    """
    A class representing a deck of cards. Cards are drawn from the end of the list.
    """

    def __init__(self, cards: Optional[List[Card]] = None):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, the 52 cards are laid out in suit/rank order.
        >>> Deck().size
        52
        """
        if cards is None:
            self.cards: List[Card] = self.initialize_default_deck()
        else:
            self.cards = list(cards)

    @classmethod
    def shuffled(cls, rng: Optional[random.Random] = None) -> "Deck":
        """
        Build a fresh 52-card deck in uniformly random order.

        :param rng: Random source for the permutation; the module-level generator
                    is used when omitted.
        :return: A new shuffled Deck.
        """
        return cls().shuffle(rng)

    @staticmethod
    def initialize_default_deck() -> List[Card]:
        """
        Construct a default deck with all possible combinations of suits and ranks.

        :return: A list of Card instances representing the default deck.
        >>> len(Deck.initialize_default_deck())
        52
        """
        return [Card(suit, rank) for suit in Suit for rank in Rank]

    def shuffle(self, rng: Optional[random.Random] = None) -> "Deck":
        """
        Shuffle the cards in the deck in place (Fisher-Yates).

        :param rng: Optional random source.
        :return: The deck itself.
        """
        (rng or random).shuffle(self.cards)
        return self

    def draw(self) -> Card:
        """
        Remove and return the top card.

        :raises DeckExhaustedError: If the deck has no cards left.
        """
        if not self.cards:
            raise DeckExhaustedError("Cannot draw from an empty deck")
        return self.cards.pop()

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.

        >>> Deck().size
        52
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        """
        Check if the deck is empty.

        :return: True if the deck is empty, False otherwise.
        """
        return len(self.cards) == 0

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the deck.
        """
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the deck.

        >>> str(Deck())
        'Deck of 52 cards'
        """
        return f"Deck of {len(self.cards)} cards"
