"""
This module contains the `Hand` class, an ordered collection of cards held by
one party at the table.

The hand owns the concealment state of its cards: `conceal` and `reveal` are
the only operations that flip a card's `concealed` flag.
"""
from typing import Iterator, List

from hitstand.common.card import Card


class Hand:
    """
    A hand of cards.

    Provides methods to add cards and to hide or show them, plus string
    representations for debugging and display purposes.
    """

    def __init__(self, cards: List[Card] = None):
        self._cards: List[Card] = list(cards) if cards else []

    @property
    def cards(self) -> List[Card]:
        """Returns the cards in the hand."""
        return self._cards

    def add_card(self, card: Card) -> None:
        """
        Adds a card to the end of the hand.

        Args:
            card: The card to add.
        """
        self._cards.append(card)

    def conceal(self, index: int = 0) -> None:
        """
        Turns the card at ``index`` face down.

        Raises:
            IndexError: If the hand has no card at that position.
        """
        self._cards[index].concealed = True

    def reveal(self) -> List[Card]:
        """
        Turns every concealed card face up.

        Returns:
            The cards that were revealed, in hand order.
        """
        revealed = [card for card in self._cards if card.concealed]
        for card in revealed:
            card.concealed = False
        return revealed

    @property
    def has_concealed_card(self) -> bool:
        """True if any card in the hand is face down."""
        return any(card.concealed for card in self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        """
        Returns a string representation of the hand for debugging.

        Returns:
            A string in the form "Hand([Card(...), ...])".
        """
        return f"{self.__class__.__name__}({self.cards!r})"

    def __str__(self) -> str:
        """
        Returns a string representation of the hand for display.

        Concealed cards are shown as "??".
        """
        return ", ".join("??" if card.concealed else str(card) for card in self.cards)
