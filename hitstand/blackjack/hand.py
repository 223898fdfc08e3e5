"""
BlackjackHand: a hand scored under Blackjack rules.
"""

from typing import Iterable, Tuple

from hitstand.blackjack.constants import ACE_DEMOTION, BLACKJACK, card_value
from hitstand.common.card import Card, Rank
from hitstand.common.hand import Hand


def _score_cards(cards: Iterable[Card]) -> Tuple[int, int]:
    """Return the best total for ``cards`` and how many aces still count 11."""
    total = 0
    soft_aces = 0
    for card in cards:
        total += card_value(card.rank)
        if card.rank == Rank.ACE:
            soft_aces += 1

    # Demote one ace at a time, only while it keeps the hand from busting
    while total > BLACKJACK and soft_aces:
        total -= ACE_DEMOTION
        soft_aces -= 1

    return total, soft_aces


class BlackjackHand(Hand):
    """A hand in the game of Blackjack."""

    def score(self) -> int:
        """Calculate the optimal value of the hand with ace handling."""
        return _score_cards(self._cards)[0]

    def visible_score(self) -> int:
        """Score of the face-up cards only, as the player sees the hand."""
        return _score_cards(card for card in self._cards if not card.concealed)[0]

    @property
    def is_soft(self) -> bool:
        """Determine if the hand is soft (contains an ace counted as 11)."""
        return _score_cards(self._cards)[1] > 0

    @property
    def is_bust(self) -> bool:
        return self.score() > BLACKJACK

    @property
    def has_blackjack(self) -> bool:
        """Determine if the hand is a natural blackjack."""
        return len(self._cards) == 2 and self.score() == BLACKJACK
