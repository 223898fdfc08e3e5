"""
Status enums and the read-only snapshot of a Blackjack round.

A `RoundSnapshot` is what a renderer reads between events. It is frozen and
holds copies of the cards, so nothing done to it reaches the live round.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional, Tuple

from hitstand.common.card import Card


class PlayerStatus(Enum):
    """Where the player is in their turn."""

    AWAITING_ACTION = auto()
    BUST = auto()
    BLACKJACK = auto()
    STANDING = auto()


class GameResult(Enum):
    """Outcome of a finished round, from the player's point of view."""

    PLAYER_WON = auto()
    PLAYER_LOST = auto()
    PUSH = auto()


def _card_to_dict(card: Card) -> Dict[str, Any]:
    if card.concealed:
        return {"rank": None, "suit": None, "concealed": True}
    return {"rank": card.rank.name, "suit": card.suit.name, "concealed": False}


@dataclass(frozen=True)
class RoundSnapshot:
    """
    Immutable view of a round.

    Attributes:
        deck_remaining: Cards left in the deck
        player_cards: The player's cards, in deal order
        dealer_cards: The dealer's cards, with the hole card flagged while concealed
        player_status: Current player status
        result: Round outcome, or None while the round is in progress
        running: Whether a round has been started
        player_score: Score of the player's hand
        dealer_visible_score: Score of the dealer's face-up cards
    """

    deck_remaining: int = 0
    player_cards: Tuple[Card, ...] = field(default_factory=tuple)
    dealer_cards: Tuple[Card, ...] = field(default_factory=tuple)
    player_status: PlayerStatus = PlayerStatus.AWAITING_ACTION
    result: Optional[GameResult] = None
    running: bool = False
    player_score: int = 0
    dealer_visible_score: int = 0

    @property
    def is_over(self) -> bool:
        return self.result is not None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the snapshot to a dictionary suitable for serialization.

        Concealed cards carry no rank or suit.
        """
        return {
            "deck_remaining": self.deck_remaining,
            "player_cards": [_card_to_dict(card) for card in self.player_cards],
            "dealer_cards": [_card_to_dict(card) for card in self.dealer_cards],
            "player_status": self.player_status.name,
            "result": self.result.name if self.result else None,
            "running": self.running,
            "player_score": self.player_score,
            "dealer_visible_score": self.dealer_visible_score,
        }
