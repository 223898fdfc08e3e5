from typing import Any, Dict, Optional, Union

from hitstand.blackjack.constants import BLACKJACK, DEALER_STANDS_ON, REVEAL_INTERVAL
from hitstand.blackjack.hand import BlackjackHand


class Rules:
    """
    Table rules for a round.

    Args:
        dealer_stands_on: The dealer draws while their score is below this value.
        reveal_interval: Only ticks whose counter is a multiple of this value
            advance the dealer's turn.
    """

    def __init__(
        self,
        dealer_stands_on: int = DEALER_STANDS_ON,
        reveal_interval: int = REVEAL_INTERVAL,
    ):
        if not isinstance(dealer_stands_on, int) or not 2 <= dealer_stands_on <= BLACKJACK:
            raise ValueError(
                f"dealer_stands_on must be between 2 and {BLACKJACK}, got {dealer_stands_on!r}"
            )
        if not isinstance(reveal_interval, int) or reveal_interval < 1:
            raise ValueError(
                f"reveal_interval must be a positive integer, got {reveal_interval!r}"
            )
        self.dealer_stands_on = dealer_stands_on
        self.reveal_interval = reveal_interval

    @classmethod
    def from_dict(cls, config: Optional[Dict[str, Any]]) -> "Rules":
        """Build rules from a config dict; unknown keys raise TypeError."""
        return cls(**(config or {}))

    @classmethod
    def coerce(cls, rules: Union["Rules", Dict[str, Any], None]) -> "Rules":
        if isinstance(rules, Rules):
            return rules
        return cls.from_dict(rules)

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "dealer_stands_on": self.dealer_stands_on,
            "reveal_interval": self.reveal_interval,
        }

    def should_dealer_hit(self, hand: BlackjackHand) -> bool:
        """Determine if the dealer should hit based on the game rules."""
        return hand.score() < self.dealer_stands_on

    def is_qualifying_tick(self, tick_counter: int) -> bool:
        """Check whether the dealer may act on this tick."""
        return tick_counter % self.reveal_interval == 0

    def __eq__(self, other):
        if isinstance(other, Rules):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    def __repr__(self) -> str:
        return f"Rules(dealer_stands_on={self.dealer_stands_on}, reveal_interval={self.reveal_interval})"
