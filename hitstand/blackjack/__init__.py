"""
Blackjack rules and the round state machine.
"""

from hitstand.blackjack.action import Action
from hitstand.blackjack.hand import BlackjackHand
from hitstand.blackjack.round import BlackjackRound, determine_result
from hitstand.blackjack.rules import Rules
from hitstand.blackjack.state import GameResult, PlayerStatus, RoundSnapshot

__all__ = [
    "Action",
    "BlackjackHand",
    "BlackjackRound",
    "GameResult",
    "PlayerStatus",
    "Rules",
    "RoundSnapshot",
    "determine_result",
]
