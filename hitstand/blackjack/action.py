"""Defines the Action enum for the semantic events an input loop can send to a round."""
from enum import Enum


class Action(Enum):
    """Enum for the actions a caller can push into a round of blackjack."""

    START = "start"
    DRAW = "draw"
    STAND = "stand"
