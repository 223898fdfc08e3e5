"""Blackjack-specific constants and value mappings."""

from hitstand.common.card import Rank

BLACKJACK = 21
DEALER_STANDS_ON = 17
REVEAL_INTERVAL = 4

# Aces count 11 here; hands demote them to 1 as needed
BLACKJACK_VALUES = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
    Rank.ACE: 11,
}

ACE_DEMOTION = BLACKJACK_VALUES[Rank.ACE] - 1


def card_value(rank: Rank) -> int:
    """Get the blackjack point value for a given rank."""
    return BLACKJACK_VALUES[rank]
