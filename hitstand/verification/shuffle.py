"""
Statistical check that deck shuffling is uniform.

Shuffle a fresh deck many times, count how often each card lands in each
position, and test the 52 x 52 table against the uniform expectation with a
chi-square test. Every row and column of the table sums to the number of
trials, so the test has (52 - 1) ** 2 degrees of freedom.
"""

import random
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np
import scipy.stats as stats

from hitstand.common.deck import Deck

DECK_SIZE = 52

CARD_INDEX = {card: i for i, card in enumerate(Deck.initialize_default_deck())}


@dataclass
class ShuffleReport:
    """
    Result of a uniformity test.

    Attributes:
        statistic: The chi-square statistic
        p_value: Probability of a statistic at least this large under a uniform shuffle
        trials: Number of shuffled decks examined
        alpha: Significance level the p-value is compared against
    """

    statistic: float
    p_value: float
    trials: int
    alpha: float

    @property
    def is_uniform(self) -> bool:
        return self.p_value >= self.alpha

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary."""
        return {
            "statistic": self.statistic,
            "p_value": self.p_value,
            "trials": self.trials,
            "alpha": self.alpha,
            "is_uniform": self.is_uniform,
        }


def position_counts(trials: int, rng: Optional[random.Random] = None) -> np.ndarray:
    """
    Count card positions over ``trials`` shuffles.

    Returns:
        An integer array where ``counts[card, position]`` is how often the card
        with default-order index ``card`` was found at ``position``.

    Raises:
        ValueError: If ``trials`` is not positive, or a shuffled deck is not
            exactly the 52 distinct cards.
    """
    if trials < 1:
        raise ValueError(f"trials must be positive, got {trials}")

    counts = np.zeros((DECK_SIZE, DECK_SIZE), dtype=np.int64)
    positions = np.arange(DECK_SIZE)
    for _ in range(trials):
        deck = Deck.shuffled(rng)
        if deck.size != DECK_SIZE or len(set(deck.cards)) != DECK_SIZE:
            raise ValueError(f"Shuffled deck is not a full set of cards: {deck!r}")
        indices = np.fromiter(
            (CARD_INDEX[card] for card in deck.cards), dtype=np.int64, count=DECK_SIZE
        )
        counts[indices, positions] += 1
    return counts


def chi_square(counts: np.ndarray) -> Tuple[float, float]:
    """Chi-square statistic and p-value of a position table against uniform."""
    trials = counts[0].sum()
    expected = trials / counts.shape[1]
    statistic = float(((counts - expected) ** 2 / expected).sum())
    dof = (counts.shape[0] - 1) * (counts.shape[1] - 1)
    return statistic, float(stats.chi2.sf(statistic, dof))


def check_uniformity(
    trials: int = 5000, rng: Optional[random.Random] = None, alpha: float = 0.001
) -> ShuffleReport:
    """
    Shuffle ``trials`` decks and test the card positions for uniformity.

    Args:
        trials: Number of decks to shuffle
        rng: Optional random source, for reproducible runs
        alpha: Significance level
    """
    statistic, p_value = chi_square(position_counts(trials, rng))
    return ShuffleReport(statistic=statistic, p_value=p_value, trials=trials, alpha=alpha)
