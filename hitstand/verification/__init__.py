"""
Verification tools for the hitstand engine.
"""

from hitstand.verification.shuffle import (
    ShuffleReport,
    check_uniformity,
    chi_square,
    position_counts,
)

__all__ = ["ShuffleReport", "check_uniformity", "chi_square", "position_counts"]
