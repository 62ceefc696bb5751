"""
PathBoost Search

Post-retrieval re-ranking by file path patterns.
"""

from pathboost.search.boost import (
    BoostMatch,
    apply_boost,
    compute_boost_factor,
    explain_boost,
    matches_pattern,
)

__all__ = [
    "BoostMatch",
    "apply_boost",
    "compute_boost_factor",
    "explain_boost",
    "matches_pattern",
]
