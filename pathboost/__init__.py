"""
PathBoost - path-pattern re-ranking for code search results.

Multiplies each search hit's score by a factor built from substring
rules on its file path, then re-sorts by the adjusted score.
"""

from pathboost.configs.boost import BoostConfig, BoostRule, DEFAULT_BOOST_CONFIG
from pathboost.documents import Chunk, SearchResult
from pathboost.search.boost import apply_boost, compute_boost_factor, explain_boost

__version__ = "1.0.0"

__all__ = [
    "BoostConfig",
    "BoostRule",
    "DEFAULT_BOOST_CONFIG",
    "Chunk",
    "SearchResult",
    "apply_boost",
    "compute_boost_factor",
    "explain_boost",
]
