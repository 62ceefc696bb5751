"""
Path-Based Scoring

Apply score multipliers based on file path patterns so that core source
outranks tests, mocks, generated code and docs for the same query.

Patterns are plain case-sensitive substrings, not globs or regexes:
"cmd/" matches anywhere in the path, including mid-filename.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Sequence

from pathboost.configs.boost import BoostConfig, BoostRule
from pathboost.configs.logging import get_logger
from pathboost.documents import SearchResult

logger = get_logger("search.boost")


@dataclass(frozen=True)
class BoostMatch:
    """A rule that matched a file path."""

    kind: Literal["penalty", "bonus"]
    rule: BoostRule


def apply_boost(
    results: Sequence[SearchResult],
    boost_cfg: BoostConfig,
) -> Sequence[SearchResult]:
    """
    Apply path-based score multipliers to search results.

    Each result's score is multiplied in place by the combined factor of
    every rule matching its file path, then the results are re-sorted by
    descending score. The sort is stable, so results with equal boosted
    scores keep their pre-boost relative order.

    A list is sorted in place and returned. Any other sequence (a tuple,
    say) is copied into a new list first; the SearchResult objects are
    shared either way, so the caller sees the new scores too.

    Args:
        results: Scored search hits
        boost_cfg: Penalty and bonus rules

    Returns:
        The results as a list re-sorted by boosted score. The input itself
        is returned untouched when boosting is disabled or there are no results.
    """
    if not boost_cfg.enabled or not results:
        return results

    if not isinstance(results, list):
        results = list(results)

    trace = logger.isEnabledFor(logging.DEBUG)
    changed = 0
    for result in results:
        factor = compute_boost_factor(result.chunk.file_path, boost_cfg)
        if factor != 1.0:
            changed += 1
            if trace:
                rules = ", ".join(
                    f"{m.kind} {m.rule.pattern!r} x{m.rule.factor}"
                    for m in explain_boost(result.chunk.file_path, boost_cfg)
                )
                logger.debug(f"Path boost: {result.chunk.file_path} x{factor:.4g} ({rules})")
        result.score *= factor

    results.sort(key=lambda r: r.score, reverse=True)

    logger.debug(f"Path boost: adjusted {changed}/{len(results)} results")
    return results


def compute_boost_factor(file_path: str, boost_cfg: BoostConfig) -> float:
    """
    Combined boost factor for a file path.

    Multiple matching rules are multiplied together, penalties first.
    A path matching no rule gets exactly 1.0.
    """
    factor = 1.0

    for rule in boost_cfg.penalties:
        if matches_pattern(file_path, rule.pattern):
            factor *= rule.factor

    for rule in boost_cfg.bonuses:
        if matches_pattern(file_path, rule.pattern):
            factor *= rule.factor

    return factor


def matches_pattern(file_path: str, pattern: str) -> bool:
    """Case-sensitive substring match. An empty pattern matches everything."""
    return pattern in file_path


def explain_boost(file_path: str, boost_cfg: BoostConfig) -> list[BoostMatch]:
    """
    List the rules that match a file path, in the order they are applied.

    The product of the returned factors equals compute_boost_factor().
    Does not consult boost_cfg.enabled. apply_boost() uses it to log
    which rules fired for each adjusted result at DEBUG level.
    """
    matches = [
        BoostMatch("penalty", rule)
        for rule in boost_cfg.penalties
        if matches_pattern(file_path, rule.pattern)
    ]
    matches.extend(
        BoostMatch("bonus", rule)
        for rule in boost_cfg.bonuses
        if matches_pattern(file_path, rule.pattern)
    )
    return matches
