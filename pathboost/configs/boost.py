"""
Boost Configuration

Rule types for path-based score boosting, the default rule preset,
and parsing of the `boost` section of config.yaml.

Penalties are meant to lower scores (factor < 1) and bonuses to raise
them (factor > 1). That is a convention only; no range is enforced.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, ValidationError

from pathboost.configs.logging import get_logger
from pathboost.exceptions import InvalidBoostConfigError

logger = get_logger("config.boost")


@dataclass(frozen=True)
class BoostRule:
    """A substring pattern and the factor applied when a path contains it."""

    pattern: str
    factor: float


@dataclass(frozen=True)
class BoostConfig:
    """Path boosting rules applied after retrieval."""

    enabled: bool = False
    penalties: tuple[BoostRule, ...] = field(default_factory=tuple)
    bonuses: tuple[BoostRule, ...] = field(default_factory=tuple)


# Default preset written to a fresh config.yaml
# Tests, mocks, fixtures, generated code and docs sink; core source rises
DEFAULT_BOOST_CONFIG = BoostConfig(
    enabled=True,
    penalties=(
        # Test files
        BoostRule("/tests/", 0.5),
        BoostRule("/test/", 0.5),
        BoostRule("__tests__", 0.5),
        BoostRule("_test.", 0.5),
        BoostRule(".test.", 0.5),
        BoostRule(".spec.", 0.5),
        BoostRule("test_", 0.5),
        # Mocks
        BoostRule("/mocks/", 0.4),
        BoostRule("/mock/", 0.4),
        BoostRule(".mock.", 0.4),
        # Fixtures and test data
        BoostRule("/fixtures/", 0.4),
        BoostRule("/testdata/", 0.4),
        # Generated code
        BoostRule("/generated/", 0.4),
        BoostRule(".generated.", 0.4),
        BoostRule(".gen.", 0.4),
        # Docs
        BoostRule(".md", 0.6),
        BoostRule("/docs/", 0.6),
    ),
    bonuses=(
        BoostRule("/src/", 1.1),
        BoostRule("/lib/", 1.1),
        BoostRule("/app/", 1.1),
    ),
)


# --- Validation Models ---


class BoostRuleInput(BaseModel):
    """Raw rule as it appears in config.yaml."""

    model_config = ConfigDict(extra="forbid")

    pattern: str = Field(..., description="Case-sensitive substring to look for in the file path")
    factor: Union[StrictInt, StrictFloat] = Field(
        ..., description="Score multiplier applied on match; numbers only, no strings or booleans"
    )


class BoostSectionInput(BaseModel):
    """Raw `boost` section as it appears in config.yaml."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    penalties: list[BoostRuleInput] = Field(default_factory=list)
    bonuses: list[BoostRuleInput] = Field(default_factory=list)


def parse_boost_config(section: Optional[Any]) -> BoostConfig:
    """
    Build a BoostConfig from the raw `boost` section of the config file.

    Args:
        section: Mapping with optional enabled/penalties/bonuses keys.
                 None is treated as an empty section.

    Returns:
        Validated BoostConfig

    Raises:
        InvalidBoostConfigError: If the section is not a mapping or a rule is malformed
    """
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise InvalidBoostConfigError(
            f"boost section must be a mapping, got {type(section).__name__}"
        )

    try:
        parsed = BoostSectionInput.model_validate(section)
    except ValidationError as e:
        logger.error(f"Invalid boost configuration: {e}")
        raise InvalidBoostConfigError("Invalid boost configuration", errors=e.errors()) from e

    penalties = tuple(BoostRule(r.pattern, float(r.factor)) for r in parsed.penalties)
    bonuses = tuple(BoostRule(r.pattern, float(r.factor)) for r in parsed.bonuses)

    for rule in penalties + bonuses:
        if rule.factor <= 0:
            logger.warning(
                f"Boost rule {rule.pattern!r} has non-positive factor {rule.factor}; "
                "matching results will be zeroed or inverted"
            )

    return BoostConfig(enabled=parsed.enabled, penalties=penalties, bonuses=bonuses)


def boost_config_to_dict(cfg: BoostConfig) -> dict:
    """Serialize a BoostConfig back to the config.yaml section shape."""
    return {
        "enabled": cfg.enabled,
        "penalties": [{"pattern": r.pattern, "factor": r.factor} for r in cfg.penalties],
        "bonuses": [{"pattern": r.pattern, "factor": r.factor} for r in cfg.bonuses],
    }
