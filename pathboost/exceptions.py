"""
PathBoost Exception Hierarchy

Centralized exception classes for structured error handling.
All PathBoost-specific exceptions inherit from PathBoostError.

Usage:
    from pathboost.exceptions import ConfigurationError

    try:
        cfg = get_boost_config()
    except ConfigurationError as e:
        logger.error(f"Config load failed: {e}")
"""


class PathBoostError(Exception):
    """Base exception for all PathBoost errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PathBoostError):
    """Error in PathBoost configuration."""

    pass


class InvalidBoostConfigError(ConfigurationError):
    """The boost section of the configuration is malformed."""

    def __init__(self, message: str, errors: list | None = None):
        details = {"errors": errors} if errors else {}
        super().__init__(message, details)
        self.errors = errors or []
