"""Exception hierarchy for Launchpad.

The ranking engine itself never raises: ranking, caching, iteration and
query editing are total. Errors only surface at the configuration boundary.
"""


class LaunchpadError(Exception):
    """Base exception for all Launchpad errors.

    Carries an optional suggestion that is appended to the message,
    so callers can show something actionable.
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class ConfigError(LaunchpadError):
    """Configuration is invalid or missing."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration value failed validation."""

    pass
