"""Configuration error."""


class ConfigError(ValueError):
    """Configuration could not be loaded or failed validation."""
