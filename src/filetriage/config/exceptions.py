"""Configuration errors."""


class ConfigError(Exception):
    """Raised when configuration files or overrides cannot be loaded or validated."""
