"""
Exceptions raised by marklint
"""


class MarklintError(Exception):
    """Base class for marklint errors."""


class ConfigError(MarklintError):
    """Configuration file is unreadable or holds invalid values."""
