"""Validation helpers for resolving search configuration."""
from .exceptions import SearchConfigurationError

__all__ = ["SearchConfigurationError"]
