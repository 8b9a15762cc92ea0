"""Custom exception hierarchy for the application."""
from __future__ import annotations


class ZooKeeperException(Exception):
    """Base exception for all zoo intake errors."""
    pass


class FormatError(ZooKeeperException):
    """Raised when an arrival row, date or name-pool line is malformed."""
    pass


class UnsupportedSpeciesError(ZooKeeperException):
    """Raised when an arrival names a species outside the closed set."""
    pass


class ResourceError(ZooKeeperException):
    """Raised when an input cannot be read or an output cannot be written."""
    pass


class ConfigurationError(ZooKeeperException):
    """Raised when configuration is invalid or missing."""
    pass
