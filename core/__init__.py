"""Core infrastructure components shared by the intake pipeline."""
from __future__ import annotations

from .exceptions import (
    ZooKeeperException,
    FormatError,
    UnsupportedSpeciesError,
    ResourceError,
    ConfigurationError,
)
from .result import Result, Success, Failure

__all__ = [
    "ZooKeeperException",
    "FormatError",
    "UnsupportedSpeciesError",
    "ResourceError",
    "ConfigurationError",
    "Result",
    "Success",
    "Failure",
]
