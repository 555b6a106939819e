"""
Error types raised by the lens.

Every read against the registry or a launch record either succeeds or raises
one of these; nothing is defaulted or retried internally.
"""

from typing import Optional


class LensError(Exception):
    """Base class for lens errors."""


class ConfigurationError(LensError):
    """A required setting is missing or malformed."""


class UnrecognizedRecord(LensError):
    """The address exposes neither the auction-style nor the flat-price-style capability."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"{address} is not a recognized launch record")


class ExternalReadFailure(LensError):
    """A single read against the registry or a launch record failed or returned malformed data."""

    def __init__(self, address: str, function: str, cause: Optional[object] = None):
        self.address = address
        self.function = function
        self.cause = cause
        message = f"Read {function} on {address} failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
