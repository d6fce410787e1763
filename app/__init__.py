"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    ServiceValidationError,
    InvalidCanteenIdentifierError,
    UpstreamUnavailableError,
    MalformedUpstreamDataError,
)

__all__ = [
    "settings",
    "ServiceValidationError",
    "InvalidCanteenIdentifierError",
    "UpstreamUnavailableError",
    "MalformedUpstreamDataError",
]
