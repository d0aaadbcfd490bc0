"""
Custom exceptions for the license system.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class LicenseError(Exception):
    """Base class for every error raised by offlic."""


class ValidationError(LicenseError):
    """Exception for invalid builder input."""


class DateFormatError(LicenseError):
    """Exception for an expiry date that does not match the date format."""


class SigningError(LicenseError):
    """Exception for malformed signature or public key bytes."""


class InvalidSignatureError(SigningError):
    """The signature does not match the license terms."""


class ExpiredError(LicenseError):
    """Exception for a correctly signed license past its expiry."""

    def __init__(self, message: str, expires: datetime) -> None:
        super().__init__(message)
        self.expires = expires


class DeserializationError(LicenseError):
    """Exception for a persisted license that cannot be decoded."""


class LicenseIOError(LicenseError):
    """Exception for read or write failures on a license file."""


class FeatureError(LicenseError):
    """Exception for a feature the license does not grant."""
