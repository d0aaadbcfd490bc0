"""
License validation utilities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from offlic.common.canonical import canonicalize
from offlic.common.config import Config
from offlic.common.crypto import CryptoUtils
from offlic.common.exceptions import ExpiredError, LicenseError
from offlic.common.logging_utils import get_logger
from offlic.common.timeutils import canonical_timestamp, utc_now

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from offlic.common.models import License


class LicenseValidator:
    """Handles signature verification and expiry checking."""

    def __init__(
        self,
        config: Config | None = None,
        clock: Callable[[], datetime] | None = None,
        log_level: int | None = None,
    ):
        self.config = config or Config()
        self.clock = clock or utc_now
        self.logger = get_logger(
            __name__, log_level if log_level is not None else self.config.LOG_LEVEL
        )

    def verify(self, lic: License) -> None:
        """Verify the signature over the current in-memory grant data.

        Raises:
            SigningError: stored signature or public key bytes are malformed.
            InvalidSignatureError: the grant data does not match the signature.
        """
        grant = lic.grant_data
        self.logger.debug("Verifying license %s", grant.id)

        try:
            public_key = CryptoUtils.load_public_key(lic.signing_data.public_key_bytes)
            signature = CryptoUtils.check_signature_bytes(
                lic.signing_data.signature_bytes
            )
            message = CryptoUtils.signing_message(
                self.config.SIGNING_DOMAIN, grant.key_phrase, canonicalize(grant)
            )
            CryptoUtils.verify(public_key, signature, message)
        except LicenseError as err:
            self.logger.info("License %s signature invalid: %s", grant.id, err)
            raise
        self.logger.debug("License %s signature valid", grant.id)

    def check_license(self, lic: License) -> None:
        """Verify the signature, then require expiry to be strictly in the future."""
        self.verify(lic)
        expires = lic.grant_data.expires
        now = self.clock()
        if expires <= now:
            self.logger.info(
                "License %s expired at %s", lic.grant_data.id, canonical_timestamp(expires)
            )
            msg = f"License expired at {canonical_timestamp(expires)}"
            raise ExpiredError(msg, expires)
        self.logger.debug("License %s valid", lic.grant_data.id)

    def is_valid(self, lic: License) -> bool:
        try:
            self.check_license(lic)
        except LicenseError as err:
            self.logger.info("License %s rejected: %s", lic.grant_data.id, err)
            return False
        return True

    @staticmethod
    def has_feature(lic: License, name: str) -> bool:
        """Feature lookup only; call check_license first if validity matters."""
        return name in lic.grant_data.features


def verify(lic: License) -> None:
    LicenseValidator().verify(lic)


def check_license(lic: License, clock: Callable[[], datetime] | None = None) -> None:
    LicenseValidator(clock=clock).check_license(lic)


def has_feature(lic: License, name: str) -> bool:
    return LicenseValidator.has_feature(lic, name)
