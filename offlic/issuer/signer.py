"""
License signer: binds grant data to a freshly generated keypair.
"""

from __future__ import annotations

from offlic.common.canonical import canonicalize
from offlic.common.config import Config
from offlic.common.crypto import CryptoUtils
from offlic.common.logging_utils import get_logger
from offlic.common.models import GrantData, License, SigningData


class LicenseSigner:
    """Signs grant data, producing a complete License."""

    def __init__(self, config: Config | None = None, log_level: int | None = None):
        self.config = config or Config()
        self.log_level = log_level if log_level is not None else self.config.LOG_LEVEL
        self.logger = get_logger(__name__, self.log_level)

    def sign(self, grant: GrantData) -> License:
        """Sign grant data with a new keypair; the private key is discarded."""
        message = CryptoUtils.signing_message(
            self.config.SIGNING_DOMAIN, grant.key_phrase, canonicalize(grant)
        )
        private_key, public_bytes = CryptoUtils.generate_keypair()
        signature = private_key.sign(message)
        del private_key

        self.logger.debug("Signed license %s", grant.id)
        return License(
            grant_data=grant,
            signing_data=SigningData(
                signature_bytes=signature, public_key_bytes=public_bytes
            ),
            schema_version=self.config.SCHEMA_VERSION,
        )


def sign(grant: GrantData) -> License:
    return LicenseSigner().sign(grant)
