"""Common cryptographic utilities.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from offlic.common.exceptions import InvalidSignatureError, SigningError

PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64


class CryptoUtils:
    """Utility class for cryptographic operations."""

    @staticmethod
    def signing_message(domain: bytes, key_phrase: str, payload: bytes) -> bytes:
        """Bind payload to a key phrase context under a fixed domain tag."""
        try:
            context = key_phrase.encode("utf-8")
        except UnicodeEncodeError as err:
            msg = "Key phrase is not valid UTF-8 text"
            raise SigningError(msg) from err
        return domain + len(context).to_bytes(4, "big") + context + payload

    @staticmethod
    def generate_keypair() -> tuple[Ed25519PrivateKey, bytes]:
        """Generate a fresh Ed25519 keypair, returning the raw public key."""
        private_key = Ed25519PrivateKey.generate()
        public_bytes = private_key.public_key().public_bytes(
            serialization.Encoding.Raw,
            serialization.PublicFormat.Raw,
        )
        return private_key, public_bytes

    @staticmethod
    def load_public_key(raw: bytes) -> Ed25519PublicKey:
        """Rebuild a public key from raw bytes."""
        if not isinstance(raw, (bytes, bytearray)) or len(raw) != PUBLIC_KEY_LENGTH:
            size = len(raw) if isinstance(raw, (bytes, bytearray)) else "non-bytes"
            msg = f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {size}"
            raise SigningError(msg)
        try:
            return Ed25519PublicKey.from_public_bytes(bytes(raw))
        except ValueError as err:
            msg = f"Malformed public key: {err}"
            raise SigningError(msg) from err

    @staticmethod
    def check_signature_bytes(raw: bytes) -> bytes:
        if not isinstance(raw, (bytes, bytearray)) or len(raw) != SIGNATURE_LENGTH:
            size = len(raw) if isinstance(raw, (bytes, bytearray)) else "non-bytes"
            msg = f"Signature must be {SIGNATURE_LENGTH} bytes, got {size}"
            raise SigningError(msg)
        return bytes(raw)

    @staticmethod
    def verify(public_key: Ed25519PublicKey, signature: bytes, message: bytes) -> None:
        try:
            public_key.verify(signature, message)
        except InvalidSignature as err:
            msg = "Signature does not match license terms"
            raise InvalidSignatureError(msg) from err
