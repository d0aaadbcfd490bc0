"""
License persistence utilities.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from offlic.common.config import Config
from offlic.common.exceptions import DeserializationError, LicenseIOError
from offlic.common.models import License

if TYPE_CHECKING:
    import os


class LicensePersistence:
    """Handles converting licenses to bytes and files and back."""

    @staticmethod
    def save_to_bytes(lic: License, *, pretty: bool = True) -> bytes:
        """Serialize the full license (grant data and signing data)."""
        indent = Config().JSON_INDENT if pretty else None
        return lic.model_dump_json(by_alias=True, indent=indent).encode("utf-8")

    @staticmethod
    def load_from_bytes(data: bytes | bytearray | str) -> License:
        """Rebuild a license from its serialized form."""
        if not isinstance(data, (bytes, bytearray, str)):
            msg = f"Expected bytes, got {type(data).__name__}"
            raise DeserializationError(msg)
        try:
            return License.model_validate_json(data)
        except (PydanticValidationError, ValueError) as err:
            msg = f"Invalid license data: {err}"
            raise DeserializationError(msg) from err

    @staticmethod
    def save_to_file(
        lic: License, file_path: str | os.PathLike[str], *, pretty: bool = True
    ) -> Path:
        """Write a license to disk."""
        path = Path(file_path)
        try:
            path.write_bytes(LicensePersistence.save_to_bytes(lic, pretty=pretty))
        except OSError as err:
            msg = f"Could not write license file {path}: {err}"
            raise LicenseIOError(msg) from err
        return path

    @staticmethod
    def load_from_file(file_path: str | os.PathLike[str]) -> License:
        """Read a license from disk."""
        path = Path(file_path)
        try:
            data = path.read_bytes()
        except OSError as err:
            msg = f"Could not read license file {path}: {err}"
            raise LicenseIOError(msg) from err
        return LicensePersistence.load_from_bytes(data)


def save_to_bytes(lic: License, *, pretty: bool = True) -> bytes:
    return LicensePersistence.save_to_bytes(lic, pretty=pretty)


def load_from_bytes(data: bytes | bytearray | str) -> License:
    return LicensePersistence.load_from_bytes(data)


def save_to_file(
    lic: License, file_path: str | os.PathLike[str], *, pretty: bool = True
) -> Path:
    return LicensePersistence.save_to_file(lic, file_path, pretty=pretty)


def load_from_file(file_path: str | os.PathLike[str]) -> License:
    return LicensePersistence.load_from_file(file_path)
