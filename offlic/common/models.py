"""
Pydantic models for the license artifact.
"""

from __future__ import annotations

import base64
import uuid
from datetime import datetime  # noqa: TC003
from typing import Any

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    field_serializer,
    field_validator,
)

from offlic.common.config import Config
from offlic.common.timeutils import canonical_timestamp

SUPPORTED_SCHEMA_VERSION = Config().SCHEMA_VERSION


def new_license_id() -> str:
    return str(uuid.uuid4())


class GrantData(BaseModel):
    """License terms covered by the signature."""

    model_config = ConfigDict(frozen=True)

    id: StrictStr = Field(default_factory=new_license_id)
    expires: AwareDatetime
    features: dict[StrictStr, StrictStr] = Field(default_factory=dict)
    max_users: StrictInt
    key_phrase: StrictStr

    @field_serializer("expires")
    def _serialize_expires(self, value: datetime) -> str:
        return canonical_timestamp(value)


class SigningData(BaseModel):
    """Signature and public key attached when a license is signed."""

    model_config = ConfigDict(frozen=True)

    signature_bytes: bytes
    public_key_bytes: bytes

    @field_validator("signature_bytes", "public_key_bytes", mode="before")
    @classmethod
    def _decode_base64(cls, value: Any) -> Any:
        if isinstance(value, str):
            return base64.b64decode(value.encode("ascii"), validate=True)
        return value

    @field_serializer("signature_bytes", "public_key_bytes", when_used="json")
    def _encode_base64(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")


class License(BaseModel):
    """Grant data plus signing data: the complete persisted artifact."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    grant_data: GrantData = Field(alias="grantData")
    signing_data: SigningData = Field(alias="signingData")
    schema_version: StrictInt = Field(
        default=SUPPORTED_SCHEMA_VERSION, alias="schemaVersion"
    )

    @field_validator("schema_version")
    @classmethod
    def _check_schema_version(cls, value: int) -> int:
        if not 1 <= value <= SUPPORTED_SCHEMA_VERSION:
            msg = f"Unsupported license schema version {value}"
            raise ValueError(msg)
        return value

    @property
    def license_id(self) -> str:
        return self.grant_data.id

    @property
    def expires(self) -> datetime:
        return self.grant_data.expires

    @property
    def features(self) -> dict[str, str]:
        return self.grant_data.features
