from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from offlic.common.models import GrantData, License, SigningData


def _grant(**overrides: object) -> GrantData:
    fields: dict[str, object] = {
        "expires": datetime(2030, 1, 1, tzinfo=timezone.utc),
        "features": {"debug": "parts1"},
        "max_users": 10,
        "key_phrase": "phrase",
    }
    fields.update(overrides)
    return GrantData(**fields)  # type: ignore[arg-type]


def test_grant_data_model() -> None:
    grant = _grant(id="1")
    assert grant.id == "1"
    assert grant.features == {"debug": "parts1"}
    assert grant.max_users == 10  # noqa: PLR2004
    assert grant.key_phrase == "phrase"


def test_grant_data_generates_unique_ids() -> None:
    assert _grant().id != _grant().id


def test_grant_data_defaults_features() -> None:
    grant = GrantData(
        expires=datetime(2030, 1, 1, tzinfo=timezone.utc),
        max_users=1,
        key_phrase="k",
    )
    assert grant.features == {}


def test_grant_data_requires_aware_expiry() -> None:
    with pytest.raises(ValidationError):
        _grant(expires=datetime(2030, 1, 1))


def test_grant_data_is_frozen() -> None:
    grant = _grant()
    with pytest.raises(ValidationError):
        grant.max_users = 20  # type: ignore[misc]


def test_data_type_does_not_enforce_builder_rules() -> None:
    grant = _grant(max_users=0, key_phrase="")
    assert grant.max_users == 0
    assert grant.key_phrase == ""


def test_signing_data_accepts_base64_text() -> None:
    data = SigningData(signature_bytes="AAEC", public_key_bytes=b"\x05")
    assert data.signature_bytes == b"\x00\x01\x02"
    assert data.public_key_bytes == b"\x05"


def test_license_aliases() -> None:
    grant = _grant()
    signing = SigningData(signature_bytes=b"s", public_key_bytes=b"p")
    by_name = License(grant_data=grant, signing_data=signing)
    by_alias = License(grantData=grant, signingData=signing)  # type: ignore[call-arg]
    assert by_name == by_alias
    assert by_name.schema_version == 1
    assert by_name.license_id == grant.id
    assert by_name.expires == grant.expires
    assert by_name.features == grant.features

    dumped = by_name.model_dump(by_alias=True)
    assert set(dumped) == {"grantData", "signingData", "schemaVersion"}
