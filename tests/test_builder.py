import uuid
from datetime import datetime, timedelta, timezone

import pytest

from offlic.common.exceptions import DateFormatError, ValidationError
from offlic.issuer.builder import LicenseBuilder


def _complete() -> LicenseBuilder:
    return (
        LicenseBuilder()
        .with_expiry("2030-01-01")
        .with_max_users(1)
        .with_keyphrase("phrase")
    )


def test_mutators_return_the_builder() -> None:
    builder = LicenseBuilder()
    assert builder.with_feature("a", "b") is builder
    assert builder.with_expiry("2030-01-01") is builder
    assert builder.with_duration(60) is builder
    assert builder.with_max_users(3) is builder
    assert builder.with_keyphrase("k") is builder
    assert builder.with_id("custom") is builder


def test_zero_max_users_rejected() -> None:
    with pytest.raises(ValidationError):
        LicenseBuilder().with_max_users(0)


@pytest.mark.parametrize("value", [-1, 1.5, "10", True, None])
def test_invalid_max_users_rejected(value: object) -> None:
    with pytest.raises(ValidationError):
        LicenseBuilder().with_max_users(value)  # type: ignore[arg-type]


@pytest.mark.parametrize(("key", "value"), [("", "x"), ("x", ""), ("", "")])
def test_empty_feature_rejected(key: str, value: str) -> None:
    with pytest.raises(ValidationError):
        LicenseBuilder().with_feature(key, value)


LONE_SURROGATE = "\ud800"


@pytest.mark.parametrize(
    "apply",
    [
        lambda b: b.with_keyphrase(LONE_SURROGATE),
        lambda b: b.with_feature(LONE_SURROGATE, "x"),
        lambda b: b.with_feature("x", LONE_SURROGATE),
        lambda b: b.with_features({"x": LONE_SURROGATE}),
        lambda b: b.with_id(LONE_SURROGATE),
    ],
    ids=["key_phrase", "feature_key", "feature_value", "features", "id"],
)
def test_text_that_is_not_utf8_rejected(apply) -> None:
    builder = _complete()
    with pytest.raises(ValidationError, match="UTF-8"):
        apply(builder)
    grant = builder.grant_data()
    assert LONE_SURROGATE not in grant.key_phrase
    assert grant.features == {}


def test_feature_overwrite_keeps_latest_value() -> None:
    grant = _complete().with_feature("admin", "fred").with_feature("admin", "joe")
    assert grant.grant_data().features == {"admin": "joe"}


def test_with_features_applies_each_entry() -> None:
    grant = _complete().with_features({"a": "1", "b": "2"}).grant_data()
    assert grant.features == {"a": "1", "b": "2"}

    with pytest.raises(ValidationError):
        LicenseBuilder().with_features({"a": ""})


def test_empty_keyphrase_rejected() -> None:
    with pytest.raises(ValidationError):
        LicenseBuilder().with_keyphrase("")


def test_empty_id_rejected() -> None:
    with pytest.raises(ValidationError):
        LicenseBuilder().with_id("")


def test_id_defaults_to_unique_uuid() -> None:
    first = _complete().grant_data().id
    second = _complete().grant_data().id
    assert first != second
    assert str(uuid.UUID(first)) == first


def test_id_override() -> None:
    assert _complete().with_id("customer-42").grant_data().id == "customer-42"


def test_expiry_is_start_of_day_utc() -> None:
    grant = _complete().with_expiry("2024-02-28").grant_data()
    assert grant.expires == datetime(2024, 2, 28, tzinfo=timezone.utc)
    assert grant.expires.utcoffset() == timedelta(0)


@pytest.mark.parametrize(
    "value",
    ["", "2024/02/28", "28-02-2024", "2024-2-28", "2024-02-30", "2024-13-01", "soon"],
)
def test_malformed_expiry_rejected(value: str) -> None:
    with pytest.raises(DateFormatError):
        LicenseBuilder().with_expiry(value)


def test_duration_is_relative_to_clock() -> None:
    now = datetime(2026, 5, 1, 8, 30, tzinfo=timezone.utc)
    builder = LicenseBuilder(clock=lambda: now).with_duration(90)
    grant = builder.with_max_users(1).with_keyphrase("k").grant_data()
    assert grant.expires == now + timedelta(seconds=90)


def test_duration_rejects_non_numbers() -> None:
    with pytest.raises(ValidationError):
        LicenseBuilder().with_duration("60")  # type: ignore[arg-type]


def test_missing_fields_reported() -> None:
    with pytest.raises(ValidationError) as excinfo:
        LicenseBuilder().with_feature("a", "b").grant_data()
    message = str(excinfo.value)
    assert "expires" in message
    assert "max_users" in message
    assert "key_phrase" in message


def test_build_attaches_signing_data() -> None:
    lic = _complete().with_feature("debug", "on").build()
    assert len(lic.signing_data.signature_bytes) == 64  # noqa: PLR2004
    assert len(lic.signing_data.public_key_bytes) == 32  # noqa: PLR2004
    assert lic.grant_data.features == {"debug": "on"}


def test_each_build_uses_a_fresh_keypair() -> None:
    builder = _complete()
    first = builder.build()
    second = builder.build()
    assert first.signing_data.public_key_bytes != second.signing_data.public_key_bytes


def test_expiry_before_year_1000_builds() -> None:
    lic = _complete().with_expiry("0999-01-01").build()
    assert lic.grant_data.expires == datetime(999, 1, 1, tzinfo=timezone.utc)
