from __future__ import annotations

from datetime import datetime, timezone

import pytest

from offlic.common.models import License
from offlic.issuer.builder import LicenseBuilder

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def _reference_builder(expiry: str = "2024-02-28") -> LicenseBuilder:
    return (
        LicenseBuilder()
        .with_feature("debug", "parts1")
        .with_feature("emails", "email1, email2")
        .with_feature("admin", "fred,joe")
        .with_feature("remote connect", "yes")
        .with_expiry(expiry)
        .with_max_users(10)
        .with_keyphrase("phrase")
    )


@pytest.fixture
def builder_factory():
    """Factory for builders preloaded with the reference features."""
    return _reference_builder


@pytest.fixture
def signed_license() -> License:
    """License signed with features from the reference scenario."""
    return _reference_builder().build()


@pytest.fixture
def future_license() -> License:
    """License that expires well after FIXED_NOW."""
    return _reference_builder("2099-12-31").build()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
