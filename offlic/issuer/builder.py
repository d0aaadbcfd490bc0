"""
Builder that accumulates and validates grant data before signing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from offlic.common.config import Config
from offlic.common.exceptions import ValidationError
from offlic.common.models import GrantData, License, new_license_id
from offlic.common.timeutils import expiry_after, parse_expiry_date
from offlic.issuer.signer import LicenseSigner

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from datetime import datetime

logger = logging.getLogger(__name__)


def _require_text(value: object, what: str) -> str:
    if not isinstance(value, str) or not value:
        msg = f"{what} must be a non-empty string"
        raise ValidationError(msg)
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as err:
        msg = f"{what} must be valid UTF-8 text"
        raise ValidationError(msg) from err
    return value


class LicenseBuilder:
    """Chainable builder for license grant data.

    Every ``with_*`` call validates its input, updates the builder and
    returns it, so calls may be made in any order::

        lic = (
            LicenseBuilder()
            .with_feature("admin", "fred,joe")
            .with_expiry("2030-02-28")
            .with_max_users(10)
            .with_keyphrase("phrase")
            .build()
        )
    """

    def __init__(
        self,
        config: Config | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.config = config or Config()
        self.clock = clock
        self._id: str = new_license_id()
        self._expires: datetime | None = None
        self._features: dict[str, str] = {}
        self._max_users: int | None = None
        self._key_phrase: str | None = None

    def with_feature(self, key: str, value: str) -> LicenseBuilder:
        self._features[_require_text(key, "Feature name")] = _require_text(
            value, f"Value of feature {key!r}"
        )
        return self

    def with_features(self, features: Mapping[str, str]) -> LicenseBuilder:
        for key, value in features.items():
            self.with_feature(key, value)
        return self

    def with_expiry(self, date_string: str) -> LicenseBuilder:
        """Expire at 00:00 UTC on a ``YYYY-MM-DD`` date."""
        self._expires = parse_expiry_date(date_string, self.config.DATE_FORMAT)
        return self

    def with_duration(self, seconds: float) -> LicenseBuilder:
        """Expire ``seconds`` from now; meant for short-lived licenses."""
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            msg = f"Duration must be a number of seconds, got {seconds!r}"
            raise ValidationError(msg)
        now = self.clock() if self.clock else None
        try:
            self._expires = expiry_after(seconds, now)
        except (OverflowError, ValueError) as err:
            msg = f"Duration out of range: {seconds!r}"
            raise ValidationError(msg) from err
        return self

    def with_max_users(self, count: int) -> LicenseBuilder:
        if isinstance(count, bool) or not isinstance(count, int):
            msg = f"max_users must be an integer, got {count!r}"
            raise ValidationError(msg)
        if count < 1:
            msg = f"max_users must be at least 1, got {count}"
            raise ValidationError(msg)
        self._max_users = count
        return self

    def with_keyphrase(self, key_phrase: str) -> LicenseBuilder:
        self._key_phrase = _require_text(key_phrase, "Key phrase")
        return self

    def with_id(self, license_id: str) -> LicenseBuilder:
        self._id = _require_text(license_id, "License id")
        return self

    def grant_data(self) -> GrantData:
        """Unsigned grant data; fails if a required field was never set."""
        missing = [
            name
            for name, value in (
                ("expires", self._expires),
                ("max_users", self._max_users),
                ("key_phrase", self._key_phrase),
            )
            if value is None
        ]
        if missing:
            msg = f"License is missing required fields: {', '.join(missing)}"
            raise ValidationError(msg)
        return GrantData(
            id=self._id,
            expires=self._expires,
            features=dict(self._features),
            max_users=self._max_users,
            key_phrase=self._key_phrase,
        )

    def build(self) -> License:
        """Finalize: sign the grant data with a fresh keypair."""
        grant = self.grant_data()
        logger.debug("Building license %s", grant.id)
        return LicenseSigner(config=self.config).sign(grant)
