"""
Command-line interface for offlic.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from offlic.common.config import Config
from offlic.common.exceptions import ExpiredError, LicenseError, SigningError
from offlic.common.persistence import LicensePersistence
from offlic.common.timeutils import canonical_timestamp
from offlic.issuer.builder import LicenseBuilder
from offlic.verifier.validator import LicenseValidator


def _read_features_file(path: str) -> dict[str, str]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as err:
        msg = f"Cannot read features file {path}: {err}"
        raise click.ClickException(msg) from err
    if not isinstance(data, dict):
        msg = f"Features file {path} must contain a JSON object"
        raise click.ClickException(msg)
    return data


def _parse_feature(item: str) -> tuple[str, str]:
    key, sep, value = item.partition("=")
    if not sep:
        msg = f"Feature must look like KEY=VALUE, got {item!r}"
        raise click.BadParameter(msg, param_hint="--feature")
    return key.strip(), value.strip()


def _license_path(path: str | None) -> Path:
    return Path(path) if path else Config().LICENSE_FILE_PATH


@click.group()
def cli() -> None:
    """offlic signed license tool"""


@cli.command()
@click.option("--expires", default=None, help="Expiry date (YYYY-MM-DD, UTC)")
@click.option(
    "--duration", default=None, type=int, help="Expire this many seconds from now"
)
@click.option("--max-users", required=True, type=int, help="Licensed seat count")
@click.option("--key-phrase", required=True, help="Signing context phrase")
@click.option(
    "--feature", "features", multiple=True, help="Feature as KEY=VALUE (repeatable)"
)
@click.option(
    "--features-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="JSON object of feature names to values",
)
@click.option("--id", "license_id", default=None, help="Override the license id")
@click.option(
    "--out", default=None, type=click.Path(dir_okay=False), help="Output license file"
)
@click.option("--compact", is_flag=True, help="Write compact JSON")
def issue(  # noqa: PLR0913
    expires: str | None,
    duration: int | None,
    max_users: int,
    key_phrase: str,
    features: tuple[str, ...],
    features_file: str | None,
    license_id: str | None,
    out: str | None,
    compact: bool,  # noqa: FBT001
) -> None:
    """Issue and sign a new license"""
    if (expires is None) == (duration is None):
        msg = "Give exactly one of --expires or --duration"
        raise click.UsageError(msg)

    builder = LicenseBuilder()
    try:
        if features_file:
            builder.with_features(_read_features_file(features_file))
        for item in features:
            builder.with_feature(*_parse_feature(item))
        if expires is not None:
            builder.with_expiry(expires)
        else:
            builder.with_duration(duration)
        builder.with_max_users(max_users).with_keyphrase(key_phrase)
        if license_id is not None:
            builder.with_id(license_id)
        lic = builder.build()
        path = LicensePersistence.save_to_file(
            lic, _license_path(out), pretty=not compact
        )
    except LicenseError as err:
        raise click.ClickException(str(err)) from err

    click.echo(f"License {lic.license_id} written to {path}")


@cli.command()
@click.argument("path", required=False, type=click.Path(dir_okay=False))
def verify(path: str | None) -> None:
    """Verify a license signature and expiry"""
    try:
        lic = LicensePersistence.load_from_file(_license_path(path))
        LicenseValidator().check_license(lic)
    except ExpiredError as err:
        msg = f"License expired: {err}"
        raise click.ClickException(msg) from err
    except SigningError as err:
        msg = f"License tampered or corrupt: {err}"
        raise click.ClickException(msg) from err
    except LicenseError as err:
        raise click.ClickException(str(err)) from err

    click.echo(f"License valid until {canonical_timestamp(lic.expires)}")


@cli.command()
@click.argument("path", required=False, type=click.Path(dir_okay=False))
def show(path: str | None) -> None:
    """Show license terms without verifying them"""
    try:
        lic = LicensePersistence.load_from_file(_license_path(path))
    except LicenseError as err:
        raise click.ClickException(str(err)) from err

    grant = lic.grant_data
    click.echo(f"id: {grant.id}")
    click.echo(f"expires: {canonical_timestamp(grant.expires)}")
    click.echo(f"max_users: {grant.max_users}")
    for name in sorted(grant.features):
        click.echo(f"feature {name}: {grant.features[name]}")


if __name__ == "__main__":
    cli()
