"""License decorators for function protection.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from offlic.common.models import License

from offlic.common.exceptions import FeatureError, LicenseError
from offlic.verifier.validator import LicenseValidator

logger = logging.getLogger(__name__)


def _resolve_license(source: Any, args: tuple[Any, ...]) -> License:
    """Get a license from an instance, a callable, or an attribute of self."""
    if isinstance(source, str):
        if not args:
            msg = f"Cannot get license attribute '{source}' without self"
            raise ValueError(msg)
        return getattr(args[0], source)
    if callable(source):
        return source()
    return source


def requires_valid_license(
    license_source: Any,
    error_message: str | None = None,
    *,
    raise_exception: bool = True,
    validator: LicenseValidator | None = None,
) -> Callable:
    """Decorator that runs the function only when the license checks out.

    Args:
        license_source: License, callable returning one, or attribute name on self
        error_message: Message to log when returning None
        raise_exception: Whether to re-raise the license error or return None
        validator: Validator to use (default: a fresh LicenseValidator)

    Returns:
        Decorated function that only executes for a valid, unexpired license
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            lic = _resolve_license(license_source, args)
            checker = validator or LicenseValidator()
            try:
                checker.check_license(lic)
            except LicenseError as err:
                if raise_exception:
                    raise
                logger.warning("License check failed: %s", error_message or err)
                return None
            return func(*args, **kwargs)

        return wrapper

    return decorator


def requires_feature(
    license_source: Any,
    feature: str,
    error_message: str | None = None,
    *,
    raise_exception: bool = True,
) -> Callable:
    """Decorator that runs the function only when the license grants a feature.

    Only the feature table is consulted; stack it under
    ``requires_valid_license`` when the signature must also be checked.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            lic = _resolve_license(license_source, args)
            if not LicenseValidator.has_feature(lic, feature):
                message = error_message or f"Feature '{feature}' not granted by license"
                if raise_exception:
                    raise FeatureError(message)
                logger.warning("License check failed: %s", message)
                return None
            return func(*args, **kwargs)

        return wrapper

    return decorator
