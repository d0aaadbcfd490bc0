# offlic: offline signed licenses

from offlic.common.canonical import canonicalize
from offlic.common.decorators import requires_feature, requires_valid_license
from offlic.common.exceptions import (
    DateFormatError,
    DeserializationError,
    ExpiredError,
    FeatureError,
    InvalidSignatureError,
    LicenseError,
    LicenseIOError,
    SigningError,
    ValidationError,
)
from offlic.common.models import GrantData, License, SigningData
from offlic.common.persistence import (
    LicensePersistence,
    load_from_bytes,
    load_from_file,
    save_to_bytes,
    save_to_file,
)
from offlic.issuer.builder import LicenseBuilder
from offlic.issuer.signer import LicenseSigner, sign
from offlic.verifier.validator import (
    LicenseValidator,
    check_license,
    has_feature,
    verify,
)

__version__ = "0.1.0"

__all__ = [
    "DateFormatError",
    "DeserializationError",
    "ExpiredError",
    "FeatureError",
    "GrantData",
    "InvalidSignatureError",
    "License",
    "LicenseBuilder",
    "LicenseError",
    "LicenseIOError",
    "LicensePersistence",
    "LicenseSigner",
    "LicenseValidator",
    "SigningData",
    "SigningError",
    "ValidationError",
    "canonicalize",
    "check_license",
    "has_feature",
    "load_from_bytes",
    "load_from_file",
    "requires_feature",
    "requires_valid_license",
    "save_to_bytes",
    "save_to_file",
    "sign",
    "verify",
]
