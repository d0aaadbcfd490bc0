# License checking
from offlic.verifier.validator import LicenseValidator as LicenseValidator

__all__ = ["LicenseValidator"]
