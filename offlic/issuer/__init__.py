# License issuing: builder and signer
from offlic.issuer.builder import LicenseBuilder as LicenseBuilder
from offlic.issuer.signer import LicenseSigner as LicenseSigner

__all__ = ["LicenseBuilder", "LicenseSigner"]
