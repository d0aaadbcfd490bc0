"""
Basic usage example of offlic.

This example builds and signs a license, writes it to a temporary file,
loads it back, and checks it before unlocking a feature.
"""

import logging
import sys
import tempfile
from pathlib import Path

# Add the project root to the path to import offlic
sys.path.insert(0, str(Path(__file__).parent.parent))

from offlic import (
    ExpiredError,
    LicenseBuilder,
    LicenseError,
    SigningError,
    check_license,
    has_feature,
    load_from_file,
    save_to_file,
)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)

    lic = (
        LicenseBuilder()
        .with_feature("debug", "parts1")
        .with_feature("admin", "fred,joe")
        .with_duration(3600)
        .with_max_users(10)
        .with_keyphrase("phrase")
        .build()
    )

    with tempfile.TemporaryDirectory() as tmp:
        path = save_to_file(lic, Path(tmp) / "license.json")
        logger.info("License %s written to %s", lic.license_id, path)

        try:
            loaded = load_from_file(path)
            check_license(loaded)
        except ExpiredError:
            logger.exception("License expired")
            sys.exit(1)
        except SigningError:
            logger.exception("License tampered")
            sys.exit(1)
        except LicenseError:
            logger.exception("License could not be read")
            sys.exit(1)

    if has_feature(loaded, "admin"):
        logger.info("Admin users: %s", loaded.features["admin"])


if __name__ == "__main__":
    main()
