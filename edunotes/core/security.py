import hmac

from edunotes.core.logging import get_logger
from edunotes.utils.exceptions import AuthenticationError

logger = get_logger(__name__)


def verify_admin_code(code: str, expected: str) -> bool:
    """Check the shared admin passphrase, raising AuthenticationError on mismatch"""
    if not code or not hmac.compare_digest(code.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Failed admin authentication attempt")
        raise AuthenticationError("Invalid admin code")

    logger.info("Successful admin authentication")
    return True
