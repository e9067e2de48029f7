"""Admin authentication.

A single shared password from settings. Login answers yes/no only; no session
or token is issued.
"""

import hmac
import logging

logger = logging.getLogger(__name__)


def check_admin_password(password: str, expected: str) -> bool:
    ok = hmac.compare_digest((password or "").encode(), expected.encode())
    if not ok:
        logger.warning("Admin login failed")
    return ok
