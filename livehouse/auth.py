"""
Admin sessions.

A single shared password unlocks admin mode. A successful login hands out
an opaque bearer token; every mutating API call must present one. Tokens
are held in process memory and last until logout or restart.
"""

import hmac
import logging
import secrets
import threading
from typing import Optional

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


class AuthenticationError(Exception):
    """Raised when a login password does not match."""

    def __init__(self, message: str = "Incorrect password"):
        self.message = message
        super().__init__(message)


class AdminSessions:
    def __init__(self, password: str):
        self._password = password
        self._tokens: set[str] = set()
        self._lock = threading.Lock()

    def login(self, password: str) -> str:
        if not hmac.compare_digest(password.encode(), self._password.encode()):
            logger.info("Rejected admin login")
            raise AuthenticationError()
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._tokens.add(token)
        logger.info("Admin session opened")
        return token

    def logout(self, token: str) -> bool:
        with self._lock:
            if token not in self._tokens:
                return False
            self._tokens.discard(token)
        logger.info("Admin session closed")
        return True

    def is_valid(self, token: Optional[str]) -> bool:
        if not token:
            return False
        with self._lock:
            return token in self._tokens


def token_from_header(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an 'Authorization: Bearer <token>' header value."""
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):].strip() or None
