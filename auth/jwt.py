"""
JWT-style token creation and verification.

Tokens are urlsafe-base64-encoded JSON payloads signed with HMAC-SHA256.
Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode

from auth.errors import Unauthenticated
from config.settings import config

logger = logging.getLogger(__name__)


def _sign(raw: bytes) -> str:
    return hmac.new(config.jwt_secret.encode(), raw, hashlib.sha256).hexdigest()


def create_token(user_id: int, expires_in: int | None = None) -> str:
    """Create a signed token containing ``user_id`` and expiry."""
    if expires_in is None:
        expires_in = config.jwt_expiry_seconds
    payload = {
        "user_id": user_id,
        "exp": int(time.time()) + expires_in,
    }
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return urlsafe_b64encode(raw).decode() + "." + _sign(raw)


def verify_token(token: str) -> int:
    """
    Verify token and return ``user_id``.

    Raises ``Unauthenticated`` on malformed, tampered or expired tokens.
    """
    try:
        encoded, sig = token.split(".", 1)
        raw = urlsafe_b64decode(encoded.encode())
        if not hmac.compare_digest(sig, _sign(raw)):
            raise ValueError("bad signature")
        payload = json.loads(raw)
        if payload["exp"] < time.time():
            raise ValueError("token expired")
        user_id = payload["user_id"]
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise ValueError("bad user_id")
        return user_id
    except (ValueError, KeyError, TypeError) as exc:
        logger.info("Rejected token: %s", exc)
        raise Unauthenticated() from exc
