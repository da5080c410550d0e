import datetime
import re

import jwt
from flask import current_app

ALGORITHM = "HS256"
DEFAULT_SECRET = "your_secret_key"
DEFAULT_EXPIRY = "1h"

CLAIM_KEYS = ("id", "username", "role", "company", "team")

_EXPIRY_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_UNIT_SECONDS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_expiry(value) -> datetime.timedelta:
    """Turn '90', '30m', '1h' or '7d' (or a timedelta) into a timedelta."""
    if isinstance(value, datetime.timedelta):
        return value
    if isinstance(value, int):
        return datetime.timedelta(seconds=value)
    match = _EXPIRY_RE.match(str(value or DEFAULT_EXPIRY))
    if not match:
        raise ValueError(f"Unsupported token expiry: {value!r}")
    amount, unit = match.groups()
    return datetime.timedelta(seconds=int(amount) * _UNIT_SECONDS[unit])


def _secret(secret=None):
    if secret:
        return secret
    return current_app.config.get("JWT_SECRET") or DEFAULT_SECRET


def issue_token(claims: dict, secret=None, expires_in=None) -> str:
    if expires_in is None:
        expires_in = current_app.config.get("JWT_EXPIRY", DEFAULT_EXPIRY)
    now = datetime.datetime.now(datetime.timezone.utc)
    payload = {key: claims.get(key) for key in CLAIM_KEYS}
    payload["iat"] = now
    payload["exp"] = now + parse_expiry(expires_in)
    return jwt.encode(payload, _secret(secret), algorithm=ALGORITHM)


def verify_token(token, secret=None):
    """Return the decoded claims, or None if the token is unusable for any reason."""
    if not token or not isinstance(token, str):
        return None
    try:
        return jwt.decode(token, _secret(secret), algorithms=[ALGORITHM])
    except jwt.InvalidTokenError:
        return None
