import re
from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig

ALGORITHM = "HS256"

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {"": "seconds", "s": "seconds", "m": "minutes", "h": "hours", "d": "days"}


def parse_expires_in(value) -> timedelta:
    """
    Parse a token lifetime such as "7d", "12h", "30m", "45s" or 3600

    Raises:
        ValueError: if the value is not a recognised duration
    """
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)
    match = _DURATION_RE.match(str(value))
    if match is None:
        raise ValueError(f"Invalid token lifetime: {value!r}")
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit]: int(amount)})


def _signing_secret() -> str:
    secret = ApplicationConfig.JWT_SECRET
    if not secret:
        raise RuntimeError("JWT_SECRET is not configured")
    return secret


def generate_jwt(user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
    """
    Generate JWT session token

    Args:
        user_id: User UUID
        expires_delta: Token lifetime, defaults to JWT_EXPIRES_IN (7 days)

    Returns:
        JWT token string (HS256)

    Raises:
        RuntimeError: if JWT_SECRET is missing
    """
    if expires_delta is None:
        expires_delta = parse_expires_in(ApplicationConfig.JWT_EXPIRES_IN)
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, _signing_secret(), algorithm=ALGORITHM)


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict, or None if the signature, structure or
        expiry check fails
    """
    try:
        payload = jwt.decode(
            token,
            _signing_secret(),
            algorithms=[ALGORITHM],
            options={"require_exp": True},
        )
    except JWTError:
        return None
    if not isinstance(payload.get("user_id"), str):
        return None
    return payload
