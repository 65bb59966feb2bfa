"""Session token signing and verification."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel


JWT_ALGORITHM = "HS256"


class TokenPayload(BaseModel):
    """Session token payload."""
    sub: str  # username
    iat: int  # Issued at timestamp
    exp: Optional[int] = None  # Only present when a TTL is configured


def create_session_token(
    username: str,
    secret: str,
    expires_minutes: Optional[int] = None,
) -> str:
    """
    Create a signed session token.

    Args:
        username: Authenticated username, stored as the subject
        secret: Server-side signing secret
        expires_minutes: Token lifetime; no ``exp`` claim when omitted

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "iat": int(now.timestamp()),
    }
    if expires_minutes:
        payload["exp"] = int((now + timedelta(minutes=expires_minutes)).timestamp())

    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_session_token(token: str, secret: str) -> TokenPayload:
    """
    Decode and verify a session token.

    Raises:
        jwt.ExpiredSignatureError: Token expired
        jwt.InvalidTokenError: Token invalid
    """
    payload = jwt.decode(
        token,
        secret,
        algorithms=[JWT_ALGORITHM],
        options={"require": ["sub", "iat"]},
    )
    return TokenPayload(**payload)


def verify_session_token(token: str, secret: str) -> Optional[TokenPayload]:
    """Verify a session token and return its payload, or None if invalid."""
    try:
        return decode_session_token(token, secret)
    except jwt.InvalidTokenError:
        return None
