"""Authentication utilities.

Users are checked against a static credential table. A successful login
issues an HS256 session token carried in a cookie; every gated request
verifies that cookie again, nothing is cached server-side.
"""

import hmac
from typing import Dict, Mapping

from fastapi import Depends, Request
from loguru import logger

from .config import Settings
from .core.exceptions import InvalidCredentialsError, UnauthorizedError
from .core.security import TokenPayload, create_session_token, verify_session_token


class CredentialStore:
    """Read-only username -> password table, fixed at startup."""

    def __init__(self, users: Mapping[str, str]):
        self._users: Dict[str, str] = dict(users)

    def check(self, username: str, password: str) -> bool:
        """Exact, case-sensitive plaintext comparison."""
        expected = self._users.get(username)
        if expected is None:
            return False
        return hmac.compare_digest(expected.encode("utf-8"), password.encode("utf-8"))


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the app was created with."""
    return request.app.state.settings


def get_credentials(request: Request) -> CredentialStore:
    """Dependency returning the app's credential table."""
    return request.app.state.credentials


def authenticate(credentials: CredentialStore, settings: Settings, username: str, password: str) -> str:
    """
    Check a username/password pair and issue a session token.

    Raises:
        InvalidCredentialsError: unknown username or wrong password
    """
    if not credentials.check(username, password):
        logger.warning(f"Rejected login for {username!r}")
        raise InvalidCredentialsError()

    logger.info(f"User {username!r} logged in")
    return create_session_token(
        username,
        settings.JWT_SECRET,
        expires_minutes=settings.SESSION_TTL_MINUTES,
    )


async def require_session(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> TokenPayload:
    """Dependency gating a route behind a valid session cookie."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        logger.debug(f"No session cookie on {request.url.path}")
        raise UnauthorizedError()

    payload = verify_session_token(token, settings.JWT_SECRET)
    if payload is None:
        logger.debug(f"Invalid session token on {request.url.path}")
        raise UnauthorizedError()

    request.state.user = payload
    return payload
