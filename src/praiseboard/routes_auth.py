"""Auth router: login form, login and logout."""

from typing import Optional

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse
from loguru import logger

from .auth import CredentialStore, authenticate, get_credentials, get_settings
from .config import Settings
from .pages import render_login_page

router = APIRouter(tags=["auth"])


@router.get("/", response_class=HTMLResponse)
async def login_page():
    """Serve the login form."""
    return render_login_page()


@router.post("/login")
async def login(
    username: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    credentials: CredentialStore = Depends(get_credentials),
    settings: Settings = Depends(get_settings),
):
    """Check credentials, set the session cookie and go to the praise list."""
    token = authenticate(credentials, settings, username or "", password or "")

    response = RedirectResponse(url="/praises", status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        path="/",
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
    )
    return response


@router.post("/logout")
async def logout(settings: Settings = Depends(get_settings)):
    """Clear the session cookie. The token itself stays valid if replayed."""
    response = RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
    )
    logger.info("Session cookie cleared")
    return response
