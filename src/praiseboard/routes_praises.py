"""Praise router: gated CRUD over the in-memory praise store."""

from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from loguru import logger

from .auth import require_session
from .core.exceptions import ValidationError
from .core.security import TokenPayload
from .pages import render_praises_page
from .store import PraiseStore

router = APIRouter(
    prefix="/praises",
    tags=["praises"],
    dependencies=[Depends(require_session)],
)


def get_store(request: Request) -> PraiseStore:
    """Dependency returning the app-owned praise store."""
    return request.app.state.praise_store


def _back_to_list() -> RedirectResponse:
    return RedirectResponse(url="/praises", status_code=status.HTTP_302_FOUND)


@router.get("", response_class=HTMLResponse)
async def list_praises(store: PraiseStore = Depends(get_store)):
    """Render every praise with its update and delete forms."""
    return render_praises_page(store.entries())


@router.post("")
async def create_praise(
    praise: Optional[str] = Form(None),
    store: PraiseStore = Depends(get_store),
    user: TokenPayload = Depends(require_session),
):
    """Append a praise."""
    if not praise:
        raise ValidationError()

    logger.debug(f"New praise from {user.sub!r}")
    store.add(praise)
    return _back_to_list()


@router.post("/delete/{index}")
async def delete_praise(
    index: str,
    store: PraiseStore = Depends(get_store),
):
    """Delete the praise at ``index``; unknown indices are ignored."""
    store.delete(index)
    return _back_to_list()


@router.post("/{index}")
async def update_praise(
    index: str,
    updated_praise: Optional[str] = Form(None),
    store: PraiseStore = Depends(get_store),
):
    """Replace the praise at ``index``; unknown indices are ignored."""
    if not updated_praise:
        raise ValidationError()

    store.update(index, updated_praise)
    return _back_to_list()


@router.api_route("/{rest:path}", methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"])
async def unknown_praise_route(rest: str):
    """Anything else under /praises is still behind the session gate."""
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
