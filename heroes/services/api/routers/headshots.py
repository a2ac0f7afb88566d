# heroes/services/api/routers/headshots.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends, Path
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from heroes.common.settings import get_settings
from heroes.database.repos.missionary_query import MissionaryQueryRepo
from heroes.services.api.deps import transactional_session
from heroes.services.schemas.missionaries import HeadshotListResponse

router = APIRouter(prefix="/ai-headshots", tags=["headshots"])


@router.get("", response_model=HeadshotListResponse)
def list_headshots(db: Session = Depends(transactional_session)) -> HeadshotListResponse:
    """AI images known to the store; the configured list until any are loaded."""
    storage = get_settings().storage
    files = MissionaryQueryRepo(db).list_ai_image_files() or list(storage.fallback_headshots)
    return HeadshotListResponse(
        available_images=files,
        base_url=storage.public_base_url,
        endpoints=[f"/ai-headshots/{f}" for f in files],
    )


@router.get("/{filename:path}", status_code=HTTPStatus.FOUND, response_class=RedirectResponse)
def get_headshot(filename: str = Path(...)) -> RedirectResponse:
    """Images live in object storage; we only point the client there."""
    url = get_settings().storage.url_for(filename)
    return RedirectResponse(url=url, status_code=HTTPStatus.FOUND)
