# heroes/services/api/routers/missionaries.py
from __future__ import annotations

from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from heroes.database.repos.missionary_query import MissionaryQueryRepo
from heroes.domain.policies.profile_query import parse_int
from heroes.services.api.deps import transactional_session
from heroes.services.mappers.missionary import to_detail_read, to_list_item
from heroes.services.schemas.missionaries import (
    MissionaryDetailRead,
    MissionaryListResponse,
    StatsResponse,
)

router = APIRouter(tags=["missionaries"])


@router.get("/missionaries", response_model=MissionaryListResponse)
def list_missionaries(
    century: Optional[str] = Query(None, description="e.g. 19 for births in 1800-1899"),
    search: Optional[str] = Query(None, description="Substring of name or summary"),
    db: Session = Depends(transactional_session),
) -> MissionaryListResponse:
    repo = MissionaryQueryRepo(db)
    # an unparseable century is ignored rather than rejected
    listings = repo.list_missionaries(
        century=parse_int(century, 0, minimum=1) or None,
        search=search or None,
    )
    items = [to_list_item(x) for x in listings]
    return MissionaryListResponse(count=len(items), missionaries=items)


@router.get("/missionaries/{missionary_id}", response_model=MissionaryDetailRead)
def get_missionary(
    missionary_id: str = Path(...),
    db: Session = Depends(transactional_session),
) -> MissionaryDetailRead:
    row = MissionaryQueryRepo(db).get(missionary_id)
    if row is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Missionary not found")
    return to_detail_read(row)


@router.get("/stats", response_model=StatsResponse)
def stats(db: Session = Depends(transactional_session)) -> StatsResponse:
    return StatsResponse(statistics=MissionaryQueryRepo(db).stats())
