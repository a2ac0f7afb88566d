# heroes/services/api/routers/profiles.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from heroes.common.logging import get_logger
from heroes.common.settings import get_settings
from heroes.domain.catalog import Catalog
from heroes.domain.policies.profile_query import (
    ALL_CATEGORIES,
    filter_by_category,
    list_summaries,
    paginate,
    parse_int,
    parse_window,
    search_profiles,
)
from heroes.services.api.deps import get_catalog
from heroes.services.mappers.profile import to_pagination_read, to_profile_read, to_summary_reads
from heroes.services.schemas.profiles import (
    ProfileListResponse,
    ProfileNotFoundResponse,
    ProfileRead,
    SearchResponse,
)

log = get_logger(__name__)

# mounted under settings.api.prefix by create_app
router = APIRouter(tags=["profiles"])

# limit/offset arrive as raw strings: junk degrades to the default instead of a 422


@router.get("/profiles", response_model=ProfileListResponse)
def list_profiles(
    limit: Optional[str] = Query(None, description="Page size (default 20)"),
    offset: Optional[str] = Query(None, description="Start index (default 0)"),
    category: Optional[str] = Query(None, description="Case-insensitive tag substring, or 'all'"),
    catalog: Catalog = Depends(get_catalog),
) -> ProfileListResponse:
    lim, off = parse_window(limit, offset, default_limit=get_settings().catalog.default_limit)
    category = category or ALL_CATEGORIES

    matches = filter_by_category(catalog.profiles, category)
    page = paginate(matches, lim, off)
    return ProfileListResponse(
        profiles=to_summary_reads(list_summaries(page.items)),
        pagination=to_pagination_read(page),
        category=category,
    )


@router.get(
    "/profile/{profile_id}",
    response_model=ProfileRead,
    responses={404: {"model": ProfileNotFoundResponse}},
)
def get_profile(
    profile_id: str = Path(...),
    catalog: Catalog = Depends(get_catalog),
) -> ProfileRead:
    # ProfileNotFound is turned into the 404 payload by the app's exception handler
    return to_profile_read(catalog.require(profile_id))


@router.get("/search/{query}", response_model=SearchResponse)
def search(
    query: str = Path(..., description="Free text; matched case-insensitively"),
    limit: Optional[str] = Query(None, description="Max results (default 10)"),
    catalog: Catalog = Depends(get_catalog),
) -> SearchResponse:
    lim = parse_int(limit, get_settings().catalog.search_limit, minimum=1)
    found = search_profiles(catalog.profiles, query)
    shown = paginate(found, lim, 0)
    log.debug("search %r: %d hits", query, shown.total)
    return SearchResponse(
        query=query,
        results=to_summary_reads(list_summaries(shown.items)),
        total_results=shown.total,
        showing=len(shown.items),
    )


# A trailing slash with nothing after it is an empty id / empty query,
# not an unknown endpoint.

@router.get(
    "/profile/",
    response_model=ProfileRead,
    responses={404: {"model": ProfileNotFoundResponse}},
    include_in_schema=False,
)
def get_profile_without_id(catalog: Catalog = Depends(get_catalog)) -> ProfileRead:
    return get_profile(profile_id="", catalog=catalog)


@router.get("/search/", response_model=SearchResponse, include_in_schema=False)
def search_everything(
    limit: Optional[str] = Query(None, description="Max results (default 10)"),
    catalog: Catalog = Depends(get_catalog),
) -> SearchResponse:
    return search(query="", limit=limit, catalog=catalog)
