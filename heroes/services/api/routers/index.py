# heroes/services/api/routers/index.py
from __future__ import annotations

from fastapi import APIRouter

from heroes.common.settings import get_settings
from heroes.services.schemas.missionaries import ApiIndexResponse

router = APIRouter(tags=["index"])


@router.get("/", response_model=ApiIndexResponse)
def api_index() -> ApiIndexResponse:
    s = get_settings()
    return ApiIndexResponse(
        version=s.version,
        database="PostgreSQL",
        endpoints={
            "/missionaries": "Get all missionaries (supports ?century=N, ?search=term)",
            "/missionaries/{id}": "Get specific missionary with full details",
            "/ai-headshots": "List available AI-enhanced images",
            "/ai-headshots/{filename}": "Get specific AI image (redirects to object storage)",
            "/stats": "Database statistics",
        },
        filters={
            "century": "Filter by century (e.g., ?century=19)",
            "search": "Search by name or summary (e.g., ?search=India)",
        },
    )
