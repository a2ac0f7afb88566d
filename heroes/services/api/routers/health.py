# heroes/services/api/routers/health.py
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from heroes.common.settings import get_settings
from heroes.domain.catalog import Catalog
from heroes.services.api.deps import get_catalog
from heroes.services.schemas.profiles import HealthRead

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthRead)
def health(catalog: Catalog = Depends(get_catalog)) -> HealthRead:
    s = get_settings()
    prefix = s.api.prefix
    return HealthRead(
        timestamp=datetime.now(timezone.utc),
        version=s.version,
        profiles_count=len(catalog),
        endpoints=[
            "/health",
            f"{prefix}/profiles",
            f"{prefix}/profile/{{id}}",
            f"{prefix}/search/{{query}}",
        ],
    )
