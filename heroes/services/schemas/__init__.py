from heroes.services.schemas.profiles import (
    ProfileSummaryRead,
    ProfileRead,
    PaginationRead,
    ProfileListResponse,
    SearchResponse,
    ProfileNotFoundResponse,
    HealthRead,
    ErrorResponse,
)
from heroes.services.schemas.missionaries import (
    MissionaryListItem,
    MissionaryDetailRead,
    MissionaryListResponse,
    StatsResponse,
    HeadshotListResponse,
    ApiIndexResponse,
)
__all__ = [
    "ProfileSummaryRead",
    "ProfileRead",
    "PaginationRead",
    "ProfileListResponse",
    "SearchResponse",
    "ProfileNotFoundResponse",
    "HealthRead",
    "ErrorResponse",
    "MissionaryListItem",
    "MissionaryDetailRead",
    "MissionaryListResponse",
    "StatsResponse",
    "HeadshotListResponse",
    "ApiIndexResponse",
]
