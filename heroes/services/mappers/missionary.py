# heroes/services/mappers/missionary.py
from __future__ import annotations

from heroes.database.models.missionary import Missionary as DBMissionary
from heroes.database.repos.missionary_query import MissionaryListing
from heroes.services.schemas.missionaries import (
    BiographySectionRowRead,
    MissionaryBase,
    MissionaryDetailRead,
    MissionaryImageRead,
    MissionaryListItem,
    TimelineEventRowRead,
)


def to_list_item(listing: MissionaryListing) -> MissionaryListItem:
    # row.images holds image rows; the list view wants bare URLs
    base = MissionaryBase.model_validate(listing.missionary)
    return MissionaryListItem(
        **base.model_dump(),
        images=list(listing.images),
        biography_sections_count=listing.biography_sections_count,
        timeline_events_count=listing.timeline_events_count,
    )


def to_detail_read(row: DBMissionary) -> MissionaryDetailRead:
    base = MissionaryBase.model_validate(row)
    return MissionaryDetailRead(
        **base.model_dump(),
        achievements=list(row.achievements or []),
        locations=list(row.locations or []),
        quiz=list(row.quiz or []),
        biography=[BiographySectionRowRead.model_validate(s) for s in row.biography_sections],
        timeline=[TimelineEventRowRead.model_validate(e) for e in row.timeline_events],
        images=[MissionaryImageRead.model_validate(i) for i in row.images],
    )
