# heroes/database/repos/missionary_query.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from sqlalchemy import select, func, or_
from sqlalchemy.orm import Session

from heroes.database.models import (
    Missionary as DBMissionary,
    BiographySection as DBBiographySection,
    TimelineEvent as DBTimelineEvent,
    MissionaryImage as DBMissionaryImage,
)
from heroes.database.repos._mapping import to_domain_profile
from heroes.domain.entities.profile import Profile
from heroes.domain.enums import ImageKind


@dataclass
class MissionaryListing:
    """One row of /missionaries: the missionary plus aggregates over its child tables."""
    missionary: DBMissionary
    images: List[str] = field(default_factory=list)
    biography_sections_count: int = 0
    timeline_events_count: int = 0


class MissionaryQueryRepo:
    """
    Read-only queries over the normalized missionary tables.
    Nothing here writes; seeding lives in heroes.database.seed.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_missionaries(
        self,
        *,
        century: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[MissionaryListing]:
        """
        Filters are applied only when given: `century` is exact,
        `search` is a case-insensitive substring of name or summary.
        Ordered by birth year.
        """
        M = DBMissionary
        bio_count = (
            select(func.count(DBBiographySection.id))
            .where(DBBiographySection.missionary_id == M.id)
            .correlate(M)
            .scalar_subquery()
        )
        timeline_count = (
            select(func.count(DBTimelineEvent.id))
            .where(DBTimelineEvent.missionary_id == M.id)
            .correlate(M)
            .scalar_subquery()
        )

        conditions = []
        if century is not None:
            conditions.append(M.century == century)
        if search:
            conditions.append(or_(
                M.name.icontains(search, autoescape=True),
                M.summary.icontains(search, autoescape=True),
            ))

        stmt = select(M, bio_count.label("bio_count"), timeline_count.label("timeline_count"))
        if conditions:
            stmt = stmt.where(*conditions)
        stmt = stmt.order_by(M.birth_year.asc(), M.id.asc())

        rows = self.session.execute(stmt).all()
        images = self.batch_images_for(
            [m.id for (m, _b, _t) in rows]
        )
        return [
            MissionaryListing(
                missionary=m,
                images=images.get(m.id, []),
                biography_sections_count=int(b),
                timeline_events_count=int(t),
            )
            for (m, b, t) in rows
        ]

    def batch_images_for(self, missionary_ids: List[str]) -> Dict[str, List[str]]:
        if not missionary_ids:
            return {}
        stmt = (
            select(DBMissionaryImage.missionary_id, DBMissionaryImage.image_url)
            .where(DBMissionaryImage.missionary_id.in_(missionary_ids))
            .order_by(DBMissionaryImage.is_primary.desc(), DBMissionaryImage.image_url.asc())
        )
        out: Dict[str, List[str]] = {}
        for mid, url in self.session.execute(stmt).all():
            out.setdefault(mid, []).append(url)
        return out

    def get(self, missionary_id: str) -> Optional[DBMissionary]:
        """Row with biography/timeline/images reachable through its (ordered) relationships."""
        return self.session.get(DBMissionary, missionary_id)

    def get_profile(self, missionary_id: str) -> Optional[Profile]:
        row = self.get(missionary_id)
        return to_domain_profile(row) if row else None

    def list_ai_image_files(self) -> List[str]:
        """Object keys (last path segment) of AI headshots, ordered by missionary name."""
        stmt = (
            select(DBMissionaryImage.image_url)
            .join(DBMissionary, DBMissionary.id == DBMissionaryImage.missionary_id)
            .where(DBMissionaryImage.image_type == ImageKind.ai_headshot)
            .order_by(DBMissionary.name.asc())
        )
        return [url.rstrip("/").rsplit("/", 1)[-1] for url in self.session.execute(stmt).scalars().all()]

    def stats(self) -> Dict[str, int]:
        def _count(model) -> int:
            return int(self.session.execute(select(func.count()).select_from(model)).scalar_one())

        return {
            "missionaries": _count(DBMissionary),
            "biography_sections": _count(DBBiographySection),
            "timeline_events": _count(DBTimelineEvent),
            "images": _count(DBMissionaryImage),
        }
