# heroes/database/seed.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from sqlalchemy.orm import Session

from heroes.common.logging import get_logger
from heroes.common.settings import StorageConfig, get_settings
from heroes.database.models import (
    Missionary as DBMissionary,
    BiographySection as DBBiographySection,
    TimelineEvent as DBTimelineEvent,
    MissionaryImage as DBMissionaryImage,
)
from heroes.domain.catalog import Catalog, load_catalog
from heroes.domain.entities.profile import Profile
from heroes.domain.enums import ImageKind

log = get_logger(__name__)

DATA_ORIGIN = "catalog"


def century_of(year: int) -> int:
    """1761 -> 18, 1800 -> 19 (same convention the ?century= filter uses)."""
    return year // 100 + 1


def _to_row(profile: Profile, storage: StorageConfig) -> DBMissionary:
    primary = profile.primary_image
    row = DBMissionary(
        id=profile.id,
        name=profile.name,
        display_name=profile.display_name,
        birth_year=profile.dates.birth,
        death_year=profile.dates.death,
        century=century_of(profile.dates.birth),
        summary=profile.summary,
        categories=list(profile.categories),
        achievements=list(profile.achievements),
        locations=[
            {
                "name": loc.name,
                "coordinates": list(loc.coordinates),
                "type": loc.location_type,
                "description": loc.description,
                "years": loc.years,
                "significance": loc.significance,
            }
            for loc in profile.locations
        ],
        quiz=[
            {
                "question": q.question,
                "options": list(q.options),
                "correctIndex": q.correct_index,
                "explanation": q.explanation,
            }
            for q in profile.quiz
        ],
        source=profile.source,
        source_url=profile.source_url,
        attribution=profile.attribution,
        last_modified=profile.last_modified,
        lang=profile.lang,
        data_origin=DATA_ORIGIN,
    )

    row.biography_sections = [
        DBBiographySection(title=s.title, content=s.content, section_order=i, data_origin=DATA_ORIGIN)
        for i, s in enumerate(profile.biography)
    ]
    row.timeline_events = [
        DBTimelineEvent(
            year=e.year,
            title=e.title,
            description=e.description,
            event_type=e.event_type,
            significance=e.significance,
            location=e.location,
            data_origin=DATA_ORIGIN,
        )
        for e in profile.timeline
    ]

    urls = list(profile.images) or ([primary] if primary else [])
    images = [
        DBMissionaryImage(
            image_url=url,
            image_type=ImageKind.portrait,
            is_primary=(url == primary),
            data_origin=DATA_ORIGIN,
        )
        for url in dict.fromkeys(urls)
    ]
    headshot = storage.headshots.get(profile.id)
    if headshot:
        images.append(DBMissionaryImage(
            image_url=storage.url_for(headshot),
            image_type=ImageKind.ai_headshot,
            caption=f"AI-enhanced portrait of {profile.name}",
            is_primary=False,
            data_origin=DATA_ORIGIN,
        ))
    row.images = images
    return row


def seed_from_catalog(session: Session, catalog: Catalog, storage: Optional[StorageConfig] = None) -> int:
    """
    Write every catalog profile into the normalized tables. Existing rows
    for the same id are replaced, so running this twice leaves one copy.
    Returns the number of missionaries written. Does not commit.
    """
    storage = storage or get_settings().storage
    written = 0
    for profile in catalog:
        existing = session.get(DBMissionary, profile.id)
        if existing is not None:
            log.debug("Replacing missionary %s", profile.id)
            session.delete(existing)
            session.flush()
        session.add(_to_row(profile, storage))
        written += 1
    session.flush()
    log.info("Seeded %d missionaries", written)
    return written


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Load the profile catalog into the missionary tables.")
    parser.add_argument("--data", type=Path, default=None, help="catalog JSON (defaults to the packaged one)")
    args = parser.parse_args(argv)

    from heroes.database.core.main import session_scope

    cfg = get_settings()
    catalog = load_catalog(args.data or cfg.catalog.data_path)
    with session_scope() as session:
        seed_from_catalog(session, catalog, cfg.storage)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
