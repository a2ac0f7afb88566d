# heroes/database/repos/_mapping.py
from __future__ import annotations

from typing import Any, Dict

from heroes.database.models.missionary import Missionary as DBMissionary
from heroes.domain.catalog.loader import profile_from_dict
from heroes.domain.entities.profile import Profile


def to_record(row: DBMissionary) -> Dict[str, Any]:
    """Re-assemble the catalog JSON shape from a missionary row and its child rows."""
    primary = next((img.image_url for img in row.images if img.is_primary), None)
    return {
        "id": row.id,
        "name": row.name,
        "displayName": row.display_name,
        "dates": {"birth": row.birth_year, "death": row.death_year},
        "image": primary,
        "images": [img.image_url for img in row.images],
        "summary": row.summary,
        "biography": [{"title": s.title, "content": s.content} for s in row.biography_sections],
        "timeline": [
            {
                "year": e.year,
                "title": e.title,
                "description": e.description or "",
                "type": e.event_type or "",
                "significance": e.significance or "",
                "location": e.location,
            }
            for e in row.timeline_events
        ],
        "locations": list(row.locations or []),
        "categories": list(row.categories or []),
        "achievements": list(row.achievements or []),
        "quiz": list(row.quiz or []),
        "source": row.source,
        "sourceUrl": row.source_url,
        "attribution": row.attribution,
        "lastModified": row.last_modified.isoformat() if row.last_modified else None,
        "lang": row.lang,
    }


def to_domain_profile(row: DBMissionary) -> Profile:
    return profile_from_dict(to_record(row))
