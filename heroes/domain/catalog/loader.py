# heroes/domain/catalog/loader.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from heroes.common.logging import get_logger
from heroes.common.naming.slugger import slugify
from heroes.domain.entities.profile import (
    BiographySection,
    Location,
    Profile,
    ProfileDates,
    QuizItem,
    TimelineEvent,
)
from heroes.domain.errors import ProfileNotFound

log = get_logger(__name__)

PACKAGED_DATA = "profiles.json"


def _parse_timestamp(v: str | None) -> Optional[datetime]:
    if not v:
        return None
    return datetime.fromisoformat(v.replace("Z", "+00:00"))


def profile_from_dict(d: Mapping[str, Any]) -> Profile:
    """Build a Profile from one record of the catalog JSON (camelCase keys)."""
    dates = d.get("dates") or {}
    images = tuple(d.get("images") or ())
    return Profile(
        id=d["id"],
        name=d["name"],
        display_name=d.get("displayName") or d["name"],
        dates=ProfileDates(birth=int(dates["birth"]), death=dates.get("death")),
        summary=d.get("summary", ""),
        image=d.get("image") or (images[0] if images else None),
        images=images,
        biography=tuple(
            BiographySection(title=s["title"], content=s["content"])
            for s in d.get("biography", ())
        ),
        timeline=tuple(
            TimelineEvent(
                year=int(e["year"]),
                title=e["title"],
                description=e.get("description", ""),
                event_type=e.get("type", ""),
                significance=e.get("significance", ""),
                location=e.get("location"),
            )
            for e in d.get("timeline", ())
        ),
        locations=tuple(
            Location(
                name=loc["name"],
                coordinates=tuple(float(c) for c in loc["coordinates"]),
                location_type=loc.get("type", ""),
                description=loc.get("description", ""),
                years=loc.get("years", ""),
                significance=loc.get("significance", ""),
            )
            for loc in d.get("locations", ())
        ),
        categories=tuple(d.get("categories", ())),
        achievements=tuple(d.get("achievements", ())),
        quiz=tuple(
            QuizItem(
                question=q["question"],
                options=tuple(q["options"]),
                correct_index=int(q["correctIndex"]),
                explanation=q.get("explanation", ""),
            )
            for q in d.get("quiz", ())
        ),
        source=d.get("source"),
        source_url=d.get("sourceUrl"),
        attribution=d.get("attribution"),
        last_modified=_parse_timestamp(d.get("lastModified")),
        lang=d.get("lang", "en"),
    )


@dataclass(frozen=True)
class Catalog:
    """
    Read-only, ordered set of profiles. Built once and passed explicitly
    to whatever needs it (routers get it through a FastAPI dependency).
    """
    profiles: Tuple[Profile, ...]
    _by_id: Dict[str, Profile] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        by_id: Dict[str, Profile] = {}
        for p in self.profiles:
            if p.id != slugify(p.id):
                raise ValueError(f"profile id {p.id!r} is not a slug")
            if p.id in by_id:
                raise ValueError(f"duplicate profile id {p.id!r}")
            by_id[p.id] = p
        object.__setattr__(self, "_by_id", by_id)

    def __len__(self) -> int:
        return len(self.profiles)

    def __iter__(self):
        return iter(self.profiles)

    def ids(self) -> List[str]:
        return [p.id for p in self.profiles]

    def get(self, profile_id: str) -> Optional[Profile]:
        return self._by_id.get(profile_id)

    def require(self, profile_id: str) -> Profile:
        found = self.get(profile_id)
        if found is None:
            raise ProfileNotFound(profile_id, self.ids())
        return found


def catalog_from_records(records: List[Mapping[str, Any]]) -> Catalog:
    return Catalog(profiles=tuple(profile_from_dict(r) for r in records))


@lru_cache(maxsize=4)
def load_catalog(path: Optional[Path] = None) -> Catalog:
    """
    Parse the catalog JSON once per path. With no path, the profiles.json
    shipped in this package is used.
    """
    if path is None:
        raw = resources.files(__package__).joinpath(PACKAGED_DATA).read_text(encoding="utf-8")
        origin = f"package:{PACKAGED_DATA}"
    else:
        raw = Path(path).read_text(encoding="utf-8")
        origin = str(path)

    catalog = catalog_from_records(json.loads(raw))
    log.info("Loaded %d profiles from %s", len(catalog), origin)
    return catalog
