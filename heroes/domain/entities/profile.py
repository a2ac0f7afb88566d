# heroes/domain/entities/profile.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class ProfileDates:
    birth: int
    death: Optional[int] = None

    def __post_init__(self):
        if self.death is not None and self.death < self.birth:
            raise ValueError("death year must not precede birth year")

    @property
    def display(self) -> str:
        """Derived from birth/death, never stored: '1761-1834', or '1940-' while death is unknown."""
        return f"{self.birth}-{self.death}" if self.death is not None else f"{self.birth}-"


@dataclass(frozen=True)
class BiographySection:
    title: str
    content: str


@dataclass(frozen=True)
class TimelineEvent:
    year: int
    title: str
    description: str = ""
    event_type: str = ""
    significance: str = ""
    location: Optional[str] = None


@dataclass(frozen=True)
class Location:
    name: str
    coordinates: Tuple[float, float]
    location_type: str = ""
    description: str = ""
    years: str = ""
    significance: str = ""

    def __post_init__(self):
        if len(self.coordinates) != 2:
            raise ValueError("coordinates must be a (lat, lon) pair")
        lat, lon = self.coordinates
        if not -90 <= lat <= 90 or not -180 <= lon <= 180:
            raise ValueError(f"coordinates out of range: {self.coordinates!r}")


@dataclass(frozen=True)
class QuizItem:
    question: str
    options: Tuple[str, ...]
    correct_index: int
    explanation: str = ""

    def __post_init__(self):
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"correct_index {self.correct_index} is not a valid index into {len(self.options)} options"
            )


@dataclass(frozen=True)
class Profile:
    """
    One biographical record. Immutable once built; the catalog and the
    normalized store both hand these out read-only.

    Ordered collections (biography, achievements, quiz) keep their input
    order. The timeline is kept sorted by year (stable for equal years).
    """
    id: str
    name: str
    display_name: str
    dates: ProfileDates
    summary: str = ""

    image: Optional[str] = None
    images: Tuple[str, ...] = ()

    biography: Tuple[BiographySection, ...] = ()
    timeline: Tuple[TimelineEvent, ...] = ()
    locations: Tuple[Location, ...] = ()
    categories: Tuple[str, ...] = ()
    achievements: Tuple[str, ...] = ()
    quiz: Tuple[QuizItem, ...] = ()

    # Provenance
    source: Optional[str] = None
    source_url: Optional[str] = None
    attribution: Optional[str] = None
    last_modified: Optional[datetime] = None
    lang: str = "en"

    def __post_init__(self):
        if not self.id or not self.id.strip():
            raise ValueError("id is required")
        if not self.name or not self.name.strip():
            raise ValueError("name is required")
        ordered = tuple(sorted(self.timeline, key=lambda e: e.year))
        if ordered != self.timeline:
            object.__setattr__(self, "timeline", ordered)

    @property
    def primary_image(self) -> Optional[str]:
        if self.image:
            return self.image
        return self.images[0] if self.images else None
