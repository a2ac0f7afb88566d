# heroes/services/schemas/missionaries.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from heroes.domain.enums import ImageKind


# ---------- Child rows ----------

class BiographySectionRowRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    content: str
    section_order: int


class TimelineEventRowRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    title: str
    description: Optional[str] = None
    event_type: Optional[str] = None
    significance: Optional[str] = None
    location: Optional[str] = None


class MissionaryImageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    image_url: str
    image_type: ImageKind
    caption: Optional[str] = None
    is_primary: bool = False


# ---------- Missionary ----------

class MissionaryBase(BaseModel):
    """Column-shaped (snake_case), mirroring the missionaries table."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    display_name: str
    birth_year: int
    death_year: Optional[int] = None
    century: int
    summary: str = ""
    categories: List[str] = []
    source: Optional[str] = None
    source_url: Optional[str] = None
    attribution: Optional[str] = None
    last_modified: Optional[datetime] = None
    lang: str = "en"


class MissionaryListItem(MissionaryBase):
    images: List[str] = []
    biography_sections_count: int = 0
    timeline_events_count: int = 0


class MissionaryDetailRead(MissionaryBase):
    achievements: List[str] = []
    locations: List[Dict[str, Any]] = []
    quiz: List[Dict[str, Any]] = []

    biography: List[BiographySectionRowRead] = []
    timeline: List[TimelineEventRowRead] = []
    images: List[MissionaryImageRead] = []


# ---------- Responses ----------

class MissionaryListResponse(BaseModel):
    message: str = "Heroes of Faith Missionaries"
    count: int
    missionaries: List[MissionaryListItem]


class StatsResponse(BaseModel):
    message: str = "Heroes of Faith Database Statistics"
    statistics: Dict[str, int]


class HeadshotListResponse(BaseModel):
    message: str = "AI Enhanced Missionary Images"
    available_images: List[str]
    base_url: str
    endpoints: List[str]


class ApiIndexResponse(BaseModel):
    message: str = "Heroes of Faith Missionaries API"
    version: str
    database: str
    endpoints: Dict[str, str]
    filters: Dict[str, str]
