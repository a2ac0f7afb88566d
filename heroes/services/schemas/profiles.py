# heroes/services/schemas/profiles.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


# ---------- Profile parts ----------

class ProfileDatesRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    birth: int
    death: Optional[int] = None
    display: str


class BiographySectionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    content: str


class TimelineEventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    title: str
    description: str = ""
    event_type: str = Field("", serialization_alias="type")
    significance: str = ""


class LocationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    coordinates: Tuple[float, float]
    location_type: str = Field("", serialization_alias="type")
    description: str = ""
    years: str = ""
    significance: str = ""


class QuizItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    question: str
    options: List[str]
    correct_index: int = Field(..., serialization_alias="correctIndex")
    explanation: str = ""


# ---------- Profile ----------

class ProfileSummaryRead(BaseModel):
    """List/search card. Keys keep the catalog's camelCase on the wire."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    display_name: str = Field(..., serialization_alias="displayName")
    dates: ProfileDatesRead
    image: Optional[str] = None
    summary: str = ""
    categories: List[str] = []


class ProfileRead(ProfileSummaryRead):
    images: List[str] = []
    biography: List[BiographySectionRead] = []
    timeline: List[TimelineEventRead] = []
    locations: List[LocationRead] = []
    achievements: List[str] = []
    quiz: List[QuizItemRead] = []

    source: Optional[str] = None
    source_url: Optional[str] = Field(None, serialization_alias="sourceUrl")
    attribution: Optional[str] = None
    last_modified: Optional[datetime] = Field(None, serialization_alias="lastModified")
    lang: str = "en"


# ---------- Responses ----------

class PaginationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    limit: int
    offset: int
    total: int
    has_more: bool = Field(..., serialization_alias="hasMore")


class ProfileListResponse(BaseModel):
    profiles: List[ProfileSummaryRead]
    pagination: PaginationRead
    category: str


class SearchResponse(BaseModel):
    query: str
    results: List[ProfileSummaryRead]
    total_results: int
    showing: int


class ProfileNotFoundResponse(BaseModel):
    error: str = "Profile not found"
    message: str
    available_ids: List[str]


class HealthRead(BaseModel):
    status: str = "healthy"
    timestamp: datetime
    version: str
    profiles_count: int
    endpoints: List[str]


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
    timestamp: Optional[datetime] = None
    available_endpoints: Optional[List[str]] = None
