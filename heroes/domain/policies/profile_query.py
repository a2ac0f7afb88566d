# heroes/domain/policies/profile_query.py
"""
Filtering, search and pagination over an in-memory profile collection.

Every function here is pure: inputs are never mutated, results are fresh
lists, and malformed parameters degrade to defaults instead of raising.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from heroes.domain.entities.profile import Profile, ProfileDates

T = TypeVar("T")

ALL_CATEGORIES = "all"
DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


@dataclass(frozen=True)
class ProfileSummary:
    """List/search projection of a Profile."""
    id: str
    name: str
    display_name: str
    dates: ProfileDates
    image: Optional[str]
    summary: str
    categories: Tuple[str, ...]


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    total: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total


def to_summary(profile: Profile) -> ProfileSummary:
    return ProfileSummary(
        id=profile.id,
        name=profile.name,
        display_name=profile.display_name,
        dates=profile.dates,
        image=profile.primary_image,
        summary=profile.summary,
        categories=profile.categories,
    )


def list_summaries(profiles: Iterable[Profile]) -> List[ProfileSummary]:
    return [to_summary(p) for p in profiles]


def filter_by_category(profiles: Sequence[Profile], category: Optional[str]) -> List[Profile]:
    """
    Keep profiles having a tag that contains `category` (case-insensitive).
    Substring, not exact: "reform" matches "social_reformer".
    Missing/empty category or "all" returns everything.
    """
    if not category or category == ALL_CATEGORIES:
        return list(profiles)
    needle = category.casefold()
    return [p for p in profiles if any(needle in tag.casefold() for tag in p.categories)]


def _haystack(profile: Profile) -> Iterable[str]:
    yield profile.name
    yield profile.display_name
    yield profile.summary
    yield from profile.categories
    for section in profile.biography:
        yield section.title
        yield section.content


def search_profiles(profiles: Sequence[Profile], query: Optional[str]) -> List[Profile]:
    """
    Case-insensitive substring search over name, display name, summary,
    tags and biography sections. Results keep collection order (no scoring).
    An empty query matches every profile.
    """
    needle = (query or "").casefold()
    return [p for p in profiles if any(needle in text.casefold() for text in _haystack(p))]


def paginate(seq: Sequence[T], limit: int, offset: int) -> Page[T]:
    """Slice [offset, offset+limit); an offset past the end yields an empty page."""
    return Page(items=list(seq[offset:offset + limit]), total=len(seq), limit=limit, offset=offset)


def parse_int(value: object, default: int, *, minimum: Optional[int] = None) -> int:
    """
    Lenient query-string int. Reads the leading integer, so "5abc" is 5
    and "1.5" is 1. None, text without a leading integer, or anything
    below `minimum` falls back to `default`. Never raises.
    """
    if value is None or isinstance(value, bool):
        return default
    m = _LEADING_INT.match(str(value))
    if m is None:
        return default
    n = int(m.group(0))
    if minimum is not None and n < minimum:
        return default
    return n


def parse_window(
    limit: object,
    offset: object,
    *,
    default_limit: int = DEFAULT_LIMIT,
    default_offset: int = DEFAULT_OFFSET,
) -> Tuple[int, int]:
    """(limit, offset) from raw query values: limit >= 1, offset >= 0."""
    return (
        parse_int(limit, default_limit, minimum=1),
        parse_int(offset, default_offset, minimum=0),
    )
