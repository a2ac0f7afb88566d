# heroes/services/mappers/profile.py
from __future__ import annotations

from typing import Iterable, List

from heroes.domain.entities.profile import Profile
from heroes.domain.policies.profile_query import Page, ProfileSummary
from heroes.services.schemas.profiles import PaginationRead, ProfileRead, ProfileSummaryRead


def to_summary_read(summary: ProfileSummary) -> ProfileSummaryRead:
    return ProfileSummaryRead.model_validate(summary)


def to_summary_reads(summaries: Iterable[ProfileSummary]) -> List[ProfileSummaryRead]:
    return [to_summary_read(s) for s in summaries]


def to_profile_read(profile: Profile) -> ProfileRead:
    return ProfileRead.model_validate(profile)


def to_pagination_read(page: Page) -> PaginationRead:
    return PaginationRead(limit=page.limit, offset=page.offset, total=page.total, has_more=page.has_more)
