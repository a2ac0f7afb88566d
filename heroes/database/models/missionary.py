# heroes/database/models/missionary.py
from __future__ import annotations

from datetime import datetime
from typing import Optional, List

from sqlalchemy import (
    Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, Enum as SAEnum, Index, false,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from heroes.database.core.main import Base
from heroes.database.core.service_object import ServiceObject
from heroes.domain.enums import ImageKind


# =======================
# Missionaries
# =======================
class Missionary(ServiceObject, Base):
    """
    Scalar profile fields plus the small unordered/ordered lists that are
    only ever read whole (categories, achievements, locations, quiz) as JSONB.
    Biography, timeline and images live in their own tables.
    """
    __tablename__ = "missionaries"
    __table_args__ = (
        Index("ix_missionaries_birth_year", "birth_year"),
        Index("ix_missionaries_century", "century"),
    )

    # slug, e.g. "william-carey"
    id: Mapped[str] = mapped_column(String(128), primary_key=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    birth_year: Mapped[int] = mapped_column(Integer, nullable=False)
    death_year: Mapped[Optional[int]] = mapped_column(Integer)
    century: Mapped[int] = mapped_column(Integer, nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False, default="")

    categories: Mapped[List[str]] = mapped_column(JSONB, nullable=False, default=list)
    achievements: Mapped[List[str]] = mapped_column(JSONB, nullable=False, default=list)
    locations: Mapped[List[dict]] = mapped_column(JSONB, nullable=False, default=list)
    quiz: Mapped[List[dict]] = mapped_column(JSONB, nullable=False, default=list)

    source: Mapped[Optional[str]] = mapped_column(String(64))
    source_url: Mapped[Optional[str]] = mapped_column(Text)
    attribution: Mapped[Optional[str]] = mapped_column(Text)
    last_modified: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    lang: Mapped[str] = mapped_column(String(8), nullable=False, default="en")

    biography_sections: Mapped[List["BiographySection"]] = relationship(
        "BiographySection",
        back_populates="missionary",
        cascade="all, delete-orphan",
        order_by=lambda: BiographySection.section_order,
    )
    timeline_events: Mapped[List["TimelineEvent"]] = relationship(
        "TimelineEvent",
        back_populates="missionary",
        cascade="all, delete-orphan",
        order_by=lambda: TimelineEvent.year,
    )
    images: Mapped[List["MissionaryImage"]] = relationship(
        "MissionaryImage",
        back_populates="missionary",
        cascade="all, delete-orphan",
        order_by=lambda: MissionaryImage.is_primary.desc(),
    )

    def __repr__(self) -> str:
        return f"<Missionary id={self.id!r} name={self.name!r}>"


def _missionary_fk() -> Mapped[str]:
    return mapped_column(
        String(128),
        ForeignKey("missionaries.id", ondelete="CASCADE"),
        nullable=False,
    )


class BiographySection(ServiceObject, Base):
    __tablename__ = "biography_sections"
    __table_args__ = (
        UniqueConstraint("missionary_id", "section_order", name="uq_biography_sections_missionary_order"),
        Index("ix_biography_sections_missionary_id", "missionary_id"),
    )

    missionary_id: Mapped[str] = _missionary_fk()
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    section_order: Mapped[int] = mapped_column(Integer, nullable=False)

    missionary: Mapped["Missionary"] = relationship("Missionary", back_populates="biography_sections")


class TimelineEvent(ServiceObject, Base):
    __tablename__ = "timeline_events"
    __table_args__ = (
        Index("ix_timeline_events_missionary_id", "missionary_id"),
    )

    missionary_id: Mapped[str] = _missionary_fk()
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    event_type: Mapped[Optional[str]] = mapped_column(String(64))
    significance: Mapped[Optional[str]] = mapped_column(Text)
    location: Mapped[Optional[str]] = mapped_column(String(255))

    missionary: Mapped["Missionary"] = relationship("Missionary", back_populates="timeline_events")


class MissionaryImage(ServiceObject, Base):
    __tablename__ = "missionary_images"
    __table_args__ = (
        UniqueConstraint("missionary_id", "image_url", name="uq_missionary_images_missionary_url"),
        Index("ix_missionary_images_missionary_id", "missionary_id"),
    )

    missionary_id: Mapped[str] = _missionary_fk()
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    image_type: Mapped[ImageKind] = mapped_column(
        SAEnum(ImageKind, name="image_kind"),
        nullable=False,
        default=ImageKind.portrait,
    )
    caption: Mapped[Optional[str]] = mapped_column(Text)
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=false(), default=False)

    missionary: Mapped["Missionary"] = relationship("Missionary", back_populates="images")
