# heroes/database/models/__init__.py

from heroes.database.core.main import Base
from heroes.database.models.missionary import (
    Missionary,
    BiographySection,
    TimelineEvent,
    MissionaryImage,
)

__all__ = [
    "Base",
    "Missionary",
    "BiographySection",
    "TimelineEvent",
    "MissionaryImage",
]
