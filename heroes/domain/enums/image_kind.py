from __future__ import annotations
from enum import StrEnum

class ImageKind(StrEnum):
    portrait = "portrait"
    ai_headshot = "ai_headshot"
