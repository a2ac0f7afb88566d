from heroes.domain.enums.image_kind import ImageKind
__all__ = [
    "ImageKind",
]
