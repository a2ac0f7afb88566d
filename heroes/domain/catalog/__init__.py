from heroes.domain.catalog.loader import (
    Catalog,
    catalog_from_records,
    load_catalog,
    profile_from_dict,
)
__all__ = [
    "Catalog",
    "catalog_from_records",
    "load_catalog",
    "profile_from_dict",
]
