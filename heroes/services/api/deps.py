# heroes/services/api/deps.py
from __future__ import annotations
from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from heroes.common.settings import get_settings
from heroes.database.core.main import SessionLocal
from heroes.domain.catalog import Catalog, load_catalog


def get_catalog() -> Catalog:
    """
    The static profile catalog via DI. Parsed once per process (load_catalog
    is cached); tests override this dependency with their own Catalog.
    """
    return load_catalog(get_settings().catalog.data_path)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Store routes only read, but a failure
    mid-request still rolls back through Session.begin().
    """
    with db.begin():
        yield db
