# tests/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from heroes.domain.catalog import Catalog, load_catalog

APP_SCHEMA = "heroes"


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    """The six packaged profiles."""
    return load_catalog()


@pytest.fixture(scope="session")
def _postgres_container():
    # Imported lazily so catalog/API tests run without Docker
    from testcontainers.postgres import PostgresContainer

    with PostgresContainer("postgres:15-alpine") as pg:
        # testcontainers hands out psycopg2 URLs; we ship psycopg (v3)
        url = pg.get_connection_url().replace("psycopg2", "psycopg")
        yield url


def _prepare_schema(engine: Engine, schema: str = APP_SCHEMA) -> None:
    with engine.begin() as conn:
        conn.execute(text(f'create schema if not exists "{schema}"'))
        conn.execute(text(f'set search_path to "{schema}", public'))
        conn.execute(text("CREATE EXTENSION IF NOT EXISTS pgcrypto"))


@pytest.fixture(scope="session")
def db_engine(_postgres_container) -> Engine:
    from heroes.database.models import Base

    engine = create_engine(_postgres_container, future=True)
    _prepare_schema(engine, APP_SCHEMA)

    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
