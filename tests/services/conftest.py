# tests/services/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy.orm import Session
from sqlalchemy import text
from starlette.testclient import TestClient

from heroes.services.api.app import create_app
from heroes.services.api.deps import get_catalog, transactional_session

APP_SCHEMA = "heroes"


@pytest.fixture()
def client(catalog):
    """TestClient for the catalog routes; no database involved."""
    app = create_app()
    app.dependency_overrides[get_catalog] = lambda: catalog
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def api_session(db_engine):
    """
    One connection/transaction for the whole test, rolled back at the end.
    Tests seed through this session; the API reads through it too.
    """
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(bind=conn, future=True)
    session.execute(text(f'SET search_path TO "{APP_SCHEMA}", public'))
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        conn.close()


@pytest.fixture()
def api_client(api_session, catalog):
    """
    A TestClient whose `transactional_session` dependency yields `api_session`,
    so rows flushed by the test are visible to the requests it makes.
    """
    app = create_app()

    def _override():
        yield api_session

    app.dependency_overrides[transactional_session] = _override
    app.dependency_overrides[get_catalog] = lambda: catalog

    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
