# tests/conftest.py
from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import Base, get_db
from app.main import app
from app.shared.database import models  # noqa: F401


# =========================================
# SQLite en memoria, una conexión compartida por test
# =========================================
@pytest.fixture(scope="function")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def session_maker(engine: Engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db(session_maker) -> Generator[Session, None, None]:
    """Session para preparar datos y verificar el estado persistido"""
    sess = session_maker()
    try:
        yield sess
    finally:
        sess.close()


@pytest.fixture(scope="function")
def client(session_maker) -> Generator[TestClient, None, None]:
    def _override_get_db():
        sess = session_maker()
        try:
            yield sess
        finally:
            sess.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
