"""Fixtures providing a fresh SQLite file with the generator schema."""

import pytest

from tagseed.infrastructure.persistence.sqlalchemy import (
    create_sqlite_engine,
    create_tables,
    get_session_maker,
)


@pytest.fixture
def engine(tmp_path):
    engine = create_sqlite_engine(tmp_path / "schema.sqlite")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with get_session_maker(engine)() as session:
        yield session
