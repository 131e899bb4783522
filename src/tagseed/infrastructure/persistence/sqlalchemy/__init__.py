"""SQLAlchemy persistence layer for the fixture database."""

from .engine import create_sqlite_engine, get_session_maker, sqlite_url
from .init_db import create_tables
from .models import Base, TagModel, UserModel, UserTagModel
from .repositories import (
    TagRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    UserTagRepositorySQLAlchemy,
)

__all__ = [
    # Engine
    "create_sqlite_engine",
    "get_session_maker",
    "sqlite_url",
    # Schema
    "create_tables",
    # Tables
    "Base",
    "TagModel",
    "UserModel",
    "UserTagModel",
    # Repositories
    "TagRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "UserTagRepositorySQLAlchemy",
]
