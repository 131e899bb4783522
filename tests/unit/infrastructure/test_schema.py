"""Tests for the users/tags/user_tags schema as created in SQLite."""

import pytest
from sqlalchemy import inspect, text

from tagseed.infrastructure.persistence.sqlalchemy import sqlite_url


def _columns(engine, table):
    return {col["name"]: col for col in inspect(engine).get_columns(table)}


def _table_sql(engine, table):
    with engine.connect() as conn:
        return conn.execute(
            text("SELECT sql FROM sqlite_master WHERE type = 'table' AND name = :name"),
            {"name": table},
        ).scalar_one()


def test_creates_exactly_three_tables(engine):
    assert set(inspect(engine).get_table_names()) == {"users", "tags", "user_tags"}


def test_users_columns(engine):
    columns = _columns(engine, "users")

    assert list(columns) == ["id", "name"]
    assert str(columns["id"]["type"]) == "INTEGER"
    assert str(columns["name"]["type"]) == "VARCHAR(64)"
    assert columns["name"]["nullable"] is False


def test_tags_columns(engine):
    columns = _columns(engine, "tags")

    assert list(columns) == ["id", "title"]
    assert str(columns["title"]["type"]) == "VARCHAR(64)"
    assert columns["title"]["nullable"] is False


def test_user_tags_columns(engine):
    columns = _columns(engine, "user_tags")

    assert list(columns) == ["id", "user_id", "tag_id", "rank"]
    for name in ("user_id", "tag_id", "rank"):
        assert str(columns[name]["type"]) == "INTEGER"
        assert columns[name]["nullable"] is False
    assert columns["rank"]["default"] == "0"


@pytest.mark.parametrize("table", ["users", "tags", "user_tags"])
def test_primary_key_is_autoincrement(engine, table):
    assert inspect(engine).get_pk_constraint(table)["constrained_columns"] == ["id"]
    assert "AUTOINCREMENT" in _table_sql(engine, table)


@pytest.mark.parametrize(
    ("table", "constraint"),
    [
        ("users", "unique_user_id"),
        ("tags", "unique_tag_id"),
        ("user_tags", "unique_user_tag_id"),
    ],
)
def test_named_unique_constraint_on_id(engine, table, constraint):
    uniques = inspect(engine).get_unique_constraints(table)

    assert {"name": constraint, "column_names": ["id"]} in [
        {"name": u["name"], "column_names": u["column_names"]} for u in uniques
    ]


@pytest.mark.parametrize(
    ("table", "expected"),
    [
        ("users", {"user_id_index": ["id"]}),
        ("tags", {"tag_id_index": ["id"]}),
        (
            "user_tags",
            {
                "user_tag_id_index": ["id"],
                "ut_uid_index": ["user_id"],
                "ut_tid_index": ["tag_id"],
                "ut_rank_index": ["rank"],
            },
        ),
    ],
)
def test_indexes(engine, table, expected):
    indexes = {ix["name"]: ix["column_names"] for ix in inspect(engine).get_indexes(table)}

    assert indexes == expected


def test_rank_defaults_to_zero(engine):
    with engine.begin() as conn:
        conn.execute(text("INSERT INTO user_tags (user_id, tag_id) VALUES (1, 1)"))
        rank = conn.execute(text("SELECT rank FROM user_tags")).scalar_one()

    assert rank == 0


def test_sqlite_url(tmp_path):
    assert sqlite_url(tmp_path / "a.sqlite") == f"sqlite:///{tmp_path / 'a.sqlite'}"
