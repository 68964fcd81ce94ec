import os
import sqlite3

import pytest

from person_directory.app.core.db import Database, resolve_database_path


def _tables(path):
    conn = sqlite3.connect(path)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
    finally:
        conn.close()
    return {row[0] for row in rows}


def test_init_schema_creates_table(tmp_path):
    db = Database(str(tmp_path / "people.db"))
    db.init_schema()
    assert "individuos" in _tables(db.path)


def test_init_schema_is_idempotent_and_keeps_rows(tmp_path):
    db = Database(str(tmp_path / "people.db"))
    db.init_schema()
    with db.cursor() as cursor:
        cursor.execute("INSERT INTO individuos (nome) VALUES (?)", ("Ana",))

    db.init_schema()

    with db.cursor() as cursor:
        rows = cursor.execute("SELECT id, nome FROM individuos").fetchall()
    assert [(row["id"], row["nome"]) for row in rows] == [(1, "Ana")]


def test_name_is_required_in_storage(tmp_path):
    db = Database(str(tmp_path / "people.db"))
    db.init_schema()
    with pytest.raises(sqlite3.IntegrityError):
        with db.cursor() as cursor:
            cursor.execute("INSERT INTO individuos (nome) VALUES (NULL)")


def test_cursor_does_not_commit_on_error(tmp_path):
    db = Database(str(tmp_path / "people.db"))
    db.init_schema()
    with pytest.raises(RuntimeError):
        with db.cursor() as cursor:
            cursor.execute("INSERT INTO individuos (nome) VALUES (?)", ("Ana",))
            raise RuntimeError("boom")
    with db.cursor() as cursor:
        assert cursor.execute("SELECT COUNT(*) FROM individuos").fetchone()[0] == 0


def test_resolve_database_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_database_path(":memory:") == ":memory:"
    absolute = os.path.abspath("somewhere.db")
    assert resolve_database_path(absolute) == absolute
    assert resolve_database_path("persons.db") == str((tmp_path / "persons.db").resolve())
    assert resolve_database_path("data/persons.db") == str((tmp_path / "data" / "persons.db").resolve())
