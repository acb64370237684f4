import sqlite3

import pytest

from linkpage.adapters.sqlite.migrator import SQLiteMigrator


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "migrate.db")


def table_names(db_path):
    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
        return {row[0] for row in rows}
    finally:
        conn.close()


def test_initial_migration_creates_schema(db_path):
    applied = SQLiteMigrator(db_path, "migrations").run_migrations()

    assert applied == ["001_initial.sql"]
    assert {"profiles", "links", "content_blocks", "analytics_events", "_migrations"} <= table_names(
        db_path
    )


def test_migrations_are_idempotent(db_path):
    migrator = SQLiteMigrator(db_path, "migrations")
    migrator.run_migrations()

    assert migrator.run_migrations() == []
    assert migrator.pending() == []


def test_down_section_is_not_applied(db_path):
    SQLiteMigrator(db_path, "migrations").run_migrations()

    assert "links" in table_names(db_path)


def test_pending_lists_new_files_in_order(db_path, tmp_path):
    migrations = tmp_path / "migrations"
    migrations.mkdir()
    (migrations / "002_second.sql").write_text("CREATE TABLE second (id TEXT);")
    (migrations / "001_first.sql").write_text("CREATE TABLE first (id TEXT);\n-- Down\nDROP TABLE first;")
    (migrations / "notes.txt").write_text("ignored")
    migrator = SQLiteMigrator(db_path, str(migrations))

    assert migrator.pending() == ["001_first.sql", "002_second.sql"]
    assert migrator.run_migrations() == ["001_first.sql", "002_second.sql"]


def test_failed_migration_raises(db_path, tmp_path):
    migrations = tmp_path / "broken"
    migrations.mkdir()
    (migrations / "001_bad.sql").write_text("CREATE TABLE oops (;")

    with pytest.raises(RuntimeError, match="001_bad.sql"):
        SQLiteMigrator(db_path, str(migrations)).run_migrations()

    assert SQLiteMigrator(db_path, str(migrations)).pending() == ["001_bad.sql"]
