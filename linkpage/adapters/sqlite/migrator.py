import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

DOWN_MARKER = "-- Down"


class SQLiteMigrator:
    """Applies pending `.sql` files from a migrations directory, in name order.

    Only the part of a file above the "-- Down" marker is executed. Applied
    filenames are recorded in the `_migrations` table.
    """

    def __init__(self, db_path: str, migrations_dir: str):
        self.db_path = db_path
        self.migrations_dir = Path(migrations_dir)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.execute("PRAGMA foreign_keys = ON;")
        conn.execute(
            "CREATE TABLE IF NOT EXISTS _migrations ("
            " id INTEGER PRIMARY KEY AUTOINCREMENT,"
            " filename TEXT UNIQUE NOT NULL,"
            " applied_at DATETIME DEFAULT CURRENT_TIMESTAMP)"
        )
        return conn

    def _scripts(self) -> list[Path]:
        return sorted(self.migrations_dir.glob("*.sql"), key=lambda p: p.name)

    @staticmethod
    def _applied(conn: sqlite3.Connection) -> set[str]:
        return {row[0] for row in conn.execute("SELECT filename FROM _migrations")}

    def pending(self) -> list[str]:
        conn = self._connect()
        try:
            done = self._applied(conn)
        finally:
            conn.close()
        return [p.name for p in self._scripts() if p.name not in done]

    def run_migrations(self) -> list[str]:
        """Apply all pending migrations. Returns the filenames applied."""
        conn = self._connect()
        applied_now: list[str] = []
        try:
            done = self._applied(conn)
            for script in self._scripts():
                if script.name in done:
                    continue
                logger.info("Applying migration: %s", script.name)
                self._apply(conn, script)
                applied_now.append(script.name)
            logger.debug("Database %s is up to date", self.db_path)
        finally:
            conn.close()
        return applied_now

    @staticmethod
    def _apply(conn: sqlite3.Connection, script: Path) -> None:
        forward = script.read_text().split(DOWN_MARKER, 1)[0]
        try:
            conn.executescript(forward)
            conn.execute("INSERT INTO _migrations (filename) VALUES (?)", (script.name,))
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise RuntimeError(f"Migration {script.name} failed: {e}") from e
