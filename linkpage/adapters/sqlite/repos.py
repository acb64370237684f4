import json
import logging
import sqlite3
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from linkpage.components.analytics import AnalyticsEvent, AnalyticsFailure
from linkpage.components.icons import parse_icon_style
from linkpage.domain.entities import BlockVariant, ContentBlock, Link, Profile

from .flags import decode_active_flag, decode_flag_or_default, encode_active_flag

logger = logging.getLogger(__name__)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def _parse_dt(value: str) -> datetime:
    dt = datetime.fromisoformat(value)
    return dt if dt.tzinfo else dt.replace(tzinfo=UTC)


class _SQLiteRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn


class SQLiteProfileRepo(_SQLiteRepo):
    def __init__(self, db_path: str, default_is_rtl: bool = True):
        super().__init__(db_path)
        self.default_is_rtl = default_is_rtl

    def save(self, profile: Profile) -> Profile:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO profiles (
                    id, user_id, username, display_name, bio, avatar_url,
                    template, primary_color, background_color, font_family,
                    font_size, page_width, is_rtl, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    username=excluded.username,
                    display_name=excluded.display_name,
                    bio=excluded.bio,
                    avatar_url=excluded.avatar_url,
                    template=excluded.template,
                    primary_color=excluded.primary_color,
                    background_color=excluded.background_color,
                    font_family=excluded.font_family,
                    font_size=excluded.font_size,
                    page_width=excluded.page_width,
                    is_rtl=excluded.is_rtl,
                    updated_at=excluded.updated_at
            """,
                (
                    str(profile.id),
                    str(profile.user_id),
                    profile.username,
                    profile.display_name,
                    profile.bio,
                    profile.avatar_url,
                    profile.template,
                    profile.primary_color,
                    profile.background_color,
                    profile.font_family,
                    profile.font_size,
                    profile.page_width,
                    encode_active_flag(profile.is_rtl),
                    profile.created_at.isoformat(),
                    profile.updated_at.isoformat(),
                ),
            )
            conn.commit()
            return profile
        finally:
            conn.close()

    def get_by_username(self, username: str) -> Profile | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM profiles WHERE username = ?", (username,)
            ).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def get_by_owner(self, owner_id: UUID) -> Profile | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM profiles WHERE user_id = ?", (str(owner_id),)
            ).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Profile:
        return Profile(
            id=UUID(row["id"]),
            user_id=UUID(row["user_id"]),
            username=row["username"],
            display_name=row["display_name"],
            bio=row["bio"],
            avatar_url=row["avatar_url"],
            template=row["template"],
            primary_color=row["primary_color"],
            background_color=row["background_color"],
            font_family=row["font_family"],
            font_size=row["font_size"],
            page_width=row["page_width"],
            is_rtl=decode_flag_or_default(
                row["is_rtl"], self.default_is_rtl, "profiles.is_rtl"
            ),
            created_at=_parse_dt(row["created_at"]),
            updated_at=_parse_dt(row["updated_at"]),
        )


class _SQLiteOrderedRepo(_SQLiteRepo):
    table: str

    def _map_row(self, row: dict[str, Any]) -> Any:
        raise NotImplementedError

    def _map_rows(self, rows: list[dict[str, Any]]) -> list[Any]:
        """Map rows one at a time; a corrupt row is logged and left out."""
        items = []
        for row in rows:
            try:
                items.append(self._map_row(row))
            except (ValueError, TypeError, KeyError):
                logger.warning(
                    "Skipping unreadable %s row %s", self.table, row.get("id"), exc_info=True
                )
        return items

    def delete(self, item_id: UUID) -> None:
        conn = self._get_conn()
        try:
            conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (str(item_id),))
            conn.commit()
        finally:
            conn.close()

    def save_positions(self, owner_id: UUID, positions: Mapping[UUID, int]) -> None:
        """All positions land in one transaction, or none do."""
        conn = self._get_conn()
        try:
            with conn:
                conn.executemany(
                    f"UPDATE {self.table} SET position = ? WHERE id = ? AND user_id = ?",
                    [
                        (position, str(item_id), str(owner_id))
                        for item_id, position in positions.items()
                    ],
                )
        finally:
            conn.close()

    def _select_for_owner(self, owner_id: UUID, active_only: bool) -> list[dict[str, Any]]:
        sql = f"SELECT * FROM {self.table} WHERE user_id = ?"
        params: list[Any] = [str(owner_id)]
        if active_only:
            sql += " AND is_active = ?"
            params.append(encode_active_flag(True))
        sql += " ORDER BY position ASC, created_at ASC"
        conn = self._get_conn()
        try:
            return conn.execute(sql, params).fetchall()
        finally:
            conn.close()

    def _select_one(self, item_id: UUID) -> dict[str, Any] | None:
        conn = self._get_conn()
        try:
            row: dict[str, Any] | None = conn.execute(
                f"SELECT * FROM {self.table} WHERE id = ?", (str(item_id),)
            ).fetchone()
            return row
        finally:
            conn.close()


class SQLiteLinkRepo(_SQLiteOrderedRepo):
    table = "links"

    def save(self, link: Link) -> Link:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO links (
                    id, user_id, title, url, icon, icon_style, custom_icon_url,
                    description, is_active, position, clicks, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    title=excluded.title,
                    url=excluded.url,
                    icon=excluded.icon,
                    icon_style=excluded.icon_style,
                    custom_icon_url=excluded.custom_icon_url,
                    description=excluded.description,
                    is_active=excluded.is_active,
                    position=excluded.position,
                    updated_at=excluded.updated_at
            """,
                (
                    str(link.id),
                    str(link.user_id),
                    link.title,
                    link.url,
                    link.icon,
                    link.icon_style.value,
                    link.custom_icon_url,
                    link.description,
                    encode_active_flag(link.is_active),
                    link.position,
                    link.clicks,
                    link.created_at.isoformat(),
                    link.updated_at.isoformat(),
                ),
            )
            conn.commit()
            return link
        finally:
            conn.close()

    def get_by_id(self, link_id: UUID) -> Link | None:
        row = self._select_one(link_id)
        return self._map_row(row) if row else None

    def list_for_owner(self, owner_id: UUID, active_only: bool = False) -> list[Link]:
        return self._map_rows(self._select_for_owner(owner_id, active_only))

    def increment_clicks(self, link_id: UUID) -> None:
        conn = self._get_conn()
        try:
            conn.execute("UPDATE links SET clicks = clicks + 1 WHERE id = ?", (str(link_id),))
            conn.commit()
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Link:
        return Link(
            id=UUID(row["id"]),
            user_id=UUID(row["user_id"]),
            title=row["title"],
            url=row["url"],
            icon=row["icon"],
            icon_style=parse_icon_style(row["icon_style"]),
            custom_icon_url=row["custom_icon_url"],
            description=row["description"],
            is_active=decode_active_flag(row["is_active"]),
            position=row["position"],
            clicks=row["clicks"],
            created_at=_parse_dt(row["created_at"]),
            updated_at=_parse_dt(row["updated_at"]),
        )


class SQLiteBlockRepo(_SQLiteOrderedRepo):
    table = "content_blocks"

    def save(self, block: ContentBlock) -> ContentBlock:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO content_blocks (
                    id, user_id, variant, title, content, is_active, position,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    title=excluded.title,
                    content=excluded.content,
                    is_active=excluded.is_active,
                    position=excluded.position,
                    updated_at=excluded.updated_at
            """,
                (
                    str(block.id),
                    str(block.user_id),
                    block.variant.value,
                    block.title,
                    block.content,
                    encode_active_flag(block.is_active),
                    block.position,
                    block.created_at.isoformat(),
                    block.updated_at.isoformat(),
                ),
            )
            conn.commit()
            return block
        finally:
            conn.close()

    def get_by_id(self, block_id: UUID) -> ContentBlock | None:
        row = self._select_one(block_id)
        return self._map_row(row) if row else None

    def list_for_owner(self, owner_id: UUID, active_only: bool = False) -> list[ContentBlock]:
        return self._map_rows(self._select_for_owner(owner_id, active_only))

    def _map_row(self, row: dict[str, Any]) -> ContentBlock:
        return ContentBlock(
            id=UUID(row["id"]),
            user_id=UUID(row["user_id"]),
            variant=BlockVariant(row["variant"]),
            title=row["title"],
            content=row["content"],
            is_active=decode_active_flag(row["is_active"]),
            position=row["position"],
            created_at=_parse_dt(row["created_at"]),
            updated_at=_parse_dt(row["updated_at"]),
        )


class SQLiteEventStore(_SQLiteRepo):
    def store(self, event: AnalyticsEvent) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO analytics_events (id, name, profile_id, attributes_json, ts)
                VALUES (?, ?, ?, ?, ?)
            """,
                (
                    str(event.id),
                    event.name,
                    event.profile_id,
                    json.dumps(event.attributes, default=str),
                    event.timestamp.astimezone(UTC).isoformat(),
                ),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise AnalyticsFailure(str(e)) from e
        finally:
            conn.close()

    def list_events(
        self,
        profile_id: UUID | None = None,
        since: datetime | None = None,
    ) -> list[AnalyticsEvent]:
        sql = "SELECT * FROM analytics_events WHERE 1=1"
        params: list[Any] = []
        if profile_id is not None:
            sql += " AND profile_id = ?"
            params.append(str(profile_id))
        if since is not None:
            sql += " AND ts >= ?"
            params.append(since.astimezone(UTC).isoformat())
        sql += " ORDER BY ts ASC"

        conn = self._get_conn()
        try:
            rows = conn.execute(sql, params).fetchall()
        finally:
            conn.close()

        return [
            AnalyticsEvent(
                id=UUID(row["id"]),
                name=row["name"],
                attributes=json.loads(row["attributes_json"]),
                timestamp=_parse_dt(row["ts"]),
            )
            for row in rows
        ]
