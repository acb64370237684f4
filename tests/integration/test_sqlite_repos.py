"""
Integration tests for the SQLite repositories against the real schema.
"""

import sqlite3
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from linkpage.adapters.sqlite import (
    SQLiteBlockRepo,
    SQLiteEventStore,
    SQLiteLinkRepo,
    SQLiteMigrator,
    SQLiteProfileRepo,
    decode_active_flag,
    decode_flag_or_default,
    encode_active_flag,
)
from linkpage.components.analytics import (
    PROFILE_VIEW,
    AnalyticsEmitter,
    AnalyticsEvent,
    AnalyticsFailure,
    InMemoryEventStore,
)
from linkpage.components.compose import ComposePageInput, run_compose
from linkpage.components.ordering import MoveInput, run_move
from linkpage.domain.entities import BlockVariant, ContentBlock, IconStyle, Link, Profile


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "test.db")
    SQLiteMigrator(path, "migrations").run_migrations()
    return path


@pytest.fixture
def profile_repo(db_path):
    return SQLiteProfileRepo(db_path)


@pytest.fixture
def link_repo(db_path):
    return SQLiteLinkRepo(db_path)


@pytest.fixture
def block_repo(db_path):
    return SQLiteBlockRepo(db_path)


def raw_value(db_path, sql, *params):
    conn = sqlite3.connect(db_path)
    try:
        return conn.execute(sql, params).fetchone()[0]
    finally:
        conn.close()


def write_raw(db_path, sql, *params):
    conn = sqlite3.connect(db_path)
    try:
        conn.execute(sql, params)
        conn.commit()
    finally:
        conn.close()


# --- Flags ---


class TestFlags:
    def test_round_trip(self):
        assert encode_active_flag(True) == "1"
        assert encode_active_flag(False) == "0"
        assert decode_active_flag("1") is True
        assert decode_active_flag("0") is False

    @pytest.mark.parametrize("raw", ["true", "false", "", None, "yes"])
    def test_corrupt_value_raises(self, raw):
        with pytest.raises(ValueError):
            decode_active_flag(raw)

    def test_corrupt_presentation_flag_reads_as_default(self, caplog):
        assert decode_flag_or_default("true", True, "profiles.is_rtl") is True
        assert decode_flag_or_default("", False, "profiles.is_rtl") is False
        assert decode_flag_or_default("1", False, "profiles.is_rtl") is True
        assert "profiles.is_rtl" in caplog.text


# --- Profiles ---


class TestProfileRepo:
    def test_save_and_lookup(self, profile_repo, owner):
        profile = Profile(
            user_id=owner.id,
            username="alice",
            display_name="Alice",
            background_color=None,
            is_rtl=True,
        )
        profile_repo.save(profile)

        by_name = profile_repo.get_by_username("alice")
        by_owner = profile_repo.get_by_owner(owner.id)

        assert by_name == by_owner
        assert by_name.id == profile.id
        assert by_name.background_color is None
        assert by_name.is_rtl is True
        assert by_name.created_at.tzinfo is not None

    def test_rtl_stored_as_text_flag(self, profile_repo, owner, db_path):
        profile_repo.save(Profile(user_id=owner.id, username="alice", display_name="A"))

        stored = raw_value(db_path, "SELECT is_rtl FROM profiles WHERE username = ?", "alice")

        assert stored == "0"

    @pytest.mark.parametrize("default", [True, False])
    def test_corrupt_rtl_flag_falls_back_to_default(self, db_path, owner, default):
        repo = SQLiteProfileRepo(db_path, default_is_rtl=default)
        repo.save(Profile(user_id=owner.id, username="alice", display_name="A"))
        write_raw(db_path, "UPDATE profiles SET is_rtl = 'true' WHERE username = 'alice'")

        assert repo.get_by_username("alice").is_rtl is default

    def test_update_in_place(self, profile_repo, owner):
        profile = profile_repo.save(Profile(user_id=owner.id, username="alice", display_name="A"))

        profile_repo.save(profile.model_copy(update={"username": "alice2", "template": "chef"}))

        assert profile_repo.get_by_username("alice") is None
        assert profile_repo.get_by_username("alice2").template == "chef"

    def test_username_is_unique(self, profile_repo, owner, other_owner):
        profile_repo.save(Profile(user_id=owner.id, username="alice", display_name="A"))

        with pytest.raises(sqlite3.IntegrityError):
            profile_repo.save(Profile(user_id=other_owner.id, username="alice", display_name="B"))


# --- Links ---


class TestLinkRepo:
    def test_save_and_get(self, link_repo, owner):
        link = Link(
            user_id=owner.id,
            title="Me",
            url="https://example.com",
            icon="custom",
            icon_style=IconStyle.ROUNDED,
            custom_icon_url="/assets/icons/1_me.png",
            description="About me",
        )
        link_repo.save(link)

        loaded = link_repo.get_by_id(link.id)

        assert loaded.icon_style is IconStyle.ROUNDED
        assert loaded.custom_icon_url == "/assets/icons/1_me.png"
        assert loaded.description == "About me"
        assert loaded.is_active is True

    def test_active_flag_stored_as_text(self, link_repo, owner, db_path):
        link = Link(user_id=owner.id, title="Hidden", url="https://x.test", is_active=False)
        link_repo.save(link)

        stored = raw_value(db_path, "SELECT is_active FROM links WHERE id = ?", str(link.id))

        assert stored == "0"
        assert link_repo.get_by_id(link.id).is_active is False

    def test_corrupt_flag_is_not_read_as_true(self, link_repo, owner, db_path):
        link = Link(user_id=owner.id, title="Odd", url="https://x.test")
        link_repo.save(link)
        conn = sqlite3.connect(db_path)
        conn.execute("UPDATE links SET is_active = 'false' WHERE id = ?", (str(link.id),))
        conn.commit()
        conn.close()

        with pytest.raises(ValueError):
            link_repo.get_by_id(link.id)

    def test_unknown_icon_style_reads_as_filled(self, link_repo, owner, db_path):
        link = Link(
            user_id=owner.id, title="Glow", url="https://x.test", icon_style=IconStyle.ROUNDED
        )
        link_repo.save(link)
        write_raw(db_path, "UPDATE links SET icon_style = 'glow' WHERE id = ?", str(link.id))

        assert link_repo.get_by_id(link.id).icon_style is IconStyle.FILLED

    def test_unreadable_row_is_left_out_of_listing(self, link_repo, owner, db_path, caplog):
        good = Link(user_id=owner.id, title="Good", url="https://good.test", position=0)
        bad = Link(user_id=owner.id, title="Bad", url="https://bad.test", position=1)
        link_repo.save(good)
        link_repo.save(bad)
        write_raw(db_path, "UPDATE links SET is_active = 'false' WHERE id = ?", str(bad.id))

        assert [link.title for link in link_repo.list_for_owner(owner.id)] == ["Good"]
        assert str(bad.id) in caplog.text

    def test_list_for_owner_in_order_and_scoped(self, link_repo, owner, other_owner):
        link_repo.save(Link(user_id=owner.id, title="B", url="https://b.test", position=1))
        link_repo.save(Link(user_id=owner.id, title="A", url="https://a.test", position=0))
        link_repo.save(
            Link(user_id=owner.id, title="Off", url="https://c.test", position=2, is_active=False)
        )
        link_repo.save(Link(user_id=other_owner.id, title="Theirs", url="https://d.test"))

        all_links = link_repo.list_for_owner(owner.id)
        active = link_repo.list_for_owner(owner.id, active_only=True)

        assert [link.title for link in all_links] == ["A", "B", "Off"]
        assert [link.title for link in active] == ["A", "B"]

    def test_increment_clicks(self, link_repo, owner):
        link = Link(user_id=owner.id, title="Shop", url="https://shop.test")
        link_repo.save(link)

        link_repo.increment_clicks(link.id)
        link_repo.increment_clicks(link.id)

        assert link_repo.get_by_id(link.id).clicks == 2

    def test_save_does_not_reset_clicks(self, link_repo, owner):
        link = Link(user_id=owner.id, title="Shop", url="https://shop.test")
        link_repo.save(link)
        link_repo.increment_clicks(link.id)

        link_repo.save(link.model_copy(update={"title": "Store"}))

        loaded = link_repo.get_by_id(link.id)
        assert loaded.title == "Store"
        assert loaded.clicks == 1

    def test_save_positions_is_owner_scoped(self, link_repo, owner, other_owner):
        mine = Link(user_id=owner.id, title="Mine", url="https://a.test")
        theirs = Link(user_id=other_owner.id, title="Theirs", url="https://b.test")
        link_repo.save(mine)
        link_repo.save(theirs)

        link_repo.save_positions(owner.id, {mine.id: 5, theirs.id: 9})

        assert link_repo.get_by_id(mine.id).position == 5
        assert link_repo.get_by_id(theirs.id).position == 0

    def test_run_move_against_sqlite(self, link_repo, owner):
        links = [
            Link(user_id=owner.id, title=title, url=f"https://{title}.test", position=i)
            for i, title in enumerate(["a", "b", "c", "d"])
        ]
        for link in links:
            link_repo.save(link)

        result = run_move(
            MoveInput(owner_id=owner.id, item_id=links[0].id, from_index=0, to_index=3), link_repo
        )

        assert result.success
        stored = link_repo.list_for_owner(owner.id)
        assert [link.title for link in stored] == ["b", "c", "d", "a"]
        assert [link.position for link in stored] == [0, 1, 2, 3]

    def test_delete(self, link_repo, owner):
        link = Link(user_id=owner.id, title="Gone", url="https://x.test")
        link_repo.save(link)

        link_repo.delete(link.id)

        assert link_repo.get_by_id(link.id) is None


# --- Public page over damaged rows ---


class TestComposeOverDamagedRows:
    @pytest.fixture
    def alice(self, profile_repo, owner):
        return profile_repo.save(Profile(user_id=owner.id, username="alice", display_name="A"))

    def compose(self, profile_repo, link_repo, block_repo):
        return run_compose(
            ComposePageInput(username="alice"),
            profile_repo,
            link_repo,
            block_repo,
            AnalyticsEmitter(InMemoryEventStore()),
        )

    def test_healthy_links_render_next_to_a_damaged_one(
        self, alice, profile_repo, link_repo, block_repo, owner, db_path
    ):
        good = Link(user_id=owner.id, title="Good", url="https://good.test", position=0)
        glow = Link(user_id=owner.id, title="Glow", url="https://glow.test", position=1)
        broken = Link(user_id=owner.id, title="Broken", url="https://b.test", position=2)
        for link in (good, glow, broken):
            link_repo.save(link)
        write_raw(db_path, "UPDATE links SET icon_style = 'glow' WHERE id = ?", str(glow.id))
        write_raw(
            db_path, "UPDATE links SET created_at = 'yesterday' WHERE id = ?", str(broken.id)
        )

        result = self.compose(profile_repo, link_repo, block_repo)

        assert [unit.title for unit in result.page.links] == ["Good", "Glow"]
        assert result.warnings == ()

    def test_corrupt_rtl_flag_still_renders(
        self, alice, profile_repo, link_repo, block_repo, db_path
    ):
        write_raw(db_path, "UPDATE profiles SET is_rtl = 'true' WHERE username = 'alice'")

        result = self.compose(profile_repo, link_repo, block_repo)

        assert result.success
        assert result.page.theme.direction == "rtl"


# --- Blocks ---


class TestBlockRepo:
    def test_save_and_list(self, block_repo, owner):
        gallery = ContentBlock(
            user_id=owner.id, variant=BlockVariant.GALLERY, content='["a.png"]', position=1
        )
        text = ContentBlock(
            user_id=owner.id, variant=BlockVariant.TEXT, title="About", content="<p>x</p>"
        )
        block_repo.save(gallery)
        block_repo.save(text)

        blocks = block_repo.list_for_owner(owner.id)

        assert [b.variant for b in blocks] == [BlockVariant.TEXT, BlockVariant.GALLERY]
        assert blocks[0].title == "About"
        assert blocks[1].content == '["a.png"]'

    def test_inactive_filtered(self, block_repo, owner):
        block_repo.save(
            ContentBlock(user_id=owner.id, variant=BlockVariant.TEXT, content="x", is_active=False)
        )

        assert block_repo.list_for_owner(owner.id, active_only=True) == []
        assert len(block_repo.list_for_owner(owner.id)) == 1


# --- Analytics ---


class TestEventStore:
    def test_store_and_filter(self, db_path):
        store = SQLiteEventStore(db_path)
        mine, theirs = uuid4(), uuid4()
        now = datetime.now(UTC)
        store.store(
            AnalyticsEvent(
                name=PROFILE_VIEW,
                attributes={"profile_id": str(mine)},
                timestamp=now - timedelta(days=10),
            )
        )
        store.store(AnalyticsEvent(name=PROFILE_VIEW, attributes={"profile_id": str(mine)}))
        store.store(AnalyticsEvent(name=PROFILE_VIEW, attributes={"profile_id": str(theirs)}))

        everything = store.list_events(profile_id=mine)
        recent = store.list_events(profile_id=mine, since=now - timedelta(days=1))

        assert len(everything) == 2
        assert len(recent) == 1
        assert recent[0].profile_id == str(mine)
        assert recent[0].timestamp.tzinfo is not None

    def test_missing_table_raises_analytics_failure(self, tmp_path):
        store = SQLiteEventStore(str(tmp_path / "empty.db"))

        with pytest.raises(AnalyticsFailure):
            store.store(AnalyticsEvent(name=PROFILE_VIEW, attributes={}))

    def test_emitter_survives_broken_database(self, tmp_path):
        emitter = AnalyticsEmitter(SQLiteEventStore(str(tmp_path / "empty.db")))

        emitter.log(PROFILE_VIEW, {"profile_id": "p1"})
