"""
Unit tests for upload validation, destinations and failure handling.
"""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from linkpage.components.uploads import (
    UploadConfig,
    UploadFailure,
    UploadInput,
    UploadResult,
    destination_path,
    run_upload,
    sanitize_filename,
    upload_config_from_rules,
    validate_upload,
)

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
STAMP = int(NOW.timestamp() * 1000)


class MockStorage:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: list[tuple[str, bool]] = []

    def upload(self, data, destination_path, upsert=True):
        self.calls.append((destination_path, upsert))
        if self.fail:
            raise UploadFailure("bucket unavailable")
        return UploadResult(public_url=f"/assets/{destination_path}", path=destination_path)


class TestPaths:
    def test_avatar_path_is_stable_per_owner(self):
        owner_id = uuid4()

        assert destination_path("avatar", owner_id, "me.png", NOW) == f"avatars/{owner_id}/me.png"

    def test_icon_path_is_timestamped(self):
        assert destination_path("icon", uuid4(), "logo.png", NOW) == f"icons/{STAMP}_logo.png"

    def test_content_path_is_owner_scoped(self):
        owner_id = uuid4()

        path = destination_path("content", owner_id, "photo.jpg", NOW)

        assert path == f"content/{owner_id}/{STAMP}-photo.jpg"

    @pytest.mark.parametrize(
        ("raw", "clean"),
        [
            ("../../etc/passwd", "passwd"),
            ("C:\\Users\\me\\my photo.png", "my_photo.png"),
            ("...", "upload"),
            ("résumé.png", "r_sum_.png"),
        ],
    )
    def test_sanitize_filename(self, raw, clean):
        assert sanitize_filename(raw) == clean


class TestValidation:
    def test_valid_png(self):
        assert validate_upload("me.png", PNG, "image/png") == []

    def test_empty_file(self):
        assert validate_upload("me.png", b"", "image/png")[0].code == "file_empty"

    def test_too_large(self):
        errors = validate_upload("me.png", PNG, "image/png", UploadConfig(max_upload_bytes=10))

        assert errors[0].code == "file_too_large"

    def test_extension_not_allowed(self):
        errors = validate_upload("script.exe", PNG, None)

        assert [e.code for e in errors] == ["extension_not_allowed"]

    def test_mime_not_allowed(self):
        errors = validate_upload("me.png", PNG, "text/html")

        assert [e.code for e in errors] == ["mime_not_allowed"]

    def test_config_from_rules(self, rules):
        config = upload_config_from_rules(rules.uploads)

        assert config.max_upload_bytes == 5 * 1024 * 1024
        assert ".png" in config.allowlist_extensions


class TestRunUpload:
    def test_success_returns_public_url(self, owner):
        storage = MockStorage()

        result = run_upload(
            UploadInput(kind="avatar", owner_id=owner.id, filename="me.png", data=PNG),
            storage,
            now=NOW,
        )

        assert result.success
        assert result.public_url == f"/assets/avatars/{owner.id}/me.png"
        assert storage.calls == [(f"avatars/{owner.id}/me.png", True)]

    def test_invalid_upload_never_reaches_storage(self, owner):
        storage = MockStorage()

        result = run_upload(
            UploadInput(kind="icon", owner_id=owner.id, filename="me.exe", data=PNG), storage
        )

        assert not result.success
        assert result.errors[0].retryable is False
        assert storage.calls == []

    def test_storage_failure_is_retryable(self, owner):
        result = run_upload(
            UploadInput(kind="content", owner_id=owner.id, filename="a.jpg", data=PNG),
            MockStorage(fail=True),
            now=NOW,
        )

        assert not result.success
        assert result.public_url is None
        assert result.errors[0].code == "upload_failed"
        assert result.errors[0].retryable is True
