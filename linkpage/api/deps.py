import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import BackgroundTasks, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from linkpage.adapters.fs.filestore import FileSystemStore
from linkpage.adapters.sqlite.repos import (
    SQLiteBlockRepo,
    SQLiteEventStore,
    SQLiteLinkRepo,
    SQLiteProfileRepo,
)
from linkpage.api.auth_utils import decode_access_token, owner_from_claims
from linkpage.components.analytics import (
    AnalyticsConfig,
    AnalyticsEmitter,
    analytics_config_from_rules,
)
from linkpage.components.blocks import BlockConfig, ContentBlockService, block_config_from_rules
from linkpage.components.links import LinkService, link_config_from_rules
from linkpage.components.profile import ProfileService, profile_config_from_rules
from linkpage.components.uploads import UploadConfig, upload_config_from_rules
from linkpage.domain.entities import Owner
from linkpage.rules.loader import load_rules
from linkpage.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("LINKPAGE_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "linkpage.db")
        self.assets_dir = self.data_dir / "assets"
        self.migrations_dir = self.base_dir / "migrations"
        self.rules_path = Path(os.environ.get("LINKPAGE_RULES_PATH", self.base_dir / "rules.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(path: Path) -> Rules:
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


# --- Repos ---
def get_profile_repo(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> SQLiteProfileRepo:
    return SQLiteProfileRepo(settings.db_path, default_is_rtl=rules.profile.defaults.is_rtl)


def get_link_repo(settings: Settings = Depends(get_settings)) -> SQLiteLinkRepo:
    return SQLiteLinkRepo(settings.db_path)


def get_block_repo(settings: Settings = Depends(get_settings)) -> SQLiteBlockRepo:
    return SQLiteBlockRepo(settings.db_path)


def get_event_store(settings: Settings = Depends(get_settings)) -> SQLiteEventStore:
    return SQLiteEventStore(settings.db_path)


def get_file_store(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> FileSystemStore:
    return FileSystemStore(
        base_path=str(settings.assets_dir),
        public_prefix=rules.uploads.public_prefix,
    )


# --- Component Config ---
def get_block_config(rules: Rules = Depends(get_rules)) -> BlockConfig:
    return block_config_from_rules(rules.content)


def get_upload_config(rules: Rules = Depends(get_rules)) -> UploadConfig:
    return upload_config_from_rules(rules.uploads)


def get_analytics_config(rules: Rules = Depends(get_rules)) -> AnalyticsConfig:
    return analytics_config_from_rules(rules.analytics)


# --- Component Services ---
def get_profile_service(
    repo: SQLiteProfileRepo = Depends(get_profile_repo),
    rules: Rules = Depends(get_rules),
) -> ProfileService:
    """Get profile component service."""
    return ProfileService(repo=repo, config=profile_config_from_rules(rules.profile))


def get_link_service(
    repo: SQLiteLinkRepo = Depends(get_link_repo),
    rules: Rules = Depends(get_rules),
) -> LinkService:
    """Get link component service."""
    return LinkService(repo=repo, config=link_config_from_rules(rules.links))


def get_block_service(
    repo: SQLiteBlockRepo = Depends(get_block_repo),
    config: BlockConfig = Depends(get_block_config),
) -> ContentBlockService:
    """Get content block component service."""
    return ContentBlockService(repo=repo, config=config)


def get_emitter(
    background_tasks: BackgroundTasks,
    store: SQLiteEventStore = Depends(get_event_store),
    config: AnalyticsConfig = Depends(get_analytics_config),
) -> AnalyticsEmitter:
    """Analytics emitter that delivers after the response has been sent."""
    return AnalyticsEmitter(sink=store, dispatcher=background_tasks, config=config)


# --- Auth ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token", auto_error=False)


def get_current_user(
    request: Request,
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> Owner:
    # 1. Try Cookie first (HttpOnly)
    cookie_token = request.cookies.get("access_token")
    if cookie_token and cookie_token.startswith("Bearer "):
        token = cookie_token.split(" ")[1]

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # 2. Decode
    payload = decode_access_token(token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    owner = owner_from_claims(payload)
    if owner is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )
    return owner
