import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linkpage.adapters.sqlite.migrator import SQLiteMigrator
from linkpage.api.deps import get_settings
from linkpage.app_shell.config import validate_ops_rules
from linkpage.rules.loader import load_rules

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = load_rules(settings.rules_path)
        validate_ops_rules(rules, settings.data_dir)
        SQLiteMigrator(settings.db_path, str(settings.migrations_dir)).run_migrations()
        logger.info("Rules loaded from %s", settings.rules_path)
    except Exception:
        logger.critical("Startup failed", exc_info=True)
        raise

    yield


app = FastAPI(
    title="linkpage API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}


# --- Routers ---
from linkpage.api.routes import (  # noqa: E402
    admin_analytics,
    admin_blocks,
    admin_links,
    admin_profile,
    admin_uploads,
    public,
    public_assets,
    public_ssr,
)

app.include_router(admin_profile.router, prefix="/api/admin", tags=["Admin Profile"])
app.include_router(admin_links.router, prefix="/api/admin", tags=["Admin Links"])
app.include_router(admin_blocks.router, prefix="/api/admin", tags=["Admin Blocks"])
app.include_router(admin_uploads.router, prefix="/api/admin", tags=["Admin Uploads"])
app.include_router(admin_analytics.router, prefix="/api/admin", tags=["Admin Analytics"])
app.include_router(public.router, prefix="/api/public", tags=["Public"])
app.include_router(public_assets.router, prefix="/assets", tags=["Assets Public"])
# Catch-all /{username}; must stay last
app.include_router(public_ssr.router, prefix="", tags=["SSR"])


# CORS (Allow Frontend)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
