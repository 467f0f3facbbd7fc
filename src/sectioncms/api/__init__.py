import logging
import os

from fastapi import APIRouter, FastAPI

from .routes import contracts, pages, sessions

logger = logging.getLogger(__name__)


def create_app(config_obj=None, *, registry=None, store=None) -> FastAPI:
    from ..config import Config
    from ..db import close_db, create_tables, ensure_page, init_db
    from ..registry import default_registry
    from ..storages import DBContentStore
    from .manager import SessionManager

    if config_obj is None:
        config_file = os.environ.get("CONFIG_FILE")
        config_obj = Config.load_from_file(config_file) if config_file else Config()

    app = FastAPI(title="Section CMS API")

    app.state.config = config_obj
    app.state.registry = registry if registry is not None else default_registry()
    app.state.sessions = SessionManager()

    if store is None:
        db_path = os.environ.get("SECTIONCMS_DB_PATH", config_obj.get_database_path())
        init_db(db_path)
        create_tables()
        for page in config_obj.pages:
            ensure_page(page.slug, page.title)
        store = DBContentStore()

        @app.on_event("shutdown")
        def shutdown_db():
            close_db()

    app.state.store = store
    logger.info(f"Loaded {len(app.state.registry)} section types")

    api_router = APIRouter(prefix="/api/v1")
    api_router.include_router(contracts.router)
    api_router.include_router(sessions.router)
    api_router.include_router(pages.router)
    app.include_router(api_router)

    return app
