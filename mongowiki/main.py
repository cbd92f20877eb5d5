import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.templating import Jinja2Templates

from .config import Settings
from .core.errors import StorageError, WikiError
from .log_utils import LOGGER_NAME, inject_request_id, setup_logging
from .page_store import PageStore
from .rendering import load_templates
from .routers.health import router as health_router
from .routers.wiki import router as wiki_router


load_dotenv()

logger = logging.getLogger(LOGGER_NAME)


@asynccontextmanager
async def lifespan(app: FastAPI):
    owned = None
    if app.state.store is None:
        settings: Settings = app.state.settings
        try:
            owned = PageStore.connect(settings)
            owned.ensure_indexes()
        except StorageError as e:
            # nothing can be served without the store
            logger.critical("startup aborted: %s", e.message)
            if owned is not None:
                owned.close()
            raise
        app.state.store = owned
    yield
    # a store handed to create_app belongs to the caller
    if owned is not None:
        owned.close()


def create_app(
    settings: Settings | None = None,
    store: PageStore | None = None,
    templates: Jinja2Templates | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(title="Mongo Wiki", version="0.1.0", lifespan=lifespan, redirect_slashes=False)
    app.state.settings = settings
    app.state.store = store
    app.state.templates = templates or load_templates(settings.templates_dir)

    @app.middleware("http")
    async def add_req_id(request, call_next):
        return await inject_request_id(request, call_next)

    @app.exception_handler(WikiError)
    async def wiki_error_handler(request: Request, exc: WikiError):
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    app.include_router(health_router)
    app.include_router(wiki_router)
    return app


app = create_app()


def run() -> None:
    uvicorn.run("mongowiki.main:app", host="0.0.0.0", port=8080)
