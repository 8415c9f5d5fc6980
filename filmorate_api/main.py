import logging

from fastapi import FastAPI

from contextlib import asynccontextmanager
from filmorate_api.db.mongo import close_client, get_mongo_db

from filmorate_api.core.logger import setup_json_logging, shutdown_logging
from filmorate_api.core.sentry import init_sentry
from filmorate_api.core.config import Settings, settings
from filmorate_api.core.middleware import RequestContextMiddleware

from filmorate_api.api.http_utils import install_exception_handlers
from filmorate_api.api.routers.films import router as films_router
from filmorate_api.api.routers.users import router as users_router
from filmorate_api.api.routers.references import genres_router, mpa_router
from filmorate_api.api.routers.debug import include_debug_routes
from filmorate_api.services.context import (
    ServiceContext, memory_storages, mongo_storages
)


def create_app(cfg: Settings = settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 1) logging before anything else
        setup_json_logging(service=cfg.app_name, env=cfg.env,
                           level=cfg.log_level)
        init_sentry(cfg.sentry_dsn, environment=cfg.env)

        # 2) storage backend and the context shared by all services
        if cfg.storage_backend == "mongo":
            storages = await mongo_storages(await get_mongo_db(cfg))
        else:
            storages = memory_storages()
        app.state.ctx = ServiceContext(
            storages=storages,
            log=logging.getLogger("filmorate_api.services"),
        )
        logging.getLogger(__name__).info(
            "storage_ready", extra={"backend": cfg.storage_backend})

        try:
            yield
        finally:
            if cfg.storage_backend == "mongo":
                await close_client()
            shutdown_logging()

    app = FastAPI(title="Filmorate", lifespan=lifespan)

    # trace_id + JSON access line
    app.add_middleware(RequestContextMiddleware)
    install_exception_handlers(app)

    # silence the stock uvicorn access log, ours replaces it
    logging.getLogger("uvicorn.access").setLevel("WARNING")

    include_debug_routes(app, cfg)

    @app.get("/health")
    def health():
        return {"status": "ok", "storage": cfg.storage_backend}

    app.include_router(films_router)
    app.include_router(users_router)
    app.include_router(genres_router)
    app.include_router(mpa_router)
    return app


app = create_app()
