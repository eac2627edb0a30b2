import logging

from fastapi import FastAPI

from contextlib import asynccontextmanager
from filmorate_api.db.memory import get_storage

from filmorate_api.core.logger import setup_json_logging, shutdown_logging
from filmorate_api.core.sentry import init_sentry
from filmorate_api.core.config import settings
from filmorate_api.core.middleware import RequestContextMiddleware

from filmorate_api.api.http_utils import register_error_handlers
from filmorate_api.api.v1.films import router as films_router
from filmorate_api.api.v1.users import router as users_router
from filmorate_api.api.v1.debug import include_debug_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 1) logging before anything else
    setup_json_logging(service=settings.app_name, level=settings.log_level)
    init_sentry(settings.sentry_dsn, environment=settings.env)

    # 2) repositories live for the whole process
    get_storage()

    try:
        yield
    finally:
        shutdown_logging()


app = FastAPI(title="Filmorate", lifespan=lifespan)

# trace_id + JSON access log
app.add_middleware(RequestContextMiddleware)
register_error_handlers(app)

# the access middleware already logs every request
logging.getLogger("uvicorn.access").setLevel("WARNING")

include_debug_routes(app)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(films_router)
app.include_router(users_router)
