# devconnect/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from devconnect.config import Settings
from devconnect.database import Database
from devconnect.errors import register_error_handlers
from devconnect.middleware.auth_middleware import JwtStrategy
from devconnect.routes import profile as profile_routes
from devconnect.routes import users as users_routes

API_NAME = "DevConnect API"
API_VERSION = "1.0.0"

logger = logging.getLogger("devconnect")


@asynccontextmanager
async def lifespan(app: FastAPI):
    for r in app.routes:
        if isinstance(r, APIRoute):
            methods = ",".join(sorted(r.methods))
            logger.debug("route %-10s %-35s -> %s", methods, r.path, r.endpoint.__name__)
    yield
    app.state.db.dispose()


def create_app(settings: Optional[Settings] = None, db: Optional[Database] = None) -> FastAPI:
    """
    Build the API. The database handle and the bearer strategy are created
    once here and shared by every request through `app.state`.
    """
    settings = settings or Settings.from_env()

    # -----------
    # Logging
    # -----------
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ----------------------------------------
    # DB (dev/test bootstrap: create tables; use alembic elsewhere)
    # ----------------------------------------
    db = db or Database(settings.database_url, echo=settings.sql_echo)
    db.create_all()

    app = FastAPI(
        title=API_NAME,
        version=API_VERSION,
        description="Developer profiles: accounts, bearer tokens, profiles with experience and education",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db
    app.state.auth = JwtStrategy.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,  # must be explicit when credentials=True
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],                     # includes Authorization, Content-Type, etc.
        expose_headers=["Content-Type", "Authorization"],
        max_age=600,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        auth_present = bool(request.headers.get("authorization"))
        response = await call_next(request)
        logger.info("REQ %s %s  Auth? %s -> %s", request.method, request.url.path, auth_present, response.status_code)
        return response

    register_error_handlers(app)

    # ------------------------------------------------
    # Mount routers
    # ------------------------------------------------
    app.include_router(users_routes.router, prefix="/api")
    app.include_router(profile_routes.router, prefix="/api")

    # -----------
    # Health & root
    # -----------
    @app.get("/health")
    def health():
        return {"status": "ok", "env": settings.env}

    @app.get("/")
    def root():
        return {"name": API_NAME, "version": API_VERSION}

    logger.info("App ready (env=%s, db=%s)", settings.env, db.engine.url.render_as_string(hide_password=True))
    return app


if __name__ == "__main__":
    import uvicorn

    _settings = Settings.from_env()
    uvicorn.run(create_app(_settings), host="0.0.0.0", port=_settings.port)
