import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from course_catalog.config import Settings, validate_runtime_config
from course_catalog.db.session import build_engine, build_sessionmaker, init_db
from course_catalog.middleware.errors import register_exception_handlers
from course_catalog.middleware.request_log import request_log_middleware
from course_catalog.auth.routes import router as user_router
from course_catalog.courses.routes import router as course_router
from course_catalog.utils.log import configure_logging

logger = logging.getLogger(__name__)

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    validate_runtime_config(settings)

    engine = build_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        yield
        engine.dispose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_sessionmaker(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_log_middleware)
    register_exception_handlers(app)

    app.include_router(user_router)
    app.include_router(course_router)

    @app.get("/", tags=["root"])
    def root():
        return {"name": settings.app_name, "env": settings.app_env}

    return app

def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)

if __name__ == "__main__":
    main()
