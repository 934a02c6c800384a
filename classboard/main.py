import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import select

from classboard.api.router import api_router
from classboard.core.config import Settings, get_settings
from classboard.core.errors import ClassReferenceError, StoreError, ValidationError
from classboard.core.security import hash_password
from classboard.db.session import Database
from classboard.models.teacher import Teacher
from classboard.store import build_store

logger = logging.getLogger(__name__)


def _bootstrap_teacher(database: Database, settings: Settings) -> None:
    email = settings.bootstrap_teacher_email.lower()
    with database.session() as db:
        if db.scalar(select(Teacher).where(Teacher.email == email)):
            return
        db.add(
            Teacher(
                email=email,
                full_name=settings.bootstrap_teacher_name,
                password_hash=hash_password(settings.bootstrap_teacher_password),
            )
        )
        db.commit()
    logger.info("Bootstrap teacher %s created.", email)


async def _validation_error_handler(_: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "field": exc.field},
    )


async def _class_reference_error_handler(_: Request, exc: ClassReferenceError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Class not found"})


async def _store_error_handler(_: Request, exc: StoreError) -> JSONResponse:
    logger.warning("Store failure surfaced to client: %s", exc.message)
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": "Store unavailable"})


def create_app() -> FastAPI:
    settings = get_settings()
    logging.getLogger("classboard").setLevel(settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings)
        if settings.auto_create_schema:
            database.create_all()
        if settings.auto_create_teacher:
            _bootstrap_teacher(database, settings)

        app.state.database = database
        app.state.store = build_store(settings, database)
        logger.info("Started %s with %s store.", settings.app_name, settings.store_backend)
        try:
            yield
        finally:
            app.state.store.close()
            database.dispose()

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(ClassReferenceError, _class_reference_error_handler)
    app.add_exception_handler(StoreError, _store_error_handler)
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()
