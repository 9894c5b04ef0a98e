"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from seniwise.config import Settings, get_settings
from seniwise.dependencies import ResidentsContext
from seniwise.routers import residents
from seniwise.schema.labels import default_label_catalog
from seniwise.schema.registry import build_field_schema_registry
from seniwise.schemas.common import error_envelope
from seniwise.services.records import ResidentRecordSource, StaffDirectory

logger = logging.getLogger(__name__)


def build_residents_context(
    settings: Settings,
    *,
    records: ResidentRecordSource | None = None,
    staff: StaffDirectory | None = None,
) -> ResidentsContext:
    """Build the registry, resolver and record sources shared by all requests."""

    try:
        registry = build_field_schema_registry()
        resolver = default_label_catalog().resolver(settings.locale)
        if records is None:
            records = ResidentRecordSource.from_json_file(settings.residents_data_path)
        if staff is None:
            staff = StaffDirectory.from_json_file(settings.staff_data_path)
    except Exception:
        logger.exception("residents.startup_failed locale=%s", settings.locale)
        raise
    logger.info(
        "residents.startup_ready locale=%s residents=%d staff=%d page_size=%d",
        resolver.locale,
        len(records),
        len(staff.members),
        settings.residents_page_size,
    )
    return ResidentsContext(
        settings=settings,
        registry=registry,
        resolver=resolver,
        records=records,
        staff=staff,
    )


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed."
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("residents.request_invalid errors=%d", len(exc.errors()))
    return JSONResponse(status_code=422, content=error_envelope(422, "Invalid request parameters."))


def create_app(
    settings: Settings | None = None,
    *,
    records: ResidentRecordSource | None = None,
    staff: StaffDirectory | None = None,
) -> FastAPI:
    """Create the API application; collaborators default to the configured data files."""

    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.residents = build_residents_context(settings, records=records, staff=staff)
        yield

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)

    app.include_router(residents.router, tags=["residents"])

    @app.get("/health")
    def health() -> dict[str, str]:
        """Simple health check endpoint."""

        return {"status": "ok"}

    return app


app = create_app()
