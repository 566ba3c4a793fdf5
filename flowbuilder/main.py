"""
Workflow builder API
Stores workflow graphs (nodes + edges) for the canvas and simulates their execution.
"""
import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from flowbuilder import __version__
from flowbuilder.config import settings
from flowbuilder.deps import get_storage
from flowbuilder.log import configure_logging
from flowbuilder.routers import catalog, executions, workflows

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    storage = app.dependency_overrides.get(get_storage, get_storage)()
    logger.info(
        "Workflow builder API %s starting (%s, %d workflows loaded)",
        __version__, settings.app_env, len(storage.get_workflows()),
    )
    yield
    logger.info("Workflow builder API shutting down")


app = FastAPI(title="Workflow Builder API", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(workflows.router, prefix=settings.api_prefix, tags=["workflows"])
app.include_router(executions.router, prefix=settings.api_prefix, tags=["executions"])
app.include_router(catalog.router, prefix=settings.api_prefix, tags=["catalog"])


@app.get(f"{settings.api_prefix}/healthz", tags=["health"])
def healthz():
    return {"status": "ok"}


@app.exception_handler(Exception)
async def default_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.middleware("http")
async def request_id_and_access_log(request: Request, call_next):
    request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex
    started = time.perf_counter()
    try:
        resp: Response = await call_next(request)
    except Exception as exc:
        # unhandled route errors surface here, outside the exception middleware
        resp = await default_exception_handler(request, exc)
    resp.headers["X-Request-Id"] = request_id
    logger.info(
        "%s %s -> %d (%.1f ms) [%s]",
        request.method, request.url.path, resp.status_code,
        (time.perf_counter() - started) * 1000, request_id,
    )
    return resp


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    in_body = any(err.get("loc", ("",))[0] == "body" for err in errors)
    return JSONResponse(
        status_code=400,
        content={
            "message": "Invalid workflow data" if in_body else "Invalid request parameters",
            "errors": jsonable_encoder(errors),
        },
    )


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
