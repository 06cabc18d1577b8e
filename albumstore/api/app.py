"""FastAPI app, CORS, request logging, error handlers and route registration."""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from albumstore.config import CORS_ORIGINS, LOG_FORMAT, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
)

from albumstore.api.render import render
from albumstore.api.state import AppState, get_state
from albumstore.models.response import RequestAborted, err_invalid_request

# Import routes after state to avoid circular imports
from albumstore.api.routes import albums

__all__ = ["app", "create_app", "AppState", "get_state"]

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("albumstore.access")


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request body."
    first = errors[0]
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg


def create_app(state: Optional[AppState] = None) -> FastAPI:
    state = state if state is not None else AppState()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Album store ready with %d albums (error style: %s)",
            len(state.store),
            state.error_style,
        )
        yield
        logger.info("Album store shutting down")

    app = FastAPI(
        title="Album Store API",
        description="In-memory album CRUD over HTTP+JSON",
        lifespan=lifespan,
    )
    app.state.albumstore = state

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            '"%s %s" %d in %.2fms',
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.exception_handler(RequestAborted)
    async def request_aborted(request: Request, exc: RequestAborted):
        return render(exc.response, get_state(request).error_style)

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        err = ValueError(_validation_message(exc))
        return render(err_invalid_request(err), get_state(request).error_style)

    app.include_router(albums.router, prefix="/albums", tags=["albums"])
    return app


app = create_app()
