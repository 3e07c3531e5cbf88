# API process.
#
# Usage:
#   uvicorn app.main:app --port 8000

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.config import CORS_ORIGINS, LOG_FORMAT, LOG_LEVEL
from app.database import init_db
from app.routers import todo_router

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

ROOT_MESSAGE = "Send requests for todos to the /todos endpoint please!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("Todo API ready")
    yield


app = FastAPI(title="Todo API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _log_access(request: Request, status_code: int, started: float) -> None:
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s %d %.3f ms",
        request.method,
        request.url.path,
        status_code,
        elapsed_ms,
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        # the 500 body is produced by handle_general_exception further out
        _log_access(request, 500, started)
        raise
    _log_access(request, response.status_code, started)
    return response


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    logger.exception("Unexpected error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


app.include_router(todo_router.router, prefix="/todos", tags=["Todos"])


@app.get("/", response_class=PlainTextResponse)
async def read_root():
    return ROOT_MESSAGE
