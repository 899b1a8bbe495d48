from contextlib import asynccontextmanager
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Config, config as default_config
from app.features.files.router import router as files_router
from app.features.submit.router import router as submit_router
from app.features.upload.router import router as upload_router
from app.lib.errors import StoreError
from app.lib.store import JobFileStore
from app.logger import configure_logging, get_logger

log = get_logger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization", "X-Job-Name"]


def _cors_headers(cfg: Config, origin: Optional[str]) -> Dict[str, str]:
    if "*" in cfg.allowed_origins:
        allow_origin = "*"
    elif origin and origin in cfg.allowed_origins:
        allow_origin = origin
    else:
        allow_origin = cfg.allowed_origins[0] if cfg.allowed_origins else "null"
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
        "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
        "Access-Control-Expose-Headers": "Content-Disposition",
        "Vary": "Origin",
    }


def _error(message: str, status_code: int) -> JSONResponse:
    if status_code >= 500:
        log.error(f"Error response: {message} (Status: {status_code})")
    else:
        log.warning(f"Error response: {message} (Status: {status_code})")
    return JSONResponse({"error": message}, status_code=status_code)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON payload"
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


@asynccontextmanager
async def _lifespan(app: FastAPI):
    cfg: Config = app.state.config
    app.state.store.ensure_root()
    log.info(f"Upload directory: {cfg.upload_dir}")
    log.info(f"Max file size: {cfg.max_file_size} bytes ({cfg.max_file_size / (1024 * 1024):.1f} MB)")
    log.info(f"Collision policy: {cfg.on_collision}")
    yield


def create_app(cfg: Optional[Config] = None) -> FastAPI:
    cfg = cfg or default_config
    configure_logging(cfg.log_level)
    app = FastAPI(title="Job File Store", lifespan=_lifespan)
    app.state.config = cfg
    app.state.store = JobFileStore(cfg)
    app.state.store.ensure_root()

    @app.middleware("http")
    async def _cors(request: Request, call_next):
        # Any OPTIONS is answered here: 200 with an empty body, never routed
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        response.headers.update(_cors_headers(cfg, request.headers.get("origin")))
        return response

    @app.exception_handler(StoreError)
    async def _store_error(request: Request, exc: StoreError):
        return _error(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError):
        return _error(_validation_message(exc), 400)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return _error(str(exc.detail), exc.status_code)

    app.include_router(upload_router)
    app.include_router(submit_router)
    app.include_router(files_router)

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


app = create_app()
