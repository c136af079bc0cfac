import os
import time
import hashlib
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from .config import settings
from .routers.fit import router as fit_router
from .schemas.fit import HealthResponse


logger = structlog.get_logger("perfect_fit")


app = FastAPI(title="Perfect Fit API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _request_id(request: Request) -> str:
    return hashlib.md5(f"{request.client.host if request.client else 'unknown'}{time.time()}".encode()).hexdigest()[:8]


def _index_file() -> str | None:
    path = os.path.join(settings.static_dir, "index.html")
    return path if os.path.isfile(path) else None


def _serves_front_end(request: Request) -> bool:
    path = request.url.path
    return request.method in ("GET", "HEAD") and not path.startswith(("/api/", "/static/")) and path != "/api"


def _validate_config() -> list[str]:
    strict = os.getenv("STRICT_CONFIG", "0") == "1"
    errors = []
    if not os.path.isdir(settings.static_dir):
        errors.append(f"STATIC_DIR does not exist: {settings.static_dir}")
    elif _index_file() is None:
        errors.append(f"index.html not found in STATIC_DIR: {settings.static_dir}")
    if not 0 < settings.port < 65536:
        errors.append(f"PORT out of range: {settings.port}")
    if errors:
        if strict:
            raise RuntimeError("Configuration error: " + "; ".join(errors))
        else:
            for e in errors:
                logger.warning("config_warning", warning=e)
    return errors


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    request_id = _request_id(request)
    request.state.request_id = request_id
    resp = None

    try:
        logger.info("request_started",
                   request_id=request_id,
                   path=str(request.url.path),
                   method=request.method,
                   client_ip=request.client.host if request.client else "unknown",
                   user_agent=request.headers.get("user-agent", "unknown"))

        resp = await call_next(request)
        return resp

    except Exception as e:
        duration_ms = int((time.time() - start) * 1000)
        logger.error("request_failed",
                    request_id=request_id,
                    path=str(request.url.path),
                    method=request.method,
                    error=str(e),
                    duration_ms=duration_ms,
                    exc_info=True)
        raise
    finally:
        duration_ms = int((time.time() - start) * 1000)
        status_code = getattr(resp, "status_code", 0) if resp else 0
        logger.info("request_completed",
                   request_id=request_id,
                   path=str(request.url.path),
                   method=request.method,
                   status=status_code,
                   duration_ms=duration_ms)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        # Unmatched non-API GETs get the front end; everything else gets JSON
        index = _index_file()
        if index and _serves_front_end(request):
            return FileResponse(index, media_type="text/html")
        return JSONResponse(status_code=404, content={"error": "Route not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    logger.warning("invalid_request_body", path=str(request.url.path), errors=exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(Exception)
async def handle_exceptions(request: Request, exc: Exception):
    logger.error("unhandled_exception",
                request_id=getattr(request.state, "request_id", None) or _request_id(request),
                path=str(request.url.path),
                method=request.method,
                error=str(exc),
                error_type=type(exc).__name__,
                exc_info=True)

    return JSONResponse(status_code=500, content={"error": "Something went wrong!"})


@app.api_route("/health", methods=["GET", "HEAD"], response_model=HealthResponse)
async def health():
    return {"status": "OK", "message": "Perfect Fit API is running"}


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
async def index():
    path = _index_file()
    if path is None:
        return JSONResponse(status_code=404, content={"error": "Route not found"})
    return FileResponse(path, media_type="text/html")


if os.path.isdir(settings.static_dir):
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

app.include_router(fit_router)

# Validate configuration at import time (warnings by default; set STRICT_CONFIG=1 to enforce)
_validate_config()
