# app/main.py
"""
FastAPI application entry point.
Includes security middleware, error handlers for repository errors, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from app.routers import customers, vehicles, employees, health
from app.database import create_collections
from app.config import settings
from app.services.exceptions import (
    DuplicateError,
    NoChangeError,
    NotFoundError,
    RepositoryError,
    StoreError,
    ValidationError,
)
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Fleet Rental API",
    description="Customers, fleet vehicles and employees stored as JSON documents.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── API Key Middleware ───────────────────────────────────────────────────────
class APIKeyMiddleware(BaseHTTPMiddleware):
    """
    Optional lightweight API key auth.
    Health check and docs stay open. Set API_KEY in .env; leave empty to disable auth.
    The key is read per request.
    """
    open_paths = {"/api/v1/health", "/docs", "/redoc", "/openapi.json"}

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.open_paths or not settings.API_KEY:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key") or request.query_params.get("api_key")
        if api_key != settings.API_KEY:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid or missing API key"},
            )
        return await call_next(request)


app.add_middleware(APIKeyMiddleware)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Repository Error Handler ─────────────────────────────────────────────────
ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NoChangeError: status.HTTP_400_BAD_REQUEST,
    DuplicateError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: RepositoryError) -> int:
    for kind, code in ERROR_STATUS.items():
        if isinstance(exc, kind):
            return code
    return status.HTTP_400_BAD_REQUEST


@app.exception_handler(RepositoryError)
async def repository_exception_handler(request: Request, exc: RepositoryError):
    code = status_for(exc)
    if isinstance(exc, StoreError):
        logger.error(f"Storage failure on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=code, content={"detail": exc.message})


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(customers.router, prefix="/api/v1", tags=["Customers"])
app.include_router(vehicles.router,  prefix="/api/v1", tags=["Vehicles"])
app.include_router(employees.router, prefix="/api/v1", tags=["Employees"])
app.include_router(health.router,    prefix="/api/v1", tags=["Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("Fleet Rental backend starting up...")
    for path in create_collections():
        logger.info(f"Initialised empty collection {path}")
    logger.info(f"Collections in {settings.DATA_DIR}: "
                f"{settings.CUSTOMERS_FILE}, {settings.VEHICLES_FILE}, {settings.EMPLOYEES_FILE}")
    logger.info(f"Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Fleet Rental backend shutting down...")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.BACKEND_IP, port=settings.BACKEND_PORT)
