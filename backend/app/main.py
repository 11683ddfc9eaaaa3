"""
EcoCollect Backend - FastAPI Application

Waste collection scheduling for a recycling-coordination app: user accounts,
pickup requests with reward points, and recycling reference data.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core.errors import ServiceError, Unknown
from app.core.logging_config import configure_logging
from app.database.connections import get_mongo_client, close_connections
from app.database.registry import sync_registry, create_indexes
from app.routers import auth, collections, health, reference, users

# Fails here, at import, if JWT_SECRET_KEY is not configured
settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Initialize database connection
    - Sync database registry (a failure is logged and startup continues)
    - Create indexes; a failure aborts startup, since the unique email
      index is what rejects duplicate registrations

    Shutdown:
    - Close the database connection
    """
    logger.info("Starting up EcoCollect Backend...")

    client = await get_mongo_client()
    try:
        await sync_registry(client)
    except Exception as e:
        logger.warning("Database registry sync warning: %s", e)

    try:
        await create_indexes(client)
    except Exception:
        logger.exception("Index creation failed, refusing to start")
        await close_connections()
        raise
    logger.info("Indexes created")

    yield

    logger.info("Shutting down EcoCollect Backend...")
    await close_connections()


app = FastAPI(
    title="EcoCollect API",
    description="""
## Waste Collection Scheduling API

### Features
- **Authentication**: registration and JWT login
- **Collections**: schedule waste pickups with reward points
- **Reference data**: recycling centers and tutorials

### Responses
Every response body carries `success`. Failures add `message`, and
collection validation failures also echo the request as `receivedData`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Convert service errors into the response envelope."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_envelope())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies get the envelope too."""
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "message": "Invalid request body",
            "errors": [
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in exc.errors()
            ],
        },
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Last resort: log the traceback and answer with a generic 500."""
    logger.exception("%s %s failed", request.method, request.url.path)
    error = Unknown()
    return JSONResponse(status_code=error.status_code, content=error.to_envelope())


app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(collections.router)
app.include_router(reference.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "EcoCollect API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
