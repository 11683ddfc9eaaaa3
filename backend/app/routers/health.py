"""
Liveness and readiness probes.
"""
import logging

from fastapi import APIRouter

from app.database.connections import get_mongo_client
from app.database.databases import system_db
from app.database.registry import ALL_DB_MANIFESTS

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Liveness probe")
async def health_check():
    """The process is up and serving requests."""
    return {"status": "healthy"}


@router.get("/health/ready", summary="Readiness probe")
async def readiness_check():
    """
    Ping MongoDB and confirm every database is in the registry.

    Always answers 200; a failed probe turns the status to "degraded".
    """
    checks = {"api": "healthy", "mongodb": "unknown", "registry": "unknown"}

    try:
        client = await get_mongo_client()
        await client.admin.command("ping")
        checks["mongodb"] = "healthy"

        registry = client[system_db.DB_NAME][system_db.Collections.DB_REGISTRY]
        registered = await registry.count_documents({})
        if registered >= len(ALL_DB_MANIFESTS):
            checks["registry"] = "healthy"
        else:
            checks["registry"] = f"incomplete: {registered}/{len(ALL_DB_MANIFESTS)}"
    except Exception as exc:
        logger.warning("Readiness probe failed: %s", exc)
        if checks["mongodb"] == "unknown":
            checks["mongodb"] = f"unhealthy: {exc}"
        else:
            checks["registry"] = f"unhealthy: {exc}"

    ready = all(value == "healthy" for value in checks.values())
    return {"status": "healthy" if ready else "degraded", "checks": checks}
