"""
Health check endpoints for liveness and readiness probes
"""

import asyncio
import time
from datetime import datetime
from typing import Any, Dict, List

import psutil
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from bazzarnet.api.operational import start_time
from bazzarnet.core.config import config
from bazzarnet.core.errors import ErrorResponse
from bazzarnet.core.logger import logger
from bazzarnet.db.mongodb import get_database

router = APIRouter()

MEMORY_THRESHOLD_PERCENT = 95.0


@router.get("/health")
def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "timestamp": datetime.now().isoformat(),
        "version": config.api_version,
    }


@router.get("/health/live")
def liveness_check():
    """Liveness probe - the process is up"""
    return {
        "status": "alive",
        "service": config.service_name,
        "timestamp": datetime.now().isoformat(),
        "uptime": round(time.time() - start_time, 2),
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe - MongoDB reachable and the host not starved of memory"""
    checks = await perform_health_checks()
    failed = [check for check in checks if check["status"] != "healthy"]

    body = {
        "status": "ready" if not failed else "not ready",
        "service": config.service_name,
        "timestamp": datetime.now().isoformat(),
        "checks": checks,
    }
    if not failed:
        return body

    logger.warning(
        f"Readiness check failed - {len(failed)} checks failed",
        metadata={"event": "readiness_check_failed", "failed_checks": [c["name"] for c in failed]}
    )
    body["errors"] = [f"{check['name']}: {check.get('error', 'Unknown error')}" for check in failed]
    return JSONResponse(status_code=503, content=body)


async def perform_health_checks() -> List[Dict[str, Any]]:
    return list(await asyncio.gather(check_database_health(), check_system_resources()))


async def check_database_health() -> Dict[str, Any]:
    """Ping MongoDB"""
    check_start = time.time()
    try:
        database = await get_database()
        await database.command("ping")
    except (PyMongoError, ErrorResponse) as e:
        logger.error(
            f"Database health check failed: {e}",
            metadata={"event": "health_check_database_failed", "database": config.mongodb_database}
        )
        return {
            "name": "database",
            "status": "unhealthy",
            "error": str(e),
            "response_time_ms": round((time.time() - check_start) * 1000, 2),
        }

    return {
        "name": "database",
        "status": "healthy",
        "database": config.mongodb_database,
        "response_time_ms": round((time.time() - check_start) * 1000, 2),
    }


async def check_system_resources() -> Dict[str, Any]:
    memory = psutil.virtual_memory()
    check = {
        "name": "system_resources",
        "status": "healthy",
        "memory_used_percent": round(memory.percent, 2),
    }
    if memory.percent > MEMORY_THRESHOLD_PERCENT:
        check["status"] = "unhealthy"
        check["error"] = f"Memory usage {memory.percent}% above {MEMORY_THRESHOLD_PERCENT}%"
    return check
