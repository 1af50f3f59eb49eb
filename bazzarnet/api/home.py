"""
Root endpoints: service information
"""

import time
from datetime import datetime

from fastapi import APIRouter

from bazzarnet.api.operational import start_time
from bazzarnet.core.config import config

router = APIRouter()


@router.get("/")
async def root():
    return {
        "service": config.service_name,
        "version": config.service_version,
        "environment": config.environment,
        "message": "BazzarNet catalog service is running",
        "status": "operational"
    }


@router.get("/version")
def get_version():
    return {"version": config.service_version}


@router.get("/info")
def get_service_info():
    """
    Service information for discovery and debugging.
    """
    return {
        "service": config.service_name,
        "version": config.service_version,
        "api_version": config.api_version,
        "environment": config.environment,
        "uptime_seconds": round(time.time() - start_time, 2),
        "configuration": {
            "mongodb_host": config.mongodb_host,
            "mongodb_port": config.mongodb_port,
            "mongodb_database": config.mongodb_database,
            "mongodb_transactions": config.mongodb_transactions,
            "log_level": config.log_level,
        },
        "timestamp": datetime.now().isoformat(),
    }
