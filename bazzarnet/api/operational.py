"""
Operational endpoints: process and system metrics for monitoring
"""

import os
import platform
import time
from datetime import datetime

import psutil
from fastapi import APIRouter

from bazzarnet.core.config import config
from bazzarnet.core.logger import logger

router = APIRouter()

# Service start time, shared with the health and home routers
start_time = time.time()


@router.get("/metrics")
def get_metrics():
    """
    Process and system metrics for monitoring tools.
    """
    try:
        process = psutil.Process()
        memory_info = process.memory_info()
        system_memory = psutil.virtual_memory()
    except psutil.Error as e:
        logger.error("Failed to get metrics", error=e, metadata={"event": "metrics_error"})
        return {
            "service": config.service_name,
            "timestamp": datetime.now().isoformat(),
            "error": "Failed to retrieve metrics",
        }

    return {
        "service": config.service_name,
        "timestamp": datetime.now().isoformat(),
        "uptime_seconds": round(time.time() - start_time, 2),
        "process": {
            "pid": os.getpid(),
            "memory_rss_mb": round(memory_info.rss / 1024 / 1024, 2),
            "cpu_percent": process.cpu_percent(),
            "threads": process.num_threads(),
        },
        "system": {
            "memory_total_bytes": system_memory.total,
            "memory_available_bytes": system_memory.available,
            "memory_used_percent": round(system_memory.percent, 2),
        },
        "runtime": {
            "python_version": platform.python_version(),
            "platform": platform.system().lower(),
        },
    }
