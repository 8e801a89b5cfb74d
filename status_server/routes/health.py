from fastapi import APIRouter
import logging

from status_server.models.host import HealthRecord
from status_server.services.host_info import build_snapshot

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthRecord)
async def health_check():
    """
    Liveness probe endpoint
    Always reports healthy while the process accepts connections
    """
    logger.debug("Health check requested")
    snapshot = build_snapshot()
    return HealthRecord(
        status="healthy",
        timestamp=snapshot.timestamp,
        uptime=snapshot.uptime_seconds,
        hostname=snapshot.hostname,
    )
