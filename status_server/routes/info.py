from fastapi import APIRouter, Request
import logging

from status_server.models.host import InfoRecord
from status_server.services.host_info import build_snapshot

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["info"])

@router.api_route("/info", methods=["GET", "HEAD"], response_model=InfoRecord)
async def server_info(request: Request):
    """
    Server information endpoint
    Returns application details and host metadata
    """
    logger.debug("Server info requested")
    settings = request.app.state.settings
    snapshot = build_snapshot(environment=settings.environment)
    return InfoRecord(
        application=settings.app_name,
        version=settings.app_version,
        environment=snapshot.environment,
        hostname=snapshot.hostname,
        platform=snapshot.platform,
        node_version=snapshot.runtime_version,
        uptime=snapshot.uptime_seconds,
    )
