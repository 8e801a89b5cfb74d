from fastapi import APIRouter
from fastapi.responses import HTMLResponse
import logging

from status_server.services.host_info import build_snapshot
from status_server.services.status_page import render_status_page

logger = logging.getLogger(__name__)
router = APIRouter(tags=["status"])

@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def status_page():
    """Human-readable status page"""
    logger.debug("Status page requested")
    return HTMLResponse(render_status_page(build_snapshot()))
