"""Reads host and process metadata for the status endpoints.

Nothing here is cached: every call to ``build_snapshot`` goes back to the
operating system. The only value recorded once is the start instant, taken
on the monotonic clock so reported uptime never runs backwards.

The start instant is recorded when this module is first imported, not when
the interpreter launched. ``status_server.main`` imports it while building the
app, before the listener is bound, so uptime counts from server startup.
"""

import logging
import platform
import socket
import sys
import time
from datetime import datetime, timezone
from typing import Optional

from status_server.models.host import HostSnapshot

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"

_PROCESS_START = time.monotonic()


def get_uptime_seconds() -> float:
    """Seconds elapsed since this process imported the service"""
    return max(0.0, time.monotonic() - _PROCESS_START)


def get_hostname() -> str:
    """Network host name, or an empty string if it cannot be read"""
    try:
        return socket.gethostname()
    except OSError as e:
        logger.warning(f"Failed to read hostname: {e}")
        return ""


def get_platform() -> str:
    """Operating system identifier such as ``linux`` or ``darwin``"""
    return sys.platform or UNKNOWN


def get_runtime_version() -> str:
    """Version of the interpreter running the server"""
    try:
        return platform.python_version() or UNKNOWN
    except (ValueError, OSError) as e:
        logger.warning(f"Failed to read runtime version: {e}")
        return UNKNOWN


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC instant with millisecond precision, e.g. 2024-05-01T12:00:00.123Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_snapshot(environment: str = "development") -> HostSnapshot:
    """Collect a fresh HostSnapshot for the current request"""
    return HostSnapshot(
        hostname=get_hostname(),
        platform=get_platform(),
        runtime_version=get_runtime_version(),
        uptime_seconds=get_uptime_seconds(),
        environment=environment,
        timestamp=utc_timestamp(),
    )
