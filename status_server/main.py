from fastapi import FastAPI
from status_server.config import Settings, settings
from status_server.middleware import add_error_handling_middleware
from status_server.routes import health, info, status_page
from typing import Optional
import logging
import socket
import sys
import uvicorn

# Exit status when the app fails to start after the listener is bound
STARTUP_FAILURE = 3

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper()))
logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application with routes and error handlers"""
    app_settings = app_settings or settings
    application = FastAPI(
        title=app_settings.app_name,
        description="Host status page and metadata endpoints",
        version=app_settings.app_version,
        debug=app_settings.debug
    )
    application.state.settings = app_settings

    # Add error handling middleware
    add_error_handling_middleware(application)

    # Include routers
    application.include_router(status_page.router)
    application.include_router(health.router)
    application.include_router(info.router)
    return application


# Create FastAPI app instance
app = create_app()


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind and listen on host:port, raising OSError or OverflowError if the port is unusable"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen()
    except (OSError, OverflowError):
        sock.close()
        raise
    return sock


def log_startup_notice(port: int) -> None:
    logger.info(f"🚀 Server is running on port {port}")
    logger.info(f"📍 Access the application at http://localhost:{port}")
    logger.info(f"💚 Health check available at http://localhost:{port}/health")


def main(app_settings: Optional[Settings] = None) -> None:
    """Bind the listener and serve until shutdown"""
    app_settings = app_settings or settings
    try:
        sock = bind_socket(app_settings.host, app_settings.port)
    except (OSError, OverflowError) as e:
        logger.error(f"Failed to bind {app_settings.host}:{app_settings.port}: {e}")
        sys.exit(1)

    log_startup_notice(app_settings.port)

    application = app if app_settings is settings else create_app(app_settings)
    config = uvicorn.Config(application, log_level=app_settings.log_level.lower())
    server = uvicorn.Server(config)
    server.run(sockets=[sock])
    if not server.started:
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    main()
