"""
User API
========

Entry point: builds the FastAPI app and the DI container, serves HTTP on a
background thread and performs an ordered shutdown on SIGINT/SIGTERM.

Run with:
    python -m app.main
"""
import logging
import signal
import sys
import threading
import time
from typing import Tuple

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import register_routes
from app.core.config import Settings
from app.core.exceptions import ListenerError, ShutdownError, UserApiError
from app.di.container import DIContainer

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    Routes backed by the container are registered separately by
    register_routes() once the container exists.
    
    Returns:
        Configured FastAPI application instance
    """
    application = FastAPI(
        title="User API",
        description="Layered REST API template: create users stored in MongoDB",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}
    
    return application


def install_signal_handlers() -> threading.Event:
    """Return an event set when SIGINT or SIGTERM is delivered."""
    shutdown_requested = threading.Event()
    
    def _handle(signum, frame):
        print(f"\n🔔 Received signal {signal.Signals(signum).name}")
        shutdown_requested.set()
    
    for sig in SHUTDOWN_SIGNALS:
        signal.signal(sig, _handle)
    return shutdown_requested


def start_server(application: FastAPI, settings: Settings) -> Tuple[uvicorn.Server, threading.Thread]:
    """
    Start uvicorn on a background thread and wait until it is listening.
    
    Raises:
        ListenerError: If the server exits before it started (bind failure)
    """
    config = uvicorn.Config(
        application,
        host=settings.http_host,
        port=settings.http_port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    server_thread = threading.Thread(target=server.run, name="http-server", daemon=True)
    server_thread.start()
    
    while not server.started:
        if not server_thread.is_alive():
            raise ListenerError(f"Could not listen on {settings.http_host}:{settings.http_port}")
        time.sleep(0.05)
    return server, server_thread


def stop_server(server: uvicorn.Server, server_thread: threading.Thread, timeout_seconds: float) -> None:
    """
    Ask uvicorn to exit and wait for its thread.
    
    Raises:
        ShutdownError: If the server is still running after the deadline
    """
    server.should_exit = True
    server_thread.join(timeout_seconds)
    if server_thread.is_alive():
        raise ShutdownError(f"HTTP server did not stop within {timeout_seconds}s")


def main() -> int:
    """
    Run the API until a shutdown signal arrives.
    
    Returns:
        Process exit code: 0 on clean shutdown, 1 on startup failure
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    
    # Step 1: HTTP application
    application = create_application()
    
    # Step 2: Configuration and DI container (store connection is fatal on failure)
    try:
        settings = Settings()
        logging.getLogger().setLevel(settings.log_level)
        container = DIContainer(settings)
    except UserApiError as e:
        logger.critical(f"❌ Startup failed: {e}")
        return 1
    
    # Step 3: Routes
    register_routes(application, container)
    
    # Step 4: Listener
    shutdown_requested = install_signal_handlers()
    try:
        server, server_thread = start_server(application, settings)
    except ListenerError as e:
        logger.critical(f"❌ Error starting server: {e}")
        try:
            container.shutdown(settings.shutdown_timeout_seconds)
        except ShutdownError as close_error:
            print(f"⚠️ Error closing dependencies: {close_error}")
        return 1
    
    print(f"\n🚀 Server running on port {settings.http_port}")
    
    # Step 5: Wait for SIGINT/SIGTERM (or an unexpected server exit)
    exit_code = 0
    while not shutdown_requested.wait(0.5):
        if not server_thread.is_alive():
            logger.error("❌ HTTP server stopped unexpectedly")
            exit_code = 1
            break
    
    # Step 6: Ordered shutdown: store first, then HTTP server
    try:
        container.shutdown(settings.shutdown_timeout_seconds)
    except ShutdownError as e:
        print(f"⚠️ Error closing dependencies: {e}")
    
    try:
        stop_server(server, server_thread, settings.shutdown_timeout_seconds)
    except ShutdownError as e:
        print(f"⚠️ Error closing server: {e}")
    else:
        print("✅ Server closed correctly")
    
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
