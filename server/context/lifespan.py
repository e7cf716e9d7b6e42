"""Application lifespan management"""
from contextlib import asynccontextmanager

from config.logger import logger
from services.stream_controller import ReadingStreamController


@asynccontextmanager
async def lifespan(app):
    """
    Manage application lifespan (startup and shutdown).

    The reading stream lives exactly as long as the application.
    """
    # Startup
    logger.info("Starting application...")
    controller = ReadingStreamController()
    app.state.controller = controller
    controller.start()
    logger.info("Application started successfully")

    try:
        yield  # Application is running
    finally:
        # Shutdown
        logger.info("Shutting down application...")
        await controller.stop()
        logger.info("Application shut down successfully")
