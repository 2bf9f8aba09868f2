"""
Main application exposing file inspection over HTTP.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fileprobe.api.routers import router as api_router
from fileprobe.container import container

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Get logger for this module
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    logger.info("Shutting down, closing command runner")
    container.reset()


# Create FastAPI app
app = FastAPI(title="fileprobe API", lifespan=lifespan)
app.include_router(api_router)
