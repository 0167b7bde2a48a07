"""demo-app: a two-route HTTP service for the Docker/Kubernetes/Helm walkthrough."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from uvicorn.config import LOG_LEVELS

from demo_app.config import settings
from demo_app.api.routes_root import router as root_router
from demo_app.api.routes_health import router as health_router

# Configure logging
logging.basicConfig(
    level=LOG_LEVELS[settings.log_level],
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.service_name} starting up...")
    yield
    logger.info(f"{settings.service_name} shutting down...")


app = FastAPI(
    title=settings.service_name,
    description="Static demo service deployed through Docker, Compose, Kubernetes and Helm.",
    version="1.0.0",
    lifespan=lifespan,
)

# Mount routers
app.include_router(root_router)
app.include_router(health_router)
