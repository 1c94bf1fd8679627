import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from carecompanion.config import get_settings
from carecompanion.database import init_db
from carecompanion.api.router import api_router
from carecompanion.api.health import router as health_router
from carecompanion.llm.client import close_shared_client

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting application...")
    await init_db()

    yield
    # Shutdown
    logger.info("Shutting down application...")
    await close_shared_client()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="M-CHAT-R/F screening, developmental progress tracking, and guidance chat for caregivers",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(api_router)


@app.get("/")
async def root():
    return {
        "app": settings.app_name,
        "version": "0.1.0",
        "docs": "/docs",
    }
