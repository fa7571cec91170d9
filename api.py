"""
Zephyr FastAPI Application

Main entry point for the Zephyr API: chat, CAPTCHA and geo proxies and the
profile wizard store behind the browser UI.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Common library imports
from common.database import MongoDB
from common.utils import success_response

# App-specific imports
from zephyr.config import settings

# Import routers
from zephyr.routers import (
    auth_router,
    captcha_router,
    chat_router,
    geo_router,
    profile_router,
    session_router,
)

# Import service initialization
from zephyr.dependencies import init_all_services

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


# =============================================================================
# Database Instance
# =============================================================================
main_db = MongoDB()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Connects the profile store and initializes services. Missing
    credentials are reported but do not stop startup; the endpoints that
    need them answer with a configuration error.
    """
    logger.info("Starting Zephyr API...")

    await main_db.connect(
        uri=settings.MONGODB_URI,
        database_name=settings.MONGODB_DATABASE,
    )

    init_all_services(db=main_db.db)

    for name in settings.get_missing_credentials():
        logger.warning(f"Not configured: {name}")

    logger.info("Zephyr API started successfully!")

    yield

    logger.info("Shutting down Zephyr API...")
    await main_db.disconnect()


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Zephyr API",
    description="Chat, CAPTCHA and geo proxies for the Zephyr AI assistant",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(auth_router, prefix=API_PREFIX, tags=["Authentication"])
app.include_router(session_router, prefix=API_PREFIX, tags=["Session"])
app.include_router(profile_router, prefix=API_PREFIX, tags=["Profile"])
app.include_router(geo_router, prefix=API_PREFIX, tags=["Geo"])
app.include_router(chat_router, prefix=API_PREFIX, tags=["Chat"])
app.include_router(captcha_router, prefix=API_PREFIX, tags=["Captcha"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API and which credentials are missing.
    """
    return success_response({
        "status": "ok",
        "version": VERSION,
        "database": main_db.is_connected,
        "missingCredentials": settings.get_missing_credentials(),
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
