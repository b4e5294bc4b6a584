"""
FastAPI Application Entry Point

This module initializes the FastAPI application and configures:
- API routes (admin routes, then the catch-all keyword redirect)
- Middleware (logging, CORS)
- Rate limiting
- Logging level and table creation on startup
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from random_redirect import __version__
from random_redirect.api import endpoints
from random_redirect.core.rate_limit import limiter
from random_redirect.core.setting import settings
from random_redirect.db.session import init_models
from random_redirect.middleware.logging import add_logging_middleware

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Random Redirect Service",
    description="Redirects a keyword to one of several URLs chosen by configured weights",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

add_logging_middleware(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health endpoints defined before router to match before catch-all route
@app.get("/", tags=["Health"])
async def root():
    return {
        "message": "Random Redirect Service",
        "version": __version__,
        "docs": "/docs"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "healthy"}


app.include_router(endpoints.router)


@app.on_event("startup")
async def startup_event():
    """Create missing tables when configured to."""
    if settings.CREATE_TABLES_ON_STARTUP:
        await init_models()
    logger.info(f"Random redirect service started ({settings.ENV_SETTING.value})")
