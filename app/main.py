# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Account Watchlist API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   account-watchlist            (serves on API_HOST:API_PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.exceptions import (
    INTERNAL_ERROR_MESSAGE,
    WatchlistException,
    validation_exception_handler,
    watchlist_exception_handler,
)
from app.routers import health, payments
from lib.supabase_client import SupabaseClient

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on the first request and dropped
    on shutdown.
    """
    logger.info(f"Starting Account Watchlist API in {settings.ENVIRONMENT} mode")
    logger.info(f"Watching addresses stored in table '{settings.ACCOUNTS_TABLE}'")

    yield

    logger.info("Shutting down Account Watchlist API")
    SupabaseClient.reset()


# Create FastAPI application
app = FastAPI(
    title="Account Watchlist API",
    description="""
## Stellar Payment Watch-List

Register the Stellar accounts whose incoming payments the wallet backend
should track.

### Endpoints

| Endpoint | Effect |
|----------|--------|
| `POST /payments/subscribe` | Add an address (no-op if already present) |
| `POST /payments/unsubscribe` | Remove an address (no-op if absent) |

### Quick Start

```bash
curl -X POST http://localhost:8000/payments/subscribe \\
  -H "Content-Type: application/json" \\
  -d '{"address": "GABC..."}'
```
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Payments",
            "description": "Subscribe and unsubscribe addresses for payment tracking",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(WatchlistException)
async def handle_watchlist_exception(request: Request, exc: WatchlistException):
    """Handle custom watch-list exceptions."""
    return await watchlist_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """Reshape FastAPI body validation errors."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


# =============================================================================
# Routers
# =============================================================================

# Subscription endpoints
app.include_router(
    payments.router,
    prefix="/payments",
    tags=["Payments"]
)

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Account Watchlist API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


# =============================================================================
# Entry Point
# =============================================================================

def run() -> None:
    """Serve the app on the configured host and port."""
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
    )


if __name__ == "__main__":
    run()
