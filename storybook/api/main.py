"""FastAPI application for the Storybook export service."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ALLOW_ORIGINS, LOG_FORMAT, LOG_LEVEL
from .logging import configure_logging
from .routes import exports, presets, print_orders

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    configure_logging(json_format=LOG_FORMAT == "json", level=LOG_LEVEL)
    logger.info("Storybook export service started")

    yield


app = FastAPI(
    title="Storybook Export API",
    description="""
Validate, lay out and print personalised children's storybooks.

## Workflow
1. GET `/presets` to populate the setup form
2. POST `/exports/validate` while the parent edits pages
3. POST `/exports/pdf` to render the web and print PDFs
4. POST `/print-orders` to send the print PDF to a vendor
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(exports.router, prefix="/exports", tags=["Exports"])
app.include_router(print_orders.router, prefix="/print-orders", tags=["Print Orders"])
app.include_router(presets.router, prefix="/presets", tags=["Presets"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
