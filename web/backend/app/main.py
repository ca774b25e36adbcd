"""FastAPI application for the postguard compliance checker.

Provides REST API endpoints wrapping the postguard package for:
- Content compliance checks
- Violation highlighting
- Platform constraint listing
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the postguard package is importable by adding the project root to sys.path.
_project_root = str(Path(__file__).resolve().parents[3])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postguard import __version__
from postguard.config import config_from_env
from postguard.engine import ComplianceEngine

from web.backend.app.routers import compliance

app = FastAPI(
    title="postguard API",
    description=(
        "REST API for the postguard compliance checker. "
        "Provides endpoints for checking content, highlighting violations, "
        "and listing platform constraints."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Shared engine; rule tables are read-only after construction
# ---------------------------------------------------------------------------
app.state.engine = ComplianceEngine.from_config(config_from_env())
app.state.record_sink = None

app.include_router(compliance.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "postguard API",
        "version": __version__,
        "description": "Content compliance checking REST API",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
