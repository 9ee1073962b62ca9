"""Unified FastAPI application.

Single entry point serving the JSON API.
Run with: uvicorn tilecalc.application:app --reload
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tilecalc import __version__
from tilecalc.api import router as api_router
from tilecalc.settings import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Rigid Tile Uplift Calculator",
    description=(
        "Aerodynamic uplift moment on rigid roof tiles per ASCE 7-22 "
        "velocity pressure and the FBC rigid tile moment equation."
    ),
    version=__version__,
)

# CORS - configurable via TILECALC_CORS_ORIGINS env var
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)  # /, /health, /api/defaults, /api/calculate


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
