"""JSON API routes for tilecalc."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException

from tilecalc import __version__
from tilecalc.asce7 import GCP_DEFAULTS, KD_DEFAULT
from tilecalc.engine import compute_uplift_moment
from tilecalc.schemas import DEFAULT_INPUTS
from tilecalc.validation import ValidationError, parse_flag

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Tilecalc API",
        "version": __version__,
        "endpoints": ["/api/calculate", "/api/defaults", "/health"],
    }


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@router.get("/api/defaults")
async def defaults():
    """Initial form values and the coefficient defaults by roof zone."""
    return {
        "inputs": DEFAULT_INPUTS,
        "gcp_by_zone": {str(int(zone)): gcp for zone, gcp in GCP_DEFAULTS.items()},
        "kd": KD_DEFAULT,
    }


@router.post("/api/calculate")
async def calculate(payload: dict[str, Any] = Body(...)):
    """
    Calculate the uplift moment for a rigid roof tile.

    Args:
        payload: Raw parameter record. Values may be strings. GCp and Kd
            overrides are honoured only when ``advanced`` is true.

    Returns:
        Flat result record; ``Mf`` and ``result`` only when a resistance
        was supplied.

    Raises:
        HTTPException: 422 for invalid input, 500 for unexpected errors
    """
    try:
        advanced = parse_flag("advanced", payload.pop("advanced", False))
        result = compute_uplift_moment(payload, advanced=advanced)
    except ValidationError as e:
        logger.info("Rejected calculation input: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    except Exception:
        logger.exception("Unexpected error during calculation")
        raise HTTPException(
            status_code=500, detail="An unexpected error occurred during calculation"
        )
    return result.to_record()
