"""Rigid tile uplift moment calculation engine."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from tilecalc.asce7 import resolve_coefficients
from tilecalc.schemas import CalculationInput, CalculationResult, ResistanceCheck, Verdict
from tilecalc.validation import validate_input

logger = logging.getLogger(__name__)

INCHES_PER_FOOT = 12.0

# FBC 1609.6.3: point of uplift taken at 0.76 L from the head of the tile
MOMENT_ARM_RATIO = 0.76

DISCLAIMER = (
    "This tool provides estimates based on FBC 2023 Equation 16-18 "
    "(1609.6.3 Rigid tile section) and is not a substitute for professional "
    "engineering advice. Verify all designs with a licensed engineer."
)


def compute_moment_arm(tile_length_ft: float) -> float:
    """Moment arm La from the axis of rotation, in feet."""
    return MOMENT_ARM_RATIO * tile_length_ft


def compute_ma(
    qh: float,
    gcp: float,
    cl: float,
    kd: float,
    b_ft: float,
    la_ft: float,
) -> float:
    """Aerodynamic uplift moment magnitude in ft·lbf.

    ``Ma = |qh * GCp * CL * Kd * b * La|``; GCp is negative for suction,
    the magnitude is reported.
    """
    return abs(qh * gcp * cl * kd * b_ft * la_ft)


def determine_verdict(ma: float, mf: float) -> Verdict:
    """Pass when the provided resistance is at least the uplift moment."""
    return Verdict.PASS if mf >= ma else Verdict.FAIL


def calculate(data: CalculationInput) -> CalculationResult:
    """Calculate the uplift moment for a validated input."""
    coeffs = resolve_coefficients(data)
    logger.debug(
        "Resolved coefficients: Kz=%.4f GCp=%.3f Kd=%.3f qh=%.3f psf",
        coeffs.kz,
        coeffs.gcp,
        coeffs.kd,
        coeffs.qh_psf,
    )

    b = data.tile_width_in / INCHES_PER_FOOT
    length = data.tile_length_in / INCHES_PER_FOOT
    la = compute_moment_arm(length)
    ma = compute_ma(coeffs.qh_psf, coeffs.gcp, data.lift_coefficient, coeffs.kd, b, la)

    check: Optional[ResistanceCheck] = None
    if data.provided_resistance_mf is not None:
        check = ResistanceCheck(
            Mf=data.provided_resistance_mf,
            result=determine_verdict(ma, data.provided_resistance_mf),
        )

    return CalculationResult(
        Ma=ma,
        qh=coeffs.qh_psf,
        Kz=coeffs.kz,
        GCp=coeffs.gcp,
        Kd=coeffs.kd,
        CL=data.lift_coefficient,
        b=b,
        L=length,
        La=la,
        check=check,
    )


def compute_uplift_moment(
    data: Union[CalculationInput, Mapping[str, Any]],
    *,
    advanced: bool = False,
) -> CalculationResult:
    """Validate *data* if needed and compute the uplift moment.

    Raises
    ------
    tilecalc.validation.ValidationError
        When a raw record fails validation. No partial result is produced.
    """
    return calculate(validate_input(data, advanced=advanced))


def format_result(result: CalculationResult, decimals: int = 2) -> dict[str, Any]:
    """Round every numeric field of the flat record for display."""
    return {
        key: round(value, decimals) if isinstance(value, float) else value
        for key, value in result.to_record().items()
    }


__all__ = [
    "DISCLAIMER",
    "INCHES_PER_FOOT",
    "MOMENT_ARM_RATIO",
    "calculate",
    "compute_ma",
    "compute_moment_arm",
    "compute_uplift_moment",
    "determine_verdict",
    "format_result",
]
