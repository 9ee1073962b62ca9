"""ASCE 7-22 coefficients for rigid roof tile uplift.

Implements the velocity pressure exposure coefficient (Table 26.10-1),
velocity pressure (Eq. 26.10-1), the components and cladding roof
pressure coefficients by zone (Chapter 30) and the wind directionality
factor (Table 26.6-1).

References
----------
ASCE/SEI 7-22, *Minimum Design Loads and Associated Criteria
for Buildings and Other Structures*.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tilecalc.schemas import CalculationInput, Exposure, RoofZone

# ── ASCE 7-22 Edition Tag ────────────────────────────────────────────
ASCE7_EDITION = "ASCE 7-22"

# ── Exposure parameters (ASCE 7-22 Table 26.11-1) ───────────────────
#   exposure: (alpha, zg_ft)
_EXPOSURE_CONSTANTS: dict[Exposure, tuple[float, float]] = {
    Exposure.C: (9.8, 2460.0),
    Exposure.D: (11.5, 1935.0),
}

# Table 26.10-1 power law coefficient and lower height limit
KZ_COEFFICIENT = 2.41
KZ_MIN_HEIGHT_FT = 15.0

# Eq. 26.10-1 constant for qz in psf with V in mph
VELOCITY_PRESSURE_COEFFICIENT = 0.00256

# Topographic factor, flat terrain
KZT_DEFAULT = 1.0

# ── Wind directionality factor (ASCE 7-22 Table 26.6-1) ─────────────
#   Buildings, components and cladding -> Kd = 0.85
KD_DEFAULT = 0.85

# ── Roof pressure coefficients for components and cladding ──────────
GCP_DEFAULTS: dict[RoofZone, float] = {
    RoofZone.INTERIOR: -0.9,
    RoofZone.EDGE: -1.3,
    RoofZone.CORNER: -2.0,
}


@dataclass(frozen=True)
class CoefficientSet:
    """Resolved coefficients for one calculation."""

    kz: float
    kzt: float
    gcp: float
    kd: float
    qh_psf: float


def compute_kz(height_ft: float, exposure: Exposure | str) -> float:
    """Velocity pressure exposure coefficient Kz.

    Per ASCE 7-22 Table 26.10-1::

        Kz = 2.41 * (z / zg) ^ (2 / alpha)

    For z < 15 ft, use z = 15 ft. Above zg the profile is capped at zg.

    Parameters
    ----------
    height_ft : float
        Mean roof height above ground level in feet.
    exposure : Exposure or str
        Exposure category: ``"C"`` or ``"D"``.

    Returns
    -------
    float
        Dimensionless Kz coefficient.

    Raises
    ------
    ValueError
        If *exposure* is not C or D.
    """
    if not isinstance(exposure, Exposure):
        exposure = Exposure(exposure.upper())
    alpha, zg = _EXPOSURE_CONSTANTS[exposure]
    z = min(max(height_ft, KZ_MIN_HEIGHT_FT), zg)
    return KZ_COEFFICIENT * (z / zg) ** (2.0 / alpha)


def compute_qh(
    wind_speed_mph: float,
    kz: float,
    kd: float = KD_DEFAULT,
    kzt: float = KZT_DEFAULT,
) -> float:
    """Velocity pressure qh at mean roof height in psf.

    Per ASCE 7-22 Eq. 26.10-1::

        qh = 0.00256 * Kz * Kzt * Kd * V^2
    """
    return VELOCITY_PRESSURE_COEFFICIENT * kz * kzt * kd * wind_speed_mph**2


def resolve_gcp(zone: RoofZone | int, override: Optional[float] = None) -> float:
    """Zone default GCp unless an explicit override is given."""
    return override if override is not None else GCP_DEFAULTS[RoofZone(zone)]


def resolve_kd(override: Optional[float] = None) -> float:
    """0.85 unless an explicit override is given."""
    return override if override is not None else KD_DEFAULT


def resolve_coefficients(data: CalculationInput) -> CoefficientSet:
    """Resolve Kz, GCp, Kd and qh for a validated input."""
    kz = compute_kz(data.mean_height_ft, data.exposure)
    gcp = resolve_gcp(data.roof_zone, data.gcp_override)
    kd = resolve_kd(data.kd_override)
    qh = compute_qh(data.wind_speed_mph, kz, kd, KZT_DEFAULT)
    return CoefficientSet(kz=kz, kzt=KZT_DEFAULT, gcp=gcp, kd=kd, qh_psf=qh)


__all__ = [
    "ASCE7_EDITION",
    "GCP_DEFAULTS",
    "KD_DEFAULT",
    "KZT_DEFAULT",
    "KZ_COEFFICIENT",
    "KZ_MIN_HEIGHT_FT",
    "VELOCITY_PRESSURE_COEFFICIENT",
    "CoefficientSet",
    "compute_kz",
    "compute_qh",
    "resolve_coefficients",
    "resolve_gcp",
    "resolve_kd",
]
