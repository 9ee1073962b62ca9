"""Tilecalc - wind uplift moment calculator for rigid roof tiles."""

from tilecalc.engine import calculate, compute_uplift_moment, format_result
from tilecalc.schemas import (
    CalculationInput,
    CalculationResult,
    Exposure,
    ResistanceCheck,
    RoofZone,
    Verdict,
)
from tilecalc.validation import ValidationError, validate_input

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "calculate",
    "compute_uplift_moment",
    "format_result",
    "validate_input",
    "CalculationInput",
    "CalculationResult",
    "Exposure",
    "ResistanceCheck",
    "RoofZone",
    "ValidationError",
    "Verdict",
]
