"""Pydantic schemas for tilecalc data models."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Exposure(str, Enum):
    """Surface roughness exposure category (ASCE 7-22 Section 26.7)."""

    C = "C"
    D = "D"


class RoofZone(IntEnum):
    """Components and cladding roof zone (ASCE 7-22 Chapter 30)."""

    INTERIOR = 1
    EDGE = 2
    CORNER = 3


class Verdict(str, Enum):
    PASS = "Pass"
    FAIL = "Fail"


def _blank_to_none(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


class CalculationInput(BaseModel):
    """Inputs for a single rigid tile uplift calculation."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    wind_speed_mph: float = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("wind_speed_mph", "windSpeed", "Vult"),
        description="Ultimate design wind speed Vult in mph",
    )
    mean_height_ft: float = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("mean_height_ft", "meanHeight", "h"),
        description="Mean roof height h in feet",
    )
    exposure: Exposure = Field(..., description="Exposure category (C or D)")
    roof_zone: RoofZone = Field(
        ...,
        validation_alias=AliasChoices("roof_zone", "roofZone"),
        description="Roof zone: 1 interior, 2 edge, 3 corner",
    )
    tile_length_in: float = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("tile_length_in", "tileLength", "tileLengthInches"),
        description="Tile length in inches",
    )
    tile_width_in: float = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("tile_width_in", "tileWidth", "tileWidthInches"),
        description="Exposed tile width in inches",
    )
    lift_coefficient: float = Field(
        ...,
        validation_alias=AliasChoices("lift_coefficient", "liftCoefficient", "liftCoefficientCL"),
        description="Tile lift coefficient CL",
    )
    provided_resistance_mf: Optional[float] = Field(
        None,
        validation_alias=AliasChoices(
            "provided_resistance_mf", "providedResistance", "providedResistanceMf"
        ),
        description="Rated uplift resistance Mf in ft·lbf (e.g. from the product approval)",
    )
    gcp_override: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("gcp_override", "gcp", "gcpOverride"),
        description="Roof pressure coefficient override, replaces the zone default",
    )
    kd_override: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("kd_override", "kd", "kdOverride"),
        description="Directionality factor override, replaces 0.85",
    )

    @field_validator("exposure", mode="before")
    @classmethod
    def _normalize_exposure(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("roof_zone", mode="before")
    @classmethod
    def _normalize_roof_zone(cls, value: Any) -> Any:
        # "3" from a form select, 3.0 from a spreadsheet cell
        if isinstance(value, bool):
            raise ValueError("Input should be 1, 2 or 3")
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @field_validator(
        "provided_resistance_mf", "gcp_override", "kd_override", mode="before"
    )
    @classmethod
    def _optional_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)


class ResistanceCheck(BaseModel):
    """Comparison of the rated resistance against the uplift moment."""

    model_config = ConfigDict(frozen=True)

    Mf: float = Field(..., description="Provided resistance in ft·lbf")
    result: Verdict


class CalculationResult(BaseModel):
    """Uplift moment and the coefficient breakdown behind it.

    Values are full precision; round for display with
    :func:`tilecalc.engine.format_result`.
    """

    model_config = ConfigDict(frozen=True)

    Ma: float = Field(..., description="Aerodynamic uplift moment in ft·lbf")
    qh: float = Field(..., description="Velocity pressure at mean roof height in psf")
    Kz: float = Field(..., description="Velocity pressure exposure coefficient")
    GCp: float = Field(..., description="Roof pressure coefficient")
    Kd: float = Field(..., description="Wind directionality factor")
    CL: float = Field(..., description="Lift coefficient")
    b: float = Field(..., description="Exposed tile width in feet")
    L: float = Field(..., description="Tile length in feet")
    La: float = Field(..., description="Moment arm in feet")
    check: Optional[ResistanceCheck] = None

    @property
    def Mf(self) -> Optional[float]:
        return self.check.Mf if self.check else None

    @property
    def result(self) -> Optional[Verdict]:
        return self.check.result if self.check else None

    def to_record(self) -> dict[str, Any]:
        """Flat record; ``Mf`` and ``result`` appear only when a check was made."""
        record: dict[str, Any] = self.model_dump(exclude={"check"})
        if self.check is not None:
            record["Mf"] = self.check.Mf
            record["result"] = self.check.result.value
        return record


# Initial form values; the sample tile passes at these inputs
DEFAULT_INPUTS: dict[str, Any] = {
    "wind_speed_mph": 175.0,
    "mean_height_ft": 30.0,
    "exposure": "C",
    "roof_zone": 3,
    "tile_length_in": 17.0,
    "tile_width_in": 12.0,
    "lift_coefficient": 0.2,
    "provided_resistance_mf": 27.8,
}


__all__ = [
    "DEFAULT_INPUTS",
    "CalculationInput",
    "CalculationResult",
    "Exposure",
    "ResistanceCheck",
    "RoofZone",
    "Verdict",
]
