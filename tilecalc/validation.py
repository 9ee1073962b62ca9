"""Input validation for tile uplift calculations."""

from __future__ import annotations

from typing import Any, Mapping, Union

import pydantic

from tilecalc.schemas import CalculationInput

# Every key under which an override may arrive from a form or API body
_OVERRIDE_KEYS = frozenset(
    {"gcp_override", "gcp", "gcpOverride", "kd_override", "kd", "kdOverride"}
)


class ValidationError(ValueError):
    """One or more input fields are missing, non-numeric or out of range."""

    def __init__(self, errors: list[tuple[str, str]]):
        self.errors = errors
        details = "; ".join(f"{field}: {message}" for field, message in errors)
        super().__init__(f"Invalid input - {details}")

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError) -> "ValidationError":
        errors = []
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"]) or "input"
            errors.append((field, err["msg"]))
        return cls(errors)


def validate_input(
    raw: Union[Mapping[str, Any], CalculationInput],
    *,
    advanced: bool = False,
) -> CalculationInput:
    """Validate a raw parameter record into a :class:`CalculationInput`.

    Values may be unparsed text. Unless *advanced* is set, GCp and Kd
    overrides are discarded whatever the record holds for them.

    Raises
    ------
    ValidationError
        Listing every field that failed to parse or is out of range.
    """
    if isinstance(raw, CalculationInput):
        if advanced or (raw.gcp_override is None and raw.kd_override is None):
            return raw
        return raw.model_copy(update={"gcp_override": None, "kd_override": None})

    if not isinstance(raw, Mapping):
        raise ValidationError([("input", "expected a mapping of field names to values")])

    record = dict(raw)
    if not advanced:
        record = {key: value for key, value in record.items() if key not in _OVERRIDE_KEYS}

    try:
        return CalculationInput.model_validate(record)
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


_FLAG = pydantic.TypeAdapter(bool)


def parse_flag(name: str, value: Any) -> bool:
    """Parse a boolean switch such as ``advanced`` from JSON or form text."""
    try:
        return _FLAG.validate_python(value)
    except pydantic.ValidationError as exc:
        raise ValidationError([(name, err["msg"]) for err in exc.errors()]) from exc


__all__ = ["ValidationError", "parse_flag", "validate_input"]
