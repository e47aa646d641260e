# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Result and configuration types for ITA measurement.

Design principles:
- Immutable: All types are frozen dataclasses
- Tagged: Every result carries a ResultKind discriminant (ok / error)
- Errors are data: Results carry ordered message tuples, nothing is raised
  across the public boundary
- Serializable: to_dict() output is JSON-safe (enums as values, infinite
  range bounds as None)

Lab axes:
- L* (Lightness): 0 = black, 100 = white
- a* (green ↔ red): -128 to 127, read only by the legacy formula
- b* (blue ↔ yellow): -128 to 127
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, Optional


# =============================================================================
# Enumerations
# =============================================================================


class ResultKind(Enum):
    """Discriminant shared by every result type."""

    OK = "ok"
    ERROR = "error"


class Suitability(Enum):
    """Laser-treatment risk tier attached to a phototype."""

    SAFE = "safe"
    CAUTION = "caution"
    DANGER = "danger"


class ItaFormula(Enum):
    """
    ITA formula variant.

    ATAN2 is defined for b* = 0 and keeps the quadrant over -180°..180°.
    ARCTAN is the single-argument form kept for older callers; it is
    undefined for b* = 0.
    """

    ATAN2 = "atan2"
    ARCTAN = "arctan"


def _json_number(value: Optional[float]) -> Optional[float]:
    """Map non-finite floats to None so json.dumps emits strict JSON."""
    if value is None or not math.isfinite(value):
        return None
    return value


# =============================================================================
# Measurement Inputs
# =============================================================================


@dataclass(frozen=True, slots=True)
class Measurement:
    """
    A single L*/b* measurement pair.

    Transient: built per submission from validated form fields. Values are
    not range-checked here; the calculator validates at its own boundary.
    """
    L: float
    b: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"L": self.L, "b": self.b}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Measurement:
        """Deserialize from dictionary."""
        return cls(L=data["L"], b=data["b"])


@dataclass(frozen=True, slots=True)
class LabValues:
    """Numeric Lab inputs echoed on a successful calculation."""
    L: float
    b: float
    a: Optional[float] = None

    def to_dict(self) -> dict:
        """Serialize to dictionary. ``a`` is omitted when not supplied."""
        d: dict[str, Any] = {"L": self.L, "b": self.b}
        if self.a is not None:
            d["a"] = self.a
        return d


# =============================================================================
# Validation Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ValidationRule:
    """
    Per-field validation configuration.

    Attributes:
        required: Empty input is an error
        min: Inclusive lower bound (None = unbounded)
        max: Inclusive upper bound (None = unbounded)
        max_decimals: Maximum fractional digits (None = unlimited)
        allow_negative: Negative values accepted
        reject_zero: Zero is an error (legacy single-measurement b* only)
        axis: Lab axis ("L", "a", "b") selecting the range message
        numeric: False disables numeric coercion and sanitization
    """
    required: bool = True
    min: Optional[float] = None
    max: Optional[float] = None
    max_decimals: Optional[int] = None
    allow_negative: bool = True
    reject_zero: bool = False
    axis: Optional[str] = None
    numeric: bool = True

    def __post_init__(self) -> None:
        """Reject inconsistent bounds."""
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"Rule min must be <= max, got {self.min} > {self.max}")
        if self.max_decimals is not None and self.max_decimals < 0:
            raise ValueError(f"max_decimals must be >= 0, got {self.max_decimals}")

    def to_dict(self) -> dict:
        """Serialize constraints (UI hints)."""
        return {
            "required": self.required,
            "min": self.min,
            "max": self.max,
            "decimals": self.max_decimals,
            "allow_negative": self.allow_negative,
            "not_zero": self.reject_zero,
            "type": "number" if self.numeric else "text",
        }


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Outcome of validating one field.

    Attributes:
        kind: OK or ERROR
        errors: Every violated constraint, in check order
        value: Parsed number (None for empty or non-numeric input)
        raw: Trimmed input text
    """
    kind: ResultKind
    errors: tuple[str, ...] = ()
    value: Optional[float] = None
    raw: str = ""

    @property
    def is_valid(self) -> bool:
        return self.kind is ResultKind.OK

    @property
    def is_empty(self) -> bool:
        return self.raw == ""

    @classmethod
    def ok(cls, value: Optional[float] = None, raw: str = "") -> ValidationResult:
        return cls(kind=ResultKind.OK, value=value, raw=raw)

    @classmethod
    def error(
        cls,
        errors: tuple[str, ...] | list[str],
        raw: str = "",
        value: Optional[float] = None,
    ) -> ValidationResult:
        return cls(kind=ResultKind.ERROR, errors=tuple(errors), value=value, raw=raw)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.value,
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "value": self.value,
            "raw": self.raw,
        }


@dataclass(frozen=True, slots=True)
class FormValidationResult:
    """Field-by-field validation of a legacy single-measurement form."""
    fields: dict[str, ValidationResult]
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return all(r.is_valid for r in self.fields.values())

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "is_valid": self.is_valid,
            "fields": {name: r.to_dict() for name, r in self.fields.items()},
            "errors": list(self.errors),
        }


@dataclass(frozen=True, slots=True)
class MultiValidationResult:
    """
    Validation of up to three measurement slots.

    Attributes:
        fields: Field name → ValidationResult, in slot order
        errors: Aggregate error list (pair errors appear once per slot)
        valid_measurements: Slots whose two fields are both valid
    """
    fields: dict[str, ValidationResult]
    errors: tuple[str, ...] = ()
    valid_measurements: tuple[Measurement, ...] = ()

    @property
    def is_valid(self) -> bool:
        return all(r.is_valid for r in self.fields.values())

    @property
    def measurement_count(self) -> int:
        return len(self.valid_measurements)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "is_valid": self.is_valid,
            "fields": {name: r.to_dict() for name, r in self.fields.items()},
            "errors": list(self.errors),
            "valid_measurements": [m.to_dict() for m in self.valid_measurements],
            "measurement_count": self.measurement_count,
        }


# =============================================================================
# Classification Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class SuitabilityMessage:
    """Display text attached to a suitability tier."""
    icon: str
    title: str
    description: str

    def to_dict(self) -> dict:
        return {"icon": self.icon, "title": self.title, "description": self.description}


@dataclass(frozen=True, slots=True)
class SkinTypeClassification:
    """
    A phototype bucket with an inclusive ITA° range.

    Attributes:
        label: Short category name (e.g. "İyi")
        description: One-line description
        full_description: Label with its range, for summaries
        range_min: Inclusive lower bound in degrees (may be -inf)
        range_max: Inclusive upper bound in degrees (may be +inf)
        suitability: Treatment-risk tier
        recommendation: Recommendation text
    """
    label: str
    description: str
    full_description: str
    range_min: float
    range_max: float
    suitability: Suitability
    recommendation: str

    def __post_init__(self) -> None:
        """Validate range ordering."""
        if self.range_min > self.range_max:
            raise ValueError(
                f"range_min must be <= range_max, got {self.range_min} > {self.range_max}"
            )

    def contains(self, ita: float) -> bool:
        """True if ``ita`` lies within the inclusive range."""
        return self.range_min <= ita <= self.range_max

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "label": self.label,
            "description": self.description,
            "full_description": self.full_description,
            "range_min": _json_number(self.range_min),
            "range_max": _json_number(self.range_max),
            "suitability": self.suitability.value,
            "recommendation": self.recommendation,
        }


# =============================================================================
# Calculation Results
# =============================================================================


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """
    Outcome of one ITA calculation.

    Attributes:
        kind: OK or ERROR
        ita: ITA° rounded to one decimal (None on failure)
        skin_type: Classification of ``ita`` (None on failure)
        errors: Ordered error messages (empty on success)
        lab_values: Parsed inputs (None on failure)
        measurement_number: 1-based position within a batch, if any
        formula: Formula that produced ``ita``
    """
    kind: ResultKind
    ita: Optional[float] = None
    skin_type: Optional[SkinTypeClassification] = None
    errors: tuple[str, ...] = ()
    lab_values: Optional[LabValues] = None
    measurement_number: Optional[int] = None
    formula: ItaFormula = ItaFormula.ATAN2

    @property
    def success(self) -> bool:
        return self.kind is ResultKind.OK

    @classmethod
    def ok(
        cls,
        ita: float,
        skin_type: SkinTypeClassification,
        lab_values: LabValues,
        formula: ItaFormula = ItaFormula.ATAN2,
    ) -> CalculationResult:
        return cls(
            kind=ResultKind.OK,
            ita=ita,
            skin_type=skin_type,
            lab_values=lab_values,
            formula=formula,
        )

    @classmethod
    def failure(
        cls,
        errors: tuple[str, ...] | list[str],
        formula: ItaFormula = ItaFormula.ATAN2,
    ) -> CalculationResult:
        return cls(kind=ResultKind.ERROR, errors=tuple(errors), formula=formula)

    def numbered(self, number: int) -> CalculationResult:
        """Copy tagged with its 1-based batch position."""
        return replace(self, measurement_number=number)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d: dict[str, Any] = {
            "kind": self.kind.value,
            "success": self.success,
            "ita": self.ita,
            "skin_type": self.skin_type.to_dict() if self.skin_type else None,
            "errors": list(self.errors),
            "formula": self.formula.value,
        }
        if self.lab_values is not None:
            d["lab_values"] = self.lab_values.to_dict()
        if self.measurement_number is not None:
            d["measurement_number"] = self.measurement_number
        return d

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass(frozen=True, slots=True)
class MultiMeasurementResult:
    """
    Outcome of a batch of measurements.

    A successful batch may still carry errors: they are warnings about
    individual measurements that were skipped from the average.

    Attributes:
        kind: OK if at least one measurement succeeded
        individual_results: One CalculationResult per input, in input order
        average_ita: Mean of successful ITA values, one decimal
        average_skin_type: Classification of ``average_ita``
        measurement_count: Number of inputs
        valid_measurement_count: Number of successful inputs
        errors: Aggregate errors, individual ones prefixed with their number
    """
    kind: ResultKind
    individual_results: tuple[CalculationResult, ...] = ()
    average_ita: Optional[float] = None
    average_skin_type: Optional[SkinTypeClassification] = None
    measurement_count: int = 0
    valid_measurement_count: int = 0
    errors: tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        return self.kind is ResultKind.OK

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.value,
            "success": self.success,
            "individual_results": [r.to_dict() for r in self.individual_results],
            "average_ita": self.average_ita,
            "average_skin_type": (
                self.average_skin_type.to_dict() if self.average_skin_type else None
            ),
            "measurement_count": self.measurement_count,
            "valid_measurement_count": self.valid_measurement_count,
            "errors": list(self.errors),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass(frozen=True, slots=True)
class Assessment:
    """
    Validation plus calculation of one form submission.

    ``result`` is None when validation failed; the UI shows
    ``validation.fields`` in that case.
    """
    validation: MultiValidationResult
    result: Optional[MultiMeasurementResult] = field(default=None)

    @property
    def kind(self) -> ResultKind:
        if self.result is not None and self.result.success:
            return ResultKind.OK
        return ResultKind.ERROR

    @property
    def success(self) -> bool:
        return self.kind is ResultKind.OK

    @property
    def errors(self) -> tuple[str, ...]:
        if self.result is None:
            return self.validation.errors
        return self.result.errors

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.value,
            "success": self.success,
            "validation": self.validation.to_dict(),
            "result": self.result.to_dict() if self.result else None,
            "errors": list(self.errors),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
