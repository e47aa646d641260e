# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Individual Typology Angle (ITA°) calculation.

    ITA° = atan2(L* - 50, b*) × 180 / π

The two-argument arctangent is defined for b* = 0 (±90°, or 0° at L* = 50)
and keeps the quadrant across -180°..180°. The legacy single-argument form

    ITA° = arctan((L* - 50) / b*) × 180 / π

is kept for older callers and fails when b* = 0. Callers choose between
them by name (calculate_ita / calculate_ita_legacy, or ItaFormula).

Inputs may be raw strings or numbers; both are re-validated here so the
calculator can be used without the form validator.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

import numpy as np

from itameter.calculate.classify import SKIN_TYPES, classify_skin_type
from itameter.logging_config import get_logger
from itameter.schema import (
    DEFAULT_CALCULATOR_MESSAGES,
    CalculationResult,
    CalculatorMessages,
    ItaFormula,
    LabValues,
    SkinTypeClassification,
)
from itameter.validate.fields import parse_number
from itameter.validate.rules import AB_MAX, AB_MIN, L_MAX, L_MIN

logger = get_logger(__name__)

_AXIS_BOUNDS = {
    "L": (L_MIN, L_MAX),
    "a": (AB_MIN, AB_MAX),
    "b": (AB_MIN, AB_MAX),
}


# =============================================================================
# Numeric Core
# =============================================================================


def round_ita(value: float) -> float:
    """Round to one decimal, exact halves toward +inf (like JS Math.round)."""
    return float(np.floor(value * 10.0 + 0.5) / 10.0)


def ita_degrees(L: float, b: float) -> float:
    """Unrounded ITA° using atan2."""
    return float(np.degrees(np.arctan2(L - 50.0, b)))


def ita_degrees_arctan(L: float, b: float) -> float:
    """Unrounded ITA° using the single-argument arctangent. ``b`` must be non-zero."""
    return float(np.degrees(np.arctan((L - 50.0) / b)))


# =============================================================================
# Input Validation
# =============================================================================


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, np.number)):
        number: Optional[float] = float(value)
    elif isinstance(value, str):
        number = parse_number(value.strip())
    else:
        return None
    if number is None or math.isnan(number):
        return None
    # -0.0 would flip atan2 to 180°
    return number + 0.0


def validate_lab_values(
    values: Mapping[str, Any],
    messages: CalculatorMessages = DEFAULT_CALCULATOR_MESSAGES,
) -> tuple[tuple[str, ...], dict[str, float]]:
    """
    Check Lab inputs keyed by axis ("L", "a", "b").

    Checks run in three stages: presence, then numeric parsing, then range.
    A stage reports every failing axis; later stages run only if the
    earlier ones passed.

    Returns:
        (errors, numbers) where ``numbers`` maps axis → float when parsing
        succeeded, empty otherwise
    """
    errors = [
        f"{messages.empty_field} ({axis}*)"
        for axis, value in values.items()
        if _is_empty(value)
    ]
    if errors:
        return tuple(errors), {}

    parsed = {axis: _to_number(value) for axis, value in values.items()}
    errors = [
        f"{messages.invalid_number} ({axis}*)"
        for axis, number in parsed.items()
        if number is None
    ]
    if errors:
        return tuple(errors), {}

    numbers: dict[str, float] = {axis: number for axis, number in parsed.items() if number is not None}
    range_messages = {
        "L": messages.invalid_l,
        "a": messages.invalid_a,
        "b": messages.invalid_b,
    }
    for axis, number in numbers.items():
        low, high = _AXIS_BOUNDS[axis]
        if not low <= number <= high:
            errors.append(range_messages[axis])

    return tuple(errors), numbers


# =============================================================================
# Calculation
# =============================================================================


def calculate_ita(
    L: Any,
    b: Any,
    *,
    skin_types: tuple[SkinTypeClassification, ...] = SKIN_TYPES,
    messages: CalculatorMessages = DEFAULT_CALCULATOR_MESSAGES,
) -> CalculationResult:
    """
    Calculate and classify ITA° from L* and b* (atan2 formula).

    Args:
        L: Lightness, 0-100 (number or numeric string)
        b: Blue-yellow axis, -128 to 127 (number or numeric string)
        skin_types: Classification table
        messages: Message catalogue

    Returns:
        CalculationResult; never raises

    Example:
        >>> calculate_ita(70, 20).ita
        45.0
    """
    try:
        errors, numbers = validate_lab_values({"L": L, "b": b}, messages)
        if errors:
            return CalculationResult.failure(errors)

        ita = round_ita(ita_degrees(numbers["L"], numbers["b"]))
        return CalculationResult.ok(
            ita=ita,
            skin_type=classify_skin_type(ita, skin_types),
            lab_values=LabValues(L=numbers["L"], b=numbers["b"]),
        )
    except Exception:
        logger.exception("ITA calculation failed", formula=ItaFormula.ATAN2.value)
        return CalculationResult.failure([messages.calculation_error])


def calculate_ita_legacy(
    L: Any,
    a: Any,
    b: Any,
    *,
    skin_types: tuple[SkinTypeClassification, ...] = SKIN_TYPES,
    messages: CalculatorMessages = DEFAULT_CALCULATOR_MESSAGES,
) -> CalculationResult:
    """
    Calculate and classify ITA° with the single-argument arctangent.

    ``a`` is validated and echoed but does not enter the formula. Fails
    with the zero-b* message when b* = 0.
    """
    try:
        errors, numbers = validate_lab_values({"L": L, "a": a, "b": b}, messages)
        if errors:
            return CalculationResult.failure(errors, formula=ItaFormula.ARCTAN)

        if numbers["b"] == 0:
            return CalculationResult.failure([messages.zero_b_value], formula=ItaFormula.ARCTAN)

        ita = round_ita(ita_degrees_arctan(numbers["L"], numbers["b"]))
        return CalculationResult.ok(
            ita=ita,
            skin_type=classify_skin_type(ita, skin_types),
            lab_values=LabValues(L=numbers["L"], b=numbers["b"], a=numbers["a"]),
            formula=ItaFormula.ARCTAN,
        )
    except Exception:
        logger.exception("ITA calculation failed", formula=ItaFormula.ARCTAN.value)
        return CalculationResult.failure([messages.calculation_error], formula=ItaFormula.ARCTAN)


def calculate(
    L: Any,
    b: Any,
    a: Any = None,
    *,
    formula: ItaFormula = ItaFormula.ATAN2,
    skin_types: tuple[SkinTypeClassification, ...] = SKIN_TYPES,
    messages: CalculatorMessages = DEFAULT_CALCULATOR_MESSAGES,
) -> CalculationResult:
    """Calculate ITA° with an explicitly named formula. ``a`` is read only by ARCTAN."""
    if formula is ItaFormula.ARCTAN:
        return calculate_ita_legacy(L, a, b, skin_types=skin_types, messages=messages)
    return calculate_ita(L, b, skin_types=skin_types, messages=messages)
