# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
End-to-end entry points.

These take the raw form mapping produced by a UI and return a result
that is safe to serialize directly.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from itameter.calculate import Calculator
from itameter.schema import Assessment, CalculationResult, ItaFormula
from itameter.validate import Validator


def assess(
    form_data: Mapping[str, Any],
    *,
    validator: Optional[Validator] = None,
    calculator: Optional[Calculator] = None,
) -> Assessment:
    """
    Validate a multi-measurement form and calculate its valid measurements.

    Args:
        form_data: ``lValue1``/``bValue1`` .. ``lValue3``/``bValue3`` → raw text
        validator: Validator to use (default rules and messages if None)
        calculator: Calculator to use (default table and messages if None)

    Returns:
        Assessment. ``result`` is None when any field failed validation.

    Example:
        >>> a = assess({"lValue1": "70", "bValue1": "20"})
        >>> a.result.average_ita
        45.0
    """
    validator = validator or Validator(debounce_delay=0.0)
    calculator = calculator or Calculator()

    validation = validator.validate_multiple_measurements(form_data)
    if not validation.is_valid:
        return Assessment(validation=validation)

    result = calculator.calculate_multiple_ita(validation.valid_measurements)
    return Assessment(validation=validation, result=result)


def assess_single(
    form_data: Mapping[str, Any],
    *,
    formula: ItaFormula = ItaFormula.ATAN2,
    calculator: Optional[Calculator] = None,
) -> CalculationResult:
    """
    Calculate ITA° from a legacy ``{"L": .., "a": .., "b": ..}`` form.

    ``a`` is only read by ``ItaFormula.ARCTAN``; with the default ATAN2
    formula it may be absent.
    """
    calculator = calculator or Calculator()
    return calculator.calculate(
        form_data.get("L"),
        form_data.get("b"),
        form_data.get("a"),
        formula=formula,
    )
