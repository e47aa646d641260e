# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Itameter -- Individual Typology Angle (ITA°) from Lab measurements.

Validates operator-entered L*/b* values, computes ITA°, classifies the
skin phototype for laser-treatment suitability, and averages up to three
measurements.

Quick start::

    from itameter import assess

    a = assess({"lValue1": "70", "bValue1": "20"})
    a.success               # True
    a.result.average_ita    # 45.0
    a.to_json()             # Serializable result
"""

from __future__ import annotations

__version__ = "1.0.0"

from itameter.assess import assess, assess_single
from itameter.calculate import (
    Calculator,
    calculate_ita,
    calculate_ita_legacy,
    calculate_multiple_ita,
    classify_skin_type,
)
from itameter.schema import (
    Assessment,
    CalculationResult,
    ItaFormula,
    Measurement,
    MultiMeasurementResult,
    ResultKind,
    SkinTypeClassification,
    Suitability,
    ValidationResult,
)
from itameter.validate import Validator

__all__ = [
    # Core API
    "assess",
    "assess_single",
    "Validator",
    "Calculator",
    "calculate_ita",
    "calculate_ita_legacy",
    "calculate_multiple_ita",
    "classify_skin_type",
    # Types (commonly needed)
    "Assessment",
    "CalculationResult",
    "MultiMeasurementResult",
    "ValidationResult",
    "SkinTypeClassification",
    "Measurement",
    "ItaFormula",
    "ResultKind",
    "Suitability",
    # Version
    "__version__",
]
