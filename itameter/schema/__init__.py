# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Schema definitions for ITA measurement.

All types in this module are immutable (frozen dataclasses).
Results are data: validation and calculation failures are reported in
``errors`` and tagged with ResultKind.ERROR, never raised.
"""

from itameter.schema.messages import (
    DEFAULT_CALCULATOR_MESSAGES,
    DEFAULT_VALIDATOR_MESSAGES,
    CalculatorMessages,
    ValidatorMessages,
)
from itameter.schema.types import (
    Assessment,
    CalculationResult,
    FormValidationResult,
    ItaFormula,
    LabValues,
    Measurement,
    MultiMeasurementResult,
    MultiValidationResult,
    ResultKind,
    SkinTypeClassification,
    Suitability,
    SuitabilityMessage,
    ValidationResult,
    ValidationRule,
)

__all__ = [
    # Discriminants
    "ResultKind",
    "Suitability",
    "ItaFormula",
    # Inputs
    "Measurement",
    "LabValues",
    # Validation
    "ValidationRule",
    "ValidationResult",
    "FormValidationResult",
    "MultiValidationResult",
    # Classification
    "SkinTypeClassification",
    "SuitabilityMessage",
    # Calculation
    "CalculationResult",
    "MultiMeasurementResult",
    "Assessment",
    # Messages
    "ValidatorMessages",
    "CalculatorMessages",
    "DEFAULT_VALIDATOR_MESSAGES",
    "DEFAULT_CALCULATOR_MESSAGES",
]
