# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Calculation core for Itameter.

Pure, synchronous ITA° calculation, skin-type classification and
multi-measurement averaging. No I/O.
"""

from itameter.calculate.aggregate import calculate_multiple_ita
from itameter.calculate.calculator import Calculator
from itameter.calculate.classify import (
    FALLBACK_SKIN_TYPE,
    SKIN_TYPES,
    SUITABILITY_MESSAGES,
    classify_skin_type,
    get_ita_color_class,
    get_skin_type_info,
)
from itameter.calculate.ita import (
    calculate,
    calculate_ita,
    calculate_ita_legacy,
    round_ita,
    validate_lab_values,
)
from itameter.calculate.text import format_ita_value, generate_summary

__all__ = [
    "Calculator",
    "calculate",
    "calculate_ita",
    "calculate_ita_legacy",
    "calculate_multiple_ita",
    "validate_lab_values",
    "round_ita",
    "classify_skin_type",
    "get_skin_type_info",
    "get_ita_color_class",
    "format_ita_value",
    "generate_summary",
    "SKIN_TYPES",
    "FALLBACK_SKIN_TYPE",
    "SUITABILITY_MESSAGES",
]
