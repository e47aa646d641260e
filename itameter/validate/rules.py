# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Lab bounds, form field names, and the default rule table.

The calculator re-validates against the same bounds, so they are defined
once here and shared.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from itameter.schema import ValidationRule


# =============================================================================
# Lab Bounds
# =============================================================================

L_MIN = 0.0
L_MAX = 100.0
AB_MIN = -128.0
AB_MAX = 127.0

MAX_DECIMALS = 2


# =============================================================================
# Field Names
# =============================================================================

# Legacy single-measurement form
L_FIELD = "lValue"
A_FIELD = "aValue"
B_FIELD = "bValue"

# Multi-measurement form: slot 1 is mandatory, slots 2 and 3 optional
MEASUREMENT_SLOTS = (1, 2, 3)


def slot_fields(slot: int) -> tuple[str, str]:
    """Return the (L*, b*) field names for a measurement slot."""
    return f"{L_FIELD}{slot}", f"{B_FIELD}{slot}"


# =============================================================================
# Rules
# =============================================================================

L_RULE = ValidationRule(
    required=True,
    min=L_MIN,
    max=L_MAX,
    max_decimals=MAX_DECIMALS,
    allow_negative=False,
    axis="L",
)

A_RULE = ValidationRule(
    required=True,
    min=AB_MIN,
    max=AB_MAX,
    max_decimals=MAX_DECIMALS,
    allow_negative=True,
    axis="a",
)

B_RULE = ValidationRule(
    required=True,
    min=AB_MIN,
    max=AB_MAX,
    max_decimals=MAX_DECIMALS,
    allow_negative=True,
    axis="b",
)

# Only the legacy single-measurement b* rejects zero; the atan2 formula is
# defined there.
LEGACY_B_RULE = ValidationRule(
    required=True,
    min=AB_MIN,
    max=AB_MAX,
    max_decimals=MAX_DECIMALS,
    allow_negative=True,
    reject_zero=True,
    axis="b",
)


def _build_default_rules() -> Mapping[str, ValidationRule]:
    rules: dict[str, ValidationRule] = {
        L_FIELD: L_RULE,
        A_FIELD: A_RULE,
        B_FIELD: LEGACY_B_RULE,
    }
    for slot in MEASUREMENT_SLOTS:
        l_name, b_name = slot_fields(slot)
        rules[l_name] = L_RULE
        rules[b_name] = B_RULE
    return MappingProxyType(rules)


DEFAULT_RULES: Mapping[str, ValidationRule] = _build_default_rules()

# Help text shown under each field
FIELD_HELP_TEXT: Mapping[str, str] = MappingProxyType({
    "L": "Aralık: 0-100",
    "a": "Aralık: -128 ile +127",
    "b": "Aralık: -128 ile +127",
})
LEGACY_B_HELP_TEXT = "Aralık: -128 ile +127 (sıfır olamaz)"
