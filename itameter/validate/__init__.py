# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Input validation for Lab measurement forms.

Turns raw operator input into parsed numbers or field-scoped error
messages. Leaf layer: depends only on the schema.
"""

from itameter.validate.debounce import DebounceScheduler
from itameter.validate.fields import (
    count_decimals,
    format_value,
    get_field_constraints,
    get_field_help_text,
    is_in_range,
    parse_number,
    sanitize_input,
    validate_field,
)
from itameter.validate.form import validate_form, validate_multiple_measurements
from itameter.validate.rules import DEFAULT_RULES, slot_fields
from itameter.validate.validator import Validator

__all__ = [
    "Validator",
    "DebounceScheduler",
    "DEFAULT_RULES",
    "slot_fields",
    "validate_field",
    "validate_form",
    "validate_multiple_measurements",
    "sanitize_input",
    "format_value",
    "parse_number",
    "count_decimals",
    "is_in_range",
    "get_field_constraints",
    "get_field_help_text",
]
