# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Single-field validation, sanitization, and formatting.

Inputs are the raw strings typed by an operator. Nothing here raises:
every problem becomes a message in ValidationResult.errors.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional

from itameter.schema import (
    DEFAULT_VALIDATOR_MESSAGES,
    ValidationResult,
    ValidationRule,
    ValidatorMessages,
)
from itameter.validate.rules import DEFAULT_RULES, FIELD_HELP_TEXT, LEGACY_B_HELP_TEXT


# =============================================================================
# Parsing Helpers
# =============================================================================

# Plain decimal notation only: no exponent, no inf/nan, no digit separators
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_DISALLOWED_RE = re.compile(r"[^0-9.\-]")
_TRAILING_ZEROS_RE = re.compile(r"\.?0+$")


def parse_number(text: str) -> Optional[float]:
    """Parse a plain decimal string like '-12.5' into a float.

    Returns None for anything else, including empty strings and digit
    strings too long to fit a finite float. Negative zero comes back as 0.0.
    """
    if not _NUMBER_RE.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number + 0.0


def count_decimals(text: str) -> int:
    """Number of digits after the decimal point in ``text``."""
    _, dot, fraction = text.partition(".")
    return len(fraction) if dot else 0


def _as_text(raw_value: Any) -> str:
    if raw_value is None:
        return ""
    if isinstance(raw_value, str):
        return raw_value.strip()
    return str(raw_value).strip()


# =============================================================================
# Validation
# =============================================================================


def validate_field(
    field_name: str,
    raw_value: Any,
    *,
    rules: Mapping[str, ValidationRule] = DEFAULT_RULES,
    messages: ValidatorMessages = DEFAULT_VALIDATOR_MESSAGES,
) -> ValidationResult:
    """
    Validate one form field.

    An empty required field yields only the "required" error and an
    unparseable value only the "invalid number" error. Once the value is a
    number, every violated constraint is reported, in this order:
    decimal places, sign, range, zero.

    Args:
        field_name: Form field name (e.g. "lValue1")
        raw_value: Raw input; strings are trimmed
        rules: Rule table (fields without a rule are always valid)
        messages: Message catalogue

    Returns:
        ValidationResult with the parsed value when it could be parsed
    """
    text = _as_text(raw_value)
    rule = rules.get(field_name)
    if rule is None:
        return ValidationResult.ok(raw=text)

    if text == "":
        if rule.required:
            return ValidationResult.error([messages.required], raw=text)
        return ValidationResult.ok(raw=text)

    if not rule.numeric:
        return ValidationResult.ok(raw=text)

    number = parse_number(text)
    if number is None:
        return ValidationResult.error([messages.invalid_number], raw=text)

    errors: list[str] = []

    if rule.max_decimals is not None and count_decimals(text) > rule.max_decimals:
        errors.append(messages.too_many_decimals)

    if not rule.allow_negative and number < 0:
        errors.append(messages.negative_not_allowed)

    if rule.min is not None and number < rule.min:
        errors.append(messages.range_message(rule.axis))

    if rule.max is not None and number > rule.max:
        errors.append(messages.range_message(rule.axis))

    if rule.reject_zero and number == 0:
        errors.append(messages.b_star_zero)

    if errors:
        return ValidationResult.error(errors, raw=text, value=number)
    return ValidationResult.ok(value=number, raw=text)


def is_in_range(
    field_name: str,
    value: Any,
    *,
    rules: Mapping[str, ValidationRule] = DEFAULT_RULES,
) -> bool:
    """True if ``value`` parses and satisfies the field's bounds and zero policy."""
    rule = rules.get(field_name)
    if rule is None:
        return True

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number: Optional[float] = float(value)
    else:
        number = parse_number(_as_text(value))
    if number is None or math.isnan(number):
        return False

    if rule.min is not None and number < rule.min:
        return False
    if rule.max is not None and number > rule.max:
        return False
    if rule.reject_zero and number == 0:
        return False
    return True


# =============================================================================
# Sanitization & Formatting
# =============================================================================


def sanitize_input(
    raw_value: Any,
    field_name: str,
    *,
    rules: Mapping[str, ValidationRule] = DEFAULT_RULES,
) -> Any:
    """
    Strip characters that cannot belong to a signed decimal number.

    Keeps digits, the first decimal point and at most one leading minus
    sign. When several minus signs are present they are all removed and a
    single one is put back in front only if the input started with one.
    Non-string values and fields without a numeric rule are returned as-is.

    Example:
        >>> sanitize_input("1.2.3-4-5", "lValue1")
        '1.2345'
    """
    if not isinstance(raw_value, str):
        return raw_value
    rule = rules.get(field_name)
    if rule is None or not rule.numeric:
        return raw_value

    text = raw_value.strip()
    sanitized = _DISALLOWED_RE.sub("", text)

    head, dot, tail = sanitized.partition(".")
    if dot:
        sanitized = head + "." + tail.replace(".", "")

    minus_count = sanitized.count("-")
    if minus_count > 1:
        sanitized = sanitized.replace("-", "")
        if text.startswith("-"):
            sanitized = "-" + sanitized
    elif minus_count == 1 and not sanitized.startswith("-"):
        sanitized = sanitized.replace("-", "")

    return sanitized


def format_value(
    value: Any,
    field_name: str,
    *,
    rules: Mapping[str, ValidationRule] = DEFAULT_RULES,
) -> str:
    """
    Re-render a numeric value to the field's decimal precision.

    Trailing zeros and a dangling decimal point are trimmed, so "45.50"
    becomes "45.5" and "70.00" becomes "70". Values that do not parse are
    returned as text unchanged.
    """
    if value is None or value == "":
        return ""

    rule = rules.get(field_name)
    if rule is not None and rule.numeric:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            number: Optional[float] = float(value)
        else:
            number = parse_number(_as_text(value))
        if number is not None and math.isfinite(number):
            decimals = rule.max_decimals or 1
            text = _TRAILING_ZEROS_RE.sub("", f"{number:.{decimals}f}")
            return "0" if text == "-0" else text

    return str(value)


# =============================================================================
# UI Hints
# =============================================================================


def get_field_constraints(
    field_name: str,
    *,
    rules: Mapping[str, ValidationRule] = DEFAULT_RULES,
) -> dict:
    """Constraint summary for a field, empty for unknown fields."""
    rule = rules.get(field_name)
    if rule is None:
        return {}
    return rule.to_dict()


def get_field_help_text(
    field_name: str,
    *,
    rules: Mapping[str, ValidationRule] = DEFAULT_RULES,
) -> str:
    """Short range hint shown under a field."""
    rule = rules.get(field_name)
    if rule is None:
        return ""
    if rule.reject_zero:
        return LEGACY_B_HELP_TEXT
    return FIELD_HELP_TEXT.get(rule.axis or "", "")
