# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Whole-form validation.

Two form shapes are supported:
- Legacy single measurement: ``lValue``, ``aValue``, ``bValue``
- Multi measurement: ``lValue{n}`` / ``bValue{n}`` for slots 1-3

In the multi form, slot 1 is mandatory. Slots 2 and 3 are optional as a
unit: an empty slot is skipped, a half-filled slot is an error on both
fields.
"""

from __future__ import annotations

from typing import Any, Mapping

from itameter.logging_config import get_logger
from itameter.schema import (
    DEFAULT_VALIDATOR_MESSAGES,
    FormValidationResult,
    Measurement,
    MultiValidationResult,
    ValidationResult,
    ValidationRule,
    ValidatorMessages,
)
from itameter.validate.fields import validate_field
from itameter.validate.rules import DEFAULT_RULES, MEASUREMENT_SLOTS, slot_fields

logger = get_logger(__name__)


def _has_content(value: Any) -> bool:
    if value is None:
        return False
    return str(value).strip() != ""


def validate_form(
    form_data: Mapping[str, Any],
    *,
    rules: Mapping[str, ValidationRule] = DEFAULT_RULES,
    messages: ValidatorMessages = DEFAULT_VALIDATOR_MESSAGES,
) -> FormValidationResult:
    """Validate every supplied field independently (legacy single form)."""
    fields: dict[str, ValidationResult] = {}
    errors: list[str] = []

    for field_name, value in form_data.items():
        result = validate_field(field_name, value, rules=rules, messages=messages)
        fields[field_name] = result
        errors.extend(result.errors)

    return FormValidationResult(fields=fields, errors=tuple(errors))


def validate_multiple_measurements(
    form_data: Mapping[str, Any],
    *,
    rules: Mapping[str, ValidationRule] = DEFAULT_RULES,
    messages: ValidatorMessages = DEFAULT_VALIDATOR_MESSAGES,
) -> MultiValidationResult:
    """
    Validate up to three L*/b* measurement slots.

    Args:
        form_data: Field name → raw value. Missing keys count as empty.
        rules: Rule table
        messages: Message catalogue

    Returns:
        MultiValidationResult whose ``valid_measurements`` lists, in slot
        order, every slot whose two fields are both valid.
    """
    fields: dict[str, ValidationResult] = {}
    errors: list[str] = []
    valid: list[Measurement] = []

    for slot in MEASUREMENT_SLOTS:
        l_name, b_name = slot_fields(slot)
        l_raw = form_data.get(l_name)
        b_raw = form_data.get(b_name)
        l_filled = _has_content(l_raw)
        b_filled = _has_content(b_raw)

        if slot > 1 and not l_filled and not b_filled:
            fields[l_name] = ValidationResult.ok()
            fields[b_name] = ValidationResult.ok()
            continue

        if slot > 1 and l_filled != b_filled:
            message = messages.pair_incomplete.format(number=slot)
            fields[l_name] = ValidationResult.error([message], raw=str(l_raw or "").strip())
            fields[b_name] = ValidationResult.error([message], raw=str(b_raw or "").strip())
            errors.append(message)
            logger.debug("Incomplete measurement pair", slot=slot)
            continue

        l_result = validate_field(l_name, l_raw, rules=rules, messages=messages)
        b_result = validate_field(b_name, b_raw, rules=rules, messages=messages)
        fields[l_name] = l_result
        fields[b_name] = b_result
        errors.extend(l_result.errors)
        errors.extend(b_result.errors)

        if (
            l_result.is_valid and b_result.is_valid
            and l_result.value is not None and b_result.value is not None
        ):
            valid.append(Measurement(L=l_result.value, b=b_result.value))

    return MultiValidationResult(
        fields=fields,
        errors=tuple(errors),
        valid_measurements=tuple(valid),
    )
