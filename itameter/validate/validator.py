# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Validator component.

Binds a rule table, a message catalogue and a debounce scheduler so UI
code can hold one object per form.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from itameter.config import get_settings
from itameter.schema import (
    DEFAULT_VALIDATOR_MESSAGES,
    FormValidationResult,
    MultiValidationResult,
    ValidationResult,
    ValidationRule,
    ValidatorMessages,
)
from itameter.validate.debounce import DebounceScheduler
from itameter.validate.fields import (
    format_value,
    get_field_constraints,
    get_field_help_text,
    is_in_range,
    sanitize_input,
    validate_field,
)
from itameter.validate.form import validate_form, validate_multiple_measurements
from itameter.validate.rules import DEFAULT_RULES

RealTimeCallback = Callable[[str, ValidationResult], Any]


class Validator:
    """
    Field and form validation for Lab measurement input.

    Args:
        rules: Field name → ValidationRule (defaults to DEFAULT_RULES)
        messages: Message catalogue (defaults to Turkish)
        debounce_delay: Real-time validation delay in seconds
            (defaults to ``Settings.debounce_delay``)

    Validation results are returned, never raised. The one exception is
    ``validate_field_realtime``, which needs a running asyncio loop and
    raises RuntimeError when called without one.
    """

    def __init__(
        self,
        rules: Optional[Mapping[str, ValidationRule]] = None,
        messages: Optional[ValidatorMessages] = None,
        *,
        debounce_delay: Optional[float] = None,
    ) -> None:
        self.rules = rules if rules is not None else DEFAULT_RULES
        self.messages = messages if messages is not None else DEFAULT_VALIDATOR_MESSAGES
        if debounce_delay is None:
            debounce_delay = get_settings().debounce_delay
        self._scheduler = DebounceScheduler(debounce_delay)

    @property
    def debounce_delay(self) -> float:
        return self._scheduler.delay

    def validate_field(self, field_name: str, value: Any) -> ValidationResult:
        return validate_field(field_name, value, rules=self.rules, messages=self.messages)

    def validate_form(self, form_data: Mapping[str, Any]) -> FormValidationResult:
        return validate_form(form_data, rules=self.rules, messages=self.messages)

    def validate_multiple_measurements(self, form_data: Mapping[str, Any]) -> MultiValidationResult:
        return validate_multiple_measurements(form_data, rules=self.rules, messages=self.messages)

    def validate_field_realtime(
        self,
        field_name: str,
        value: Any,
        callback: RealTimeCallback,
    ) -> None:
        """
        Validate after the debounce delay and hand the result to ``callback``.

        A later call for the same field before the delay elapses replaces
        this one. Must be called from inside a running event loop.
        """
        self._scheduler.schedule(field_name, self._run_realtime, field_name, value, callback)

    def _run_realtime(self, field_name: str, value: Any, callback: RealTimeCallback) -> None:
        callback(field_name, self.validate_field(field_name, value))

    def is_pending(self, field_name: str) -> bool:
        """True if a real-time validation for ``field_name`` has not fired yet."""
        return self._scheduler.is_pending(field_name)

    def clear_all_timers(self) -> None:
        self._scheduler.cancel_all()

    def sanitize_input(self, value: Any, field_name: str) -> Any:
        return sanitize_input(value, field_name, rules=self.rules)

    def format_value(self, value: Any, field_name: str) -> str:
        return format_value(value, field_name, rules=self.rules)

    def is_in_range(self, field_name: str, value: Any) -> bool:
        return is_in_range(field_name, value, rules=self.rules)

    def get_field_constraints(self, field_name: str) -> dict:
        return get_field_constraints(field_name, rules=self.rules)

    def get_field_help_text(self, field_name: str) -> str:
        return get_field_help_text(field_name, rules=self.rules)
