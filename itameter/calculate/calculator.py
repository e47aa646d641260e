# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Calculator component.

Binds a classification table and a message catalogue to the pure
calculation functions.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from itameter.calculate.aggregate import MeasurementInput, calculate_multiple_ita
from itameter.calculate.classify import (
    FALLBACK_SKIN_TYPE,
    SKIN_TYPES,
    SUITABILITY_MESSAGES,
    classify_skin_type,
    get_ita_color_class,
    get_skin_type_info,
)
from itameter.calculate.ita import calculate, calculate_ita, calculate_ita_legacy
from itameter.calculate.text import format_ita_value, generate_summary
from itameter.schema import (
    DEFAULT_CALCULATOR_MESSAGES,
    CalculationResult,
    CalculatorMessages,
    ItaFormula,
    MultiMeasurementResult,
    SkinTypeClassification,
    Suitability,
    SuitabilityMessage,
)


class Calculator:
    """
    ITA° calculation, classification and summaries.

    Args:
        skin_types: Ordered classification table (defaults to SKIN_TYPES)
        messages: Message catalogue (defaults to Turkish)
        suitability_messages: Display text per suitability tier
    """

    def __init__(
        self,
        skin_types: Optional[tuple[SkinTypeClassification, ...]] = None,
        messages: Optional[CalculatorMessages] = None,
        suitability_messages: Optional[Mapping[Suitability, SuitabilityMessage]] = None,
    ) -> None:
        self.skin_types = skin_types if skin_types is not None else SKIN_TYPES
        self.messages = messages if messages is not None else DEFAULT_CALCULATOR_MESSAGES
        self.suitability_messages = (
            suitability_messages if suitability_messages is not None else SUITABILITY_MESSAGES
        )

    def calculate_ita(self, L: Any, b: Any) -> CalculationResult:
        return calculate_ita(L, b, skin_types=self.skin_types, messages=self.messages)

    def calculate_ita_legacy(self, L: Any, a: Any, b: Any) -> CalculationResult:
        return calculate_ita_legacy(L, a, b, skin_types=self.skin_types, messages=self.messages)

    def calculate(
        self,
        L: Any,
        b: Any,
        a: Any = None,
        *,
        formula: ItaFormula = ItaFormula.ATAN2,
    ) -> CalculationResult:
        return calculate(
            L, b, a, formula=formula, skin_types=self.skin_types, messages=self.messages
        )

    def calculate_multiple_ita(self, measurements: Sequence[MeasurementInput]) -> MultiMeasurementResult:
        return calculate_multiple_ita(
            measurements, skin_types=self.skin_types, messages=self.messages
        )

    def classify_skin_type(self, ita: float) -> SkinTypeClassification:
        return classify_skin_type(ita, self.skin_types, FALLBACK_SKIN_TYPE)

    def get_skin_type_info(self, ita: float) -> dict:
        return get_skin_type_info(ita, self.skin_types, self.suitability_messages)

    def get_ita_color_class(self, ita: float) -> str:
        return get_ita_color_class(ita, self.skin_types)

    def get_all_skin_types(self) -> tuple[SkinTypeClassification, ...]:
        return self.skin_types

    def get_suitability_messages(self) -> Mapping[Suitability, SuitabilityMessage]:
        return self.suitability_messages

    def format_ita_value(self, ita: Optional[float]) -> str:
        return format_ita_value(ita)

    def generate_summary(self, result: Union[CalculationResult, MultiMeasurementResult]) -> str:
        return generate_summary(result, self.messages)
