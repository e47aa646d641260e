# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""Human-readable rendering of ITA values and calculation results."""

from __future__ import annotations

import math
from typing import Optional, Union

from itameter.schema import (
    DEFAULT_CALCULATOR_MESSAGES,
    CalculationResult,
    CalculatorMessages,
    MultiMeasurementResult,
)


def format_ita_value(ita: Optional[float]) -> str:
    """Render ITA° with one decimal, e.g. "45.0°". Missing or NaN gives "--"."""
    if ita is None or math.isnan(ita):
        return "--"
    return f"{ita:.1f}°"


def format_lab_number(value: float) -> str:
    """Render a Lab input without padding: 70.0 → "70", 20.5 → "20.5"."""
    return f"{value:g}"


def generate_summary(
    result: Union[CalculationResult, MultiMeasurementResult],
    messages: CalculatorMessages = DEFAULT_CALCULATOR_MESSAGES,
) -> str:
    """
    One-line recap of a calculation.

    Example outputs:
        L:70 b:20 → ITA:45.0° (İyi (40-55°))
        L:70 a:5 b:20 → ITA:45.0° (İyi (40-55°))
        2 ölçüm → Ortalama ITA:58.3° (Mükemmel (>55°))

    Failed results give ``messages.summary_failed``.
    """
    if not result.success:
        return messages.summary_failed

    if isinstance(result, MultiMeasurementResult):
        return messages.summary_multi.format(
            count=result.valid_measurement_count,
            ita=format_ita_value(result.average_ita),
            description=result.average_skin_type.full_description,
        )

    lab = result.lab_values
    parts = [f"L:{format_lab_number(lab.L)}"]
    if lab.a is not None:
        parts.append(f"a:{format_lab_number(lab.a)}")
    parts.append(f"b:{format_lab_number(lab.b)}")
    return (
        f"{' '.join(parts)} → ITA:{format_ita_value(result.ita)} "
        f"({result.skin_type.full_description})"
    )
