# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Plain-text renderings: the copy-to-clipboard report and the one-line
screen-reader announcement.
"""

from __future__ import annotations

from itameter.calculate.text import format_ita_value, format_lab_number, generate_summary
from itameter.runtime.serializers.base import Serializable, unwrap
from itameter.schema import (
    DEFAULT_CALCULATOR_MESSAGES,
    CalculationResult,
    CalculatorMessages,
    MultiMeasurementResult,
)


def to_report(
    result: Serializable,
    messages: CalculatorMessages = DEFAULT_CALCULATOR_MESSAGES,
) -> str:
    """Render a result as a multi-line text report.

    Example::

        Çoklu Ölçüm Sonuçları:
        Ölçüm Sayısı: 2
        Ortalama ITA: 58.3°

        Bireysel Ölçümler:
        1. L*:70 b*:20 → ITA:45.0°
        2. L*:80 b*:10 → ITA:71.6°

    Failed results render the failure line followed by their errors.
    Single CalculationResults render their one-line summary.
    """
    inner = unwrap(result)
    if inner is None or not inner.success:
        errors = result.errors if inner is None else inner.errors
        return "\n".join([messages.summary_failed, *errors])

    if isinstance(inner, CalculationResult):
        return generate_summary(inner, messages)

    lines = [
        messages.report_title,
        messages.report_count.format(count=inner.measurement_count),
        messages.report_average.format(ita=format_ita_value(inner.average_ita)),
        "",
        messages.report_individual,
    ]
    for individual in inner.individual_results:
        lines.append(_individual_line(individual))

    if inner.errors:
        lines.append("")
        lines.extend(inner.errors)

    return "\n".join(lines)


def _individual_line(result: CalculationResult) -> str:
    prefix = f"{result.measurement_number}."
    if not result.success or result.lab_values is None:
        return f"{prefix} {format_ita_value(None)}"
    lab = result.lab_values
    return (
        f"{prefix} L*:{format_lab_number(lab.L)} b*:{format_lab_number(lab.b)}"
        f" → ITA:{format_ita_value(result.ita)}"
    )


def to_announcement(
    result: Serializable,
    messages: CalculatorMessages = DEFAULT_CALCULATOR_MESSAGES,
) -> str:
    """One-line announcement, e.g. "2 ölçüm tamamlandı. Ortalama ITA değeri 45.0°"."""
    inner = unwrap(result)
    if inner is None or not inner.success:
        return messages.summary_failed
    if isinstance(inner, MultiMeasurementResult):
        return messages.announcement.format(
            count=inner.measurement_count,
            ita=format_ita_value(inner.average_ita),
        )
    return generate_summary(inner, messages)
