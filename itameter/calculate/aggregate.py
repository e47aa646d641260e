# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Multi-measurement aggregation.

Each measurement is calculated on its own; a failing measurement is
reported but does not stop the others. The batch succeeds when at least
one measurement does, and its classification comes from the averaged
ITA°, never from combining individual classifications.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

import numpy as np

from itameter.calculate.classify import SKIN_TYPES, classify_skin_type
from itameter.calculate.ita import calculate_ita, round_ita
from itameter.logging_config import get_logger
from itameter.schema import (
    DEFAULT_CALCULATOR_MESSAGES,
    CalculationResult,
    CalculatorMessages,
    Measurement,
    MultiMeasurementResult,
    ResultKind,
    SkinTypeClassification,
)

logger = get_logger(__name__)

MeasurementInput = Union[Measurement, Mapping[str, Any]]


def _lab_pair(measurement: MeasurementInput) -> tuple[Any, Any]:
    if isinstance(measurement, Measurement):
        return measurement.L, measurement.b
    return measurement.get("L"), measurement.get("b")


def calculate_multiple_ita(
    measurements: Sequence[MeasurementInput],
    *,
    skin_types: tuple[SkinTypeClassification, ...] = SKIN_TYPES,
    messages: CalculatorMessages = DEFAULT_CALCULATOR_MESSAGES,
) -> MultiMeasurementResult:
    """
    Calculate ITA° for each measurement and classify their mean.

    Args:
        measurements: Measurement objects or ``{"L": .., "b": ..}`` mappings,
            in display order
        skin_types: Classification table
        messages: Message catalogue

    Returns:
        MultiMeasurementResult. ``individual_results`` holds one entry per
        input (numbered from 1) whether or not it succeeded. Individual
        errors are prefixed with their measurement number; on a successful
        batch they are warnings.
    """
    if not measurements:
        logger.debug("Empty measurement batch")
        return MultiMeasurementResult(
            kind=ResultKind.ERROR,
            measurement_count=0,
            errors=(messages.no_measurements,),
        )

    results: list[CalculationResult] = []
    errors: list[str] = []

    for number, measurement in enumerate(measurements, 1):
        try:
            L, b = _lab_pair(measurement)
            result = calculate_ita(L, b, skin_types=skin_types, messages=messages)
        except Exception:
            logger.exception("Measurement could not be read", measurement_number=number)
            result = CalculationResult.failure([messages.calculation_error])
        result = result.numbered(number)
        results.append(result)
        errors.extend(
            messages.measurement_error.format(number=number, error=error)
            for error in result.errors
        )

    successful = [r.ita for r in results if r.success and r.ita is not None]

    if not successful:
        logger.debug("No valid measurement in batch", measurement_count=len(results))
        return MultiMeasurementResult(
            kind=ResultKind.ERROR,
            individual_results=tuple(results),
            measurement_count=len(results),
            valid_measurement_count=0,
            errors=(messages.no_valid_measurement, *errors),
        )

    average_ita = round_ita(float(np.mean(successful)))
    logger.debug(
        "Measurement batch averaged",
        measurement_count=len(results),
        valid_measurement_count=len(successful),
        average_ita=average_ita,
    )
    return MultiMeasurementResult(
        kind=ResultKind.OK,
        individual_results=tuple(results),
        average_ita=average_ita,
        average_skin_type=classify_skin_type(average_ita, skin_types),
        measurement_count=len(results),
        valid_measurement_count=len(successful),
        errors=tuple(errors),
    )
