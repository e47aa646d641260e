# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from itameter.schema import Assessment, CalculationResult, MultiMeasurementResult

Serializable = Union[CalculationResult, MultiMeasurementResult, Assessment]


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    NATURAL = "natural"


def unwrap(result: Serializable) -> Optional[Union[CalculationResult, MultiMeasurementResult]]:
    """Return the calculation result inside an Assessment (None if validation failed)."""
    if isinstance(result, Assessment):
        return result.result
    return result
