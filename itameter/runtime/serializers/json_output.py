# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
JSON serializer for results handed to a UI or an HTTP layer.

Output is strict JSON: infinite classification bounds become null and
Turkish text is kept as UTF-8 rather than escaped.
"""

from __future__ import annotations

import json

from itameter.runtime.serializers.base import Serializable, SerializerFormat
from itameter.runtime.serializers.report import to_report


def to_json_output(
    result: Serializable,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize any result type as JSON.

    Args:
        result: CalculationResult, MultiMeasurementResult or Assessment.
        format: JSON (compact) or JSON_PRETTY. NATURAL is rendered by
            ``to_report`` instead.

    Returns:
        JSON string.

    Example (compact, abridged)::

        {"kind":"ok","success":true,"ita":45.0,"skin_type":{"label":"İyi",...}}
    """
    if format == SerializerFormat.NATURAL:
        return to_report(result)

    data = result.to_dict()
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
