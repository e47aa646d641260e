# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Serializers for ITA results.

All serializers render the result exactly -- no recalculation or
reclassification.
"""

from itameter.runtime.serializers.base import SerializerFormat
from itameter.runtime.serializers.json_output import to_json_output
from itameter.runtime.serializers.report import to_announcement, to_report

__all__ = [
    "SerializerFormat",
    "to_json_output",
    "to_report",
    "to_announcement",
]
