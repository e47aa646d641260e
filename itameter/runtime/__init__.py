# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Itameter results.

Renders results for the collaborators that display or store them:

1. JSON -- For HTTP handlers and persistence layers
2. Report -- Plain-text recap for copy-to-clipboard
3. Announcement -- One line for screen readers

The delivery layer never modifies result content.
"""

from itameter.runtime.serializers import (
    SerializerFormat,
    to_announcement,
    to_json_output,
    to_report,
)

__all__ = [
    "to_json_output",
    "to_report",
    "to_announcement",
    "SerializerFormat",
]
