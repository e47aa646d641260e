# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""Tests for skin-type classification, including the configured range gaps."""

import math

import pytest

from itameter.calculate import (
    FALLBACK_SKIN_TYPE,
    SKIN_TYPES,
    Calculator,
    classify_skin_type,
    get_ita_color_class,
    get_skin_type_info,
)
from itameter.schema import SkinTypeClassification, Suitability


class TestClassifySkinType:

    @pytest.mark.parametrize("ita, label", [
        (180.0, "Mükemmel"),
        (55.1, "Mükemmel"),
        (55.0, "İyi"),
        (45.0, "İyi"),
        (40.0, "İyi"),
        (39.9, "Dikkat"),
        (30.0, "Dikkat"),
        (29.9, "Riskli"),
        (0.0, "Riskli"),
        (-90.0, "Riskli"),
    ])
    def test_named_ranges(self, ita, label):
        assert classify_skin_type(ita).label == label

    @pytest.mark.parametrize("ita", [39.95, 55.05, 29.95])
    def test_gaps_fall_back_to_unknown(self, ita):
        skin_type = classify_skin_type(ita)
        assert skin_type is FALLBACK_SKIN_TYPE
        assert skin_type.label == "Unknown"
        assert skin_type.suitability is Suitability.CAUTION

    def test_nan_falls_back(self):
        assert classify_skin_type(math.nan) is FALLBACK_SKIN_TYPE

    def test_table_order(self):
        assert [s.label for s in SKIN_TYPES] == ["Mükemmel", "İyi", "Dikkat", "Riskli"]
        assert [s.suitability for s in SKIN_TYPES] == [
            Suitability.SAFE,
            Suitability.SAFE,
            Suitability.CAUTION,
            Suitability.DANGER,
        ]

    def test_first_match_wins(self):
        overlapping = (
            SkinTypeClassification("A", "", "", 0.0, 50.0, Suitability.SAFE, ""),
            SkinTypeClassification("B", "", "", 40.0, 60.0, Suitability.DANGER, ""),
        )
        assert classify_skin_type(45.0, overlapping).label == "A"
        assert classify_skin_type(55.0, overlapping).label == "B"
        assert classify_skin_type(70.0, overlapping) is FALLBACK_SKIN_TYPE


class TestSkinTypeInfo:

    def test_safe(self):
        info = get_skin_type_info(45.0)
        assert info["label"] == "İyi"
        assert info["formatted_ita"] == "45.0°"
        assert info["is_laser_suitable"] is True
        assert info["requires_caution"] is False
        assert info["suitability_message"]["title"] == "LAZER İÇİN UYGUN"

    def test_gap(self):
        info = get_skin_type_info(39.95)
        assert info["label"] == "Unknown"
        assert info["requires_caution"] is True
        assert info["range_min"] is None

    def test_color_class(self):
        assert get_ita_color_class(0.0) == "danger"
        assert get_ita_color_class(35.0) == "caution"
        assert get_ita_color_class(60.0) == "safe"

    def test_calculator_accessors(self):
        c = Calculator()
        assert c.classify_skin_type(45.0).label == "İyi"
        assert c.get_all_skin_types() == SKIN_TYPES
        assert c.get_suitability_messages()[Suitability.DANGER].title == "RİSKLİ"
        assert c.get_ita_color_class(45.0) == "safe"
        assert c.get_skin_type_info(-10.0)["is_not_recommended"] is True
