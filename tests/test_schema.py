# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""Tests for schema types and their serialization."""

import json
import math

import pytest

from itameter.schema import (
    DEFAULT_VALIDATOR_MESSAGES,
    Assessment,
    CalculationResult,
    LabValues,
    Measurement,
    MultiMeasurementResult,
    MultiValidationResult,
    ResultKind,
    SkinTypeClassification,
    Suitability,
    ValidationResult,
    ValidationRule,
)


class TestValidationRule:

    def test_defaults(self):
        rule = ValidationRule()
        assert rule.required
        assert rule.numeric
        assert not rule.reject_zero

    def test_min_above_max(self):
        with pytest.raises(ValueError, match="min"):
            ValidationRule(min=10, max=0)

    def test_negative_decimals(self):
        with pytest.raises(ValueError, match="max_decimals"):
            ValidationRule(max_decimals=-1)

    def test_frozen(self):
        rule = ValidationRule()
        with pytest.raises(AttributeError):
            rule.required = False


class TestValidationResult:

    def test_ok(self):
        r = ValidationResult.ok(value=1.5, raw="1.5")
        assert r.is_valid
        assert r.kind is ResultKind.OK
        assert not r.is_empty

    def test_error_coerces_to_tuple(self):
        r = ValidationResult.error(["a", "b"], raw="x")
        assert not r.is_valid
        assert r.errors == ("a", "b")

    def test_to_dict(self):
        assert ValidationResult.ok().to_dict() == {
            "kind": "ok",
            "is_valid": True,
            "errors": [],
            "value": None,
            "raw": "",
        }

    def test_range_message_fallback(self):
        assert DEFAULT_VALIDATOR_MESSAGES.range_message("x") == DEFAULT_VALIDATOR_MESSAGES.out_of_range
        assert DEFAULT_VALIDATOR_MESSAGES.range_message(None) == DEFAULT_VALIDATOR_MESSAGES.out_of_range


class TestSkinTypeClassification:

    def test_inverted_range(self):
        with pytest.raises(ValueError, match="range_min"):
            SkinTypeClassification("X", "", "", 10.0, 0.0, Suitability.SAFE, "")

    def test_contains_inclusive(self):
        s = SkinTypeClassification("X", "", "", 40.0, 55.0, Suitability.SAFE, "")
        assert s.contains(40.0)
        assert s.contains(55.0)
        assert not s.contains(55.05)

    def test_to_dict_strict_json(self):
        s = SkinTypeClassification("X", "", "", -math.inf, math.inf, Suitability.CAUTION, "")
        d = s.to_dict()
        assert d["range_min"] is None
        assert d["range_max"] is None
        assert d["suitability"] == "caution"
        json.dumps(d, allow_nan=False)


class TestMeasurementTypes:

    def test_measurement_from_dict(self):
        m = Measurement.from_dict({"L": 70, "b": 20})
        assert m == Measurement(L=70, b=20)
        assert m.to_dict() == {"L": 70, "b": 20}

    def test_lab_values_omit_a(self):
        assert LabValues(L=70, b=20).to_dict() == {"L": 70, "b": 20}
        assert LabValues(L=70, b=20, a=5).to_dict() == {"L": 70, "b": 20, "a": 5}


class TestCalculationResult:

    def test_failure(self):
        r = CalculationResult.failure(["oops"])
        assert not r.success
        assert r.kind is ResultKind.ERROR
        assert r.errors == ("oops",)
        assert r.to_dict()["skin_type"] is None

    def test_numbered_returns_copy(self):
        r = CalculationResult.failure(["oops"])
        n = r.numbered(3)
        assert n.measurement_number == 3
        assert r.measurement_number is None

    def test_to_json(self):
        r = CalculationResult.failure(["hata"]).numbered(1)
        data = json.loads(r.to_json())
        assert data == {
            "kind": "error",
            "success": False,
            "ita": None,
            "skin_type": None,
            "errors": ["hata"],
            "formula": "atan2",
            "measurement_number": 1,
        }


class TestAssessment:

    def test_without_result_is_error(self):
        v = MultiValidationResult(
            fields={"lValue1": ValidationResult.error(["x"])},
            errors=("x",),
        )
        a = Assessment(validation=v)
        assert not a.success
        assert a.kind is ResultKind.ERROR
        assert a.errors == ("x",)

    def test_with_failed_result(self):
        v = MultiValidationResult(fields={}, errors=())
        r = MultiMeasurementResult(kind=ResultKind.ERROR, errors=("none",))
        a = Assessment(validation=v, result=r)
        assert not a.success
        assert a.errors == ("none",)
        assert json.loads(a.to_json())["result"]["errors"] == ["none"]
