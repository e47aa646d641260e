# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""Tests for whole-form validation (legacy and multi-measurement)."""

from dataclasses import replace

from structlog.testing import capture_logs

from itameter.schema import DEFAULT_VALIDATOR_MESSAGES as MSG
from itameter.schema import Measurement
from itameter.validate import Validator, validate_form, validate_multiple_measurements


def _pair_message(slot):
    return MSG.pair_incomplete.format(number=slot)


class TestValidateMultipleMeasurements:

    def test_slot_one_only(self):
        v = validate_multiple_measurements({"lValue1": "70", "bValue1": "20"})
        assert v.is_valid
        assert v.valid_measurements == (Measurement(L=70.0, b=20.0),)
        assert v.measurement_count == 1
        assert v.errors == ()

    def test_empty_optional_slots_are_valid_and_empty(self):
        v = validate_multiple_measurements({"lValue1": "70", "bValue1": "20"})
        for name in ("lValue2", "bValue2", "lValue3", "bValue3"):
            assert v.fields[name].is_valid
            assert v.fields[name].is_empty

    def test_whitespace_counts_as_empty(self):
        v = validate_multiple_measurements({
            "lValue1": "70", "bValue1": "20", "lValue2": "   ", "bValue2": "",
        })
        assert v.is_valid
        assert v.measurement_count == 1

    def test_slot_one_is_mandatory(self):
        v = validate_multiple_measurements({})
        assert not v.is_valid
        assert v.fields["lValue1"].errors == (MSG.required,)
        assert v.fields["bValue1"].errors == (MSG.required,)
        assert v.valid_measurements == ()

    def test_slot_one_missing_b(self):
        v = validate_multiple_measurements({"lValue1": "70", "bValue1": ""})
        assert not v.is_valid
        assert v.fields["lValue1"].is_valid
        assert v.fields["bValue1"].errors == (MSG.required,)

    def test_half_filled_slot_invalidates_both_fields(self):
        v = validate_multiple_measurements({
            "lValue1": "70", "bValue1": "20", "lValue2": "60",
        })
        assert not v.is_valid
        # lValue2 alone would be a valid L*, but the pair is incomplete
        assert v.fields["lValue2"].errors == (_pair_message(2),)
        assert v.fields["bValue2"].errors == (_pair_message(2),)
        assert v.errors == (_pair_message(2),)
        assert v.valid_measurements == (Measurement(L=70.0, b=20.0),)

    def test_half_filled_slot_logs_at_debug(self):
        with capture_logs() as logs:
            validate_multiple_measurements({"lValue1": "70", "bValue1": "20", "lValue2": "60"})
        assert [(e["event"], e["log_level"]) for e in logs] == [
            ("Incomplete measurement pair", "debug"),
        ]

    def test_half_filled_slot_three_b_only(self):
        v = validate_multiple_measurements({
            "lValue1": "70", "bValue1": "20", "bValue3": "5",
        })
        assert v.fields["lValue3"].errors == (_pair_message(3),)
        assert v.fields["bValue3"].errors == (_pair_message(3),)

    def test_three_slots_in_order(self):
        v = validate_multiple_measurements({
            "lValue1": "70", "bValue1": "20",
            "lValue2": "60", "bValue2": "10",
            "lValue3": "55.5", "bValue3": "-3.25",
        })
        assert v.is_valid
        assert v.valid_measurements == (
            Measurement(L=70.0, b=20.0),
            Measurement(L=60.0, b=10.0),
            Measurement(L=55.5, b=-3.25),
        )

    def test_invalid_optional_slot_excluded(self):
        v = validate_multiple_measurements({
            "lValue1": "70", "bValue1": "20",
            "lValue2": "60", "bValue2": "10",
            "lValue3": "150", "bValue3": "10",
        })
        assert not v.is_valid
        assert v.fields["lValue3"].errors == (MSG.l_star_range,)
        assert v.fields["bValue3"].is_valid
        assert v.measurement_count == 2
        assert v.errors == (MSG.l_star_range,)

    def test_zero_b_allowed(self):
        v = validate_multiple_measurements({"lValue1": "50", "bValue1": "0"})
        assert v.is_valid

    def test_to_dict(self):
        d = validate_multiple_measurements({"lValue1": "70", "bValue1": "20"}).to_dict()
        assert d["is_valid"] is True
        assert d["valid_measurements"] == [{"L": 70.0, "b": 20.0}]
        assert d["measurement_count"] == 1
        assert set(d["fields"]) == {
            "lValue1", "bValue1", "lValue2", "bValue2", "lValue3", "bValue3",
        }


class TestValidateForm:

    def test_legacy_form_valid(self):
        r = validate_form({"lValue": "70", "aValue": "5", "bValue": "20"})
        assert r.is_valid
        assert not r.has_errors

    def test_legacy_form_collects_all_errors(self):
        r = validate_form({"lValue": "", "aValue": "200", "bValue": "0"})
        assert not r.is_valid
        assert r.errors == (MSG.required, MSG.a_star_range, MSG.b_star_zero)
        assert r.fields["bValue"].errors == (MSG.b_star_zero,)


class TestValidatorComponent:

    def test_methods_delegate(self):
        v = Validator(debounce_delay=0.0)
        assert v.validate_field("lValue1", "150").errors == (MSG.l_star_range,)
        assert v.sanitize_input("1.2.3-4-5", "lValue1") == "1.2345"
        assert v.format_value("45.50", "lValue1") == "45.5"
        assert v.validate_multiple_measurements({"lValue1": "70", "bValue1": "20"}).is_valid
        assert v.validate_form({"lValue": "70"}).is_valid

    def test_custom_messages(self):
        messages = replace(MSG, required="Required")
        v = Validator(messages=messages, debounce_delay=0.0)
        assert v.validate_field("lValue1", "").errors == ("Required",)
