# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""Tests for multi-measurement averaging and partial-failure handling."""

import pytest

from itameter.calculate import Calculator, calculate_ita, calculate_multiple_ita, round_ita
from itameter.schema import DEFAULT_CALCULATOR_MESSAGES as MSG
from itameter.schema import Measurement, ResultKind


class TestCalculateMultipleIta:

    def test_empty_batch(self):
        r = calculate_multiple_ita([])
        assert not r.success
        assert r.kind is ResultKind.ERROR
        assert r.measurement_count == 0
        assert r.errors == (MSG.no_measurements,)
        assert r.average_ita is None

    def test_two_measurements(self):
        r = calculate_multiple_ita([Measurement(L=70, b=20), {"L": 60, "b": 10}])
        assert r.success
        assert [x.ita for x in r.individual_results] == [45.0, 45.0]
        assert [x.measurement_number for x in r.individual_results] == [1, 2]
        assert r.average_ita == 45.0
        assert r.average_skin_type.label == "İyi"
        assert r.measurement_count == 2
        assert r.valid_measurement_count == 2
        assert r.errors == ()

    def test_average_is_rounded_mean(self):
        ms = [Measurement(L=70, b=20), Measurement(L=80, b=10)]
        r = calculate_multiple_ita(ms)
        itas = [calculate_ita(m.L, m.b).ita for m in ms]
        assert r.average_ita == pytest.approx(round_ita(sum(itas) / 2))
        assert r.average_ita == pytest.approx(58.3)
        assert r.average_skin_type.label == "Mükemmel"

    def test_average_classified_from_mean_not_from_labels(self):
        # İyi (45.0) + Riskli (18.4) average to 31.7, which is Dikkat
        r = calculate_multiple_ita([Measurement(L=70, b=20), Measurement(L=55, b=15)])
        labels = {x.skin_type.label for x in r.individual_results}
        assert labels == {"İyi", "Riskli"}
        assert r.average_ita == pytest.approx(31.7)
        assert r.average_skin_type.label == "Dikkat"

    def test_partial_failure(self):
        r = calculate_multiple_ita([Measurement(L=70, b=20), {"L": 150, "b": 10}])
        assert r.success
        assert r.average_ita == 45.0
        assert r.measurement_count == 2
        assert r.valid_measurement_count == 1
        assert r.errors == (f"Ölçüm 2: {MSG.invalid_l}",)
        failed = r.individual_results[1]
        assert not failed.success
        assert failed.measurement_number == 2

    def test_failure_does_not_stop_later_measurements(self):
        r = calculate_multiple_ita([{"L": "", "b": 10}, Measurement(L=80, b=10)])
        assert r.success
        assert r.individual_results[1].ita == pytest.approx(71.6)
        assert r.average_ita == pytest.approx(71.6)

    def test_all_fail(self):
        r = calculate_multiple_ita([{"L": 150, "b": 10}, {"L": "", "b": 5}])
        assert not r.success
        assert r.errors == (
            MSG.no_valid_measurement,
            f"Ölçüm 1: {MSG.invalid_l}",
            f"Ölçüm 2: {MSG.empty_field} (L*)",
        )
        assert len(r.individual_results) == 2
        assert r.valid_measurement_count == 0

    def test_missing_key_is_empty(self):
        r = calculate_multiple_ita([{"b": 10}])
        assert r.errors[1] == f"Ölçüm 1: {MSG.empty_field} (L*)"

    def test_unreadable_item_is_mapped(self):
        r = calculate_multiple_ita([42])
        assert not r.success
        assert r.errors == (MSG.no_valid_measurement, f"Ölçüm 1: {MSG.calculation_error}")

    def test_calculator_component(self):
        r = Calculator().calculate_multiple_ita([Measurement(L=70, b=20)])
        assert r.average_ita == 45.0
