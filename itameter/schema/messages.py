# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Message catalogues for validation and calculation results.

Catalogues are frozen dataclasses constructed once and passed by reference
into the validation and calculation functions. The defaults are Turkish,
matching the clinic UI that consumes the results; a caller that needs
another language builds its own catalogue with ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidatorMessages:
    """Field-level validation messages."""

    required: str = "Bu alan zorunludur"
    invalid_number: str = "Lütfen geçerli bir sayı girin"
    out_of_range: str = "Değer geçerli aralık dışında"
    l_star_range: str = "L* değeri 0 ile 100 arasında olmalıdır"
    a_star_range: str = "a* değeri -128 ile 127 arasında olmalıdır"
    b_star_range: str = "b* değeri -128 ile 127 arasında olmalıdır"
    b_star_zero: str = "b* değeri sıfır olamaz (sıfıra bölme hatası)"
    too_many_decimals: str = "En fazla 2 ondalık basamak kullanın"
    negative_not_allowed: str = "Negatif değer giremezsiniz"
    # {number} is the 1-based measurement slot
    pair_incomplete: str = "Ölçüm {number} için L* ve b* değerlerinin ikisi de girilmelidir"

    def range_message(self, axis: str | None) -> str:
        """Range message for a Lab axis ("L", "a", "b"), generic otherwise."""
        return {
            "L": self.l_star_range,
            "a": self.a_star_range,
            "b": self.b_star_range,
        }.get(axis or "", self.out_of_range)


@dataclass(frozen=True, slots=True)
class CalculatorMessages:
    """Calculation and aggregation messages."""

    invalid_l: str = "Geçersiz L* değeri - 0 ile 100 arasında bir sayı girin"
    invalid_a: str = "Geçersiz a* değeri - -128 ile 127 arasında bir sayı girin"
    invalid_b: str = "Geçersiz b* değeri - -128 ile 127 arasında bir sayı girin"
    zero_b_value: str = "b* değeri sıfır olamaz (sıfıra bölme hatası)"
    empty_field: str = "Bu alan zorunludur"
    invalid_number: str = "Lütfen geçerli bir sayı girin"
    calculation_error: str = "Hesaplama hatası - değerlerinizi kontrol edin"
    no_measurements: str = "En az bir ölçüm gereklidir"
    no_valid_measurement: str = "Geçerli ölçüm bulunamadı"
    measurement_error: str = "Ölçüm {number}: {error}"
    summary_failed: str = "Hesaplama başarısız"
    summary_multi: str = "{count} ölçüm → Ortalama ITA:{ita} ({description})"
    report_title: str = "Çoklu Ölçüm Sonuçları:"
    report_count: str = "Ölçüm Sayısı: {count}"
    report_average: str = "Ortalama ITA: {ita}"
    report_individual: str = "Bireysel Ölçümler:"
    announcement: str = "{count} ölçüm tamamlandı. Ortalama ITA değeri {ita}"


DEFAULT_VALIDATOR_MESSAGES = ValidatorMessages()
DEFAULT_CALCULATOR_MESSAGES = CalculatorMessages()
