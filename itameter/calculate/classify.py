# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Skin-type classification from ITA°.

Ranges are inclusive and scanned in table order; the first match wins.
The configured table leaves three gaps, (29.9, 30), (39.9, 40) and
(55, 55.1). Values there match nothing and get FALLBACK_SKIN_TYPE
(Unknown / caution). The gaps are kept as configured pending clinical
review.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping, Optional

from itameter.calculate.text import format_ita_value
from itameter.schema import SkinTypeClassification, Suitability, SuitabilityMessage

# Ordered 1 → 4
SKIN_TYPES: tuple[SkinTypeClassification, ...] = (
    SkinTypeClassification(
        label="Mükemmel",
        description="Çok Güvenli",
        full_description="Mükemmel (>55°)",
        range_min=55.1,
        range_max=math.inf,
        suitability=Suitability.SAFE,
        recommendation="Mükemmel",
    ),
    SkinTypeClassification(
        label="İyi",
        description="Güvenli",
        full_description="İyi (40-55°)",
        range_min=40.0,
        range_max=55.0,
        suitability=Suitability.SAFE,
        recommendation="İyi",
    ),
    SkinTypeClassification(
        label="Dikkat",
        description="Dikkatli Olun",
        full_description="Dikkat (30-40°)",
        range_min=30.0,
        range_max=39.9,
        suitability=Suitability.CAUTION,
        recommendation="Dikkat",
    ),
    SkinTypeClassification(
        label="Riskli",
        description="Yüksek Risk",
        full_description="Riskli (<30°)",
        range_min=-math.inf,
        range_max=29.9,
        suitability=Suitability.DANGER,
        recommendation="Riskli",
    ),
)

FALLBACK_SKIN_TYPE = SkinTypeClassification(
    label="Unknown",
    description="Bilinmeyen",
    full_description="Bilinmeyen Cilt Tipi",
    range_min=-math.inf,
    range_max=math.inf,
    suitability=Suitability.CAUTION,
    recommendation="Değerlendirme Gerekli",
)

SUITABILITY_MESSAGES: Mapping[Suitability, SuitabilityMessage] = MappingProxyType({
    Suitability.SAFE: SuitabilityMessage(
        icon="✅",
        title="LAZER İÇİN UYGUN",
        description="Alexandrite lazer güvenli\nNormal ayarlarla tedavi yapılabilir",
    ),
    Suitability.CAUTION: SuitabilityMessage(
        icon="⚠️",
        title="DİKKAT GEREKİR",
        description="Düşük enerji ayarları kullanın\nTest yaması zorunludur",
    ),
    Suitability.DANGER: SuitabilityMessage(
        icon="❌",
        title="RİSKLİ",
        description="Alexandrite lazer önerilmez\nAlternatif yöntem düşünün",
    ),
})


def classify_skin_type(
    ita: float,
    skin_types: tuple[SkinTypeClassification, ...] = SKIN_TYPES,
    fallback: SkinTypeClassification = FALLBACK_SKIN_TYPE,
) -> SkinTypeClassification:
    """
    Classify an ITA° value.

    Args:
        ita: ITA in degrees (normally already rounded to one decimal)
        skin_types: Ordered classification table
        fallback: Returned when no range contains ``ita`` (gaps, NaN)

    Returns:
        The first classification whose range contains ``ita``
    """
    for skin_type in skin_types:
        if skin_type.contains(ita):
            return skin_type
    return fallback


def get_ita_color_class(
    ita: float,
    skin_types: tuple[SkinTypeClassification, ...] = SKIN_TYPES,
) -> str:
    """Suitability value ("safe" / "caution" / "danger") for styling."""
    return classify_skin_type(ita, skin_types).suitability.value


def get_skin_type_info(
    ita: float,
    skin_types: tuple[SkinTypeClassification, ...] = SKIN_TYPES,
    suitability_messages: Mapping[Suitability, SuitabilityMessage] = SUITABILITY_MESSAGES,
) -> dict:
    """
    Classification of ``ita`` with display helpers.

    Returns:
        Classification dict plus ``ita``, ``formatted_ita``,
        ``suitability_message`` and the three suitability flags
    """
    skin_type = classify_skin_type(ita, skin_types)
    message: Optional[SuitabilityMessage] = suitability_messages.get(skin_type.suitability)
    info = skin_type.to_dict()
    info.update({
        "ita": ita,
        "formatted_ita": format_ita_value(ita),
        "suitability_message": message.to_dict() if message else None,
        "is_laser_suitable": skin_type.suitability is Suitability.SAFE,
        "requires_caution": skin_type.suitability is Suitability.CAUTION,
        "is_not_recommended": skin_type.suitability is Suitability.DANGER,
    })
    return info
