from __future__ import annotations

from enum import Enum


class Sex(str, Enum):
    MALE = "M"
    FEMALE = "F"


class AnimalCategory(str, Enum):
    COW = "COW"
    HEIFER = "HEIFER"
    FEMALE_CALF = "FEMALE_CALF"
    MALE_CALF = "MALE_CALF"
    BULL = "BULL"
    OX = "OX"


class AcquisitionOrigin(str, Enum):
    BORN = "BORN"
    PURCHASED = "PURCHASED"


SIRE_CATEGORIES = frozenset({AnimalCategory.BULL.value, AnimalCategory.OX.value})


def calf_category_for(sex: str) -> str:
    """Category given to a newborn of the given sex."""
    if sex == Sex.MALE.value:
        return AnimalCategory.MALE_CALF.value
    return AnimalCategory.FEMALE_CALF.value
