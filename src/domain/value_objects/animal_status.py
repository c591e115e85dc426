from __future__ import annotations

from enum import Enum


class ReproductiveStatus(str, Enum):
    SERVED = "SERVED"
    PREGNANT = "PREGNANT"
    CALVED = "CALVED"
    DRY = "DRY"


class HealthStatus(str, Enum):
    HEALTHY = "HEALTHY"
    SICK = "SICK"
    IN_TREATMENT = "IN_TREATMENT"


class ExitReason(str, Enum):
    SALE = "SALE"
    DEATH = "DEATH"
    CULL = "CULL"
    DONATION = "DONATION"
