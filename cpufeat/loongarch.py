"""LoongArch processor features."""

from __future__ import annotations

import enum
from dataclasses import dataclass

UNKNOWN_FEATURE = "unknown_feature"


class LoongArchFeature(enum.Enum):
    """LoongArch base instructions and extensions."""

    CPUCFG = "CPUCFG"
    LAM = "LAM"
    UAL = "UAL"
    FPU = "FPU"
    LSX = "LSX"
    LASX = "LASX"
    CRC32 = "CRC32"
    COMPLEX = "COMPLEX"
    CRYPTO = "CRYPTO"
    LVZ = "LVZ"
    LBT_X86 = "LBT_X86"
    LBT_ARM = "LBT_ARM"
    LBT_MIPS = "LBT_MIPS"
    PTW = "PTW"


@dataclass(frozen=True)
class LoongArchInfo:
    """Features of a LoongArch processor."""

    features: frozenset[LoongArchFeature] = frozenset()

    def has(self, feature: LoongArchFeature) -> bool:
        """Tell whether ``feature`` is present."""
        return feature in self.features


def feature_name(feature: LoongArchFeature) -> str:
    """Return the name of ``feature``, or ``"unknown_feature"``."""
    return feature.value if isinstance(feature, LoongArchFeature) else UNKNOWN_FEATURE