"""32-bit ARM processor features and identification."""

from __future__ import annotations

import enum
from dataclasses import dataclass

UNKNOWN_FEATURE = "unknown_feature"


class ArmFeature(enum.Enum):
    """ARM hardware capabilities."""

    SWP = "swp"
    HALF = "half"
    THUMB = "thumb"
    BIT26 = "_26bit"
    FASTMULT = "fastmult"
    FPA = "fpa"
    VFP = "vfp"
    EDSP = "edsp"
    JAVA = "java"
    IWMMXT = "iwmmxt"
    CRUNCH = "crunch"
    THUMBEE = "thumbee"
    NEON = "neon"
    VFPV3 = "vfpv3"
    VFPV3D16 = "vfpv3d16"
    TLS = "tls"
    VFPV4 = "vfpv4"
    IDIVA = "idiva"
    IDIVT = "idivt"
    VFPD32 = "vfpd32"
    LPAE = "lpae"
    EVTSTRM = "evtstrm"
    AES = "aes"
    PMULL = "pmull"
    SHA1 = "sha1"
    SHA2 = "sha2"
    CRC32 = "crc32"


@dataclass(frozen=True)
class ArmInfo:
    """Features and identification registers of an ARM processor."""

    features: frozenset[ArmFeature] = frozenset()
    implementer: int = 0
    architecture: int = 0
    variant: int = 0
    part: int = 0
    revision: int = 0

    def has(self, feature: ArmFeature) -> bool:
        """Tell whether ``feature`` is present."""
        return feature in self.features


def feature_name(feature: ArmFeature) -> str:
    """Return the name of ``feature``, or ``"unknown_feature"``."""
    return feature.value if isinstance(feature, ArmFeature) else UNKNOWN_FEATURE