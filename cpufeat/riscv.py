"""RISC-V feature detection from the ``isa`` and ``uarch`` lines of /proc/cpuinfo."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

from .line_reader import StackLineReader
from .string_view import (
    copy_string,
    get_attribute_key_value,
    index_of,
    index_of_char,
    keep_front,
    pop_front,
)

CPUINFO_PATH = "/proc/cpuinfo"
UNKNOWN_FEATURE = "unknown_feature"
_STRING_FIELD_SIZE = 64


class RiscvFeature(enum.Enum):
    """RISC-V base instruction sets and standard extensions."""

    RV32I = "RV32I"
    RV64I = "RV64I"
    M = "M"
    A = "A"
    F = "F"
    D = "D"
    Q = "Q"
    C = "C"
    V = "V"
    Zicsr = "Zicsr"
    Zifencei = "Zifencei"


# The isa string lists extensions in a canonical order, so each flag is
# searched for in what remains after the previous match.
_CPUINFO_FLAGS = (
    (RiscvFeature.RV32I, "rv32i"),
    (RiscvFeature.RV64I, "rv64i"),
    (RiscvFeature.M, "m"),
    (RiscvFeature.A, "a"),
    (RiscvFeature.F, "f"),
    (RiscvFeature.D, "d"),
    (RiscvFeature.Q, "q"),
    (RiscvFeature.C, "c"),
    (RiscvFeature.V, "v"),
    (RiscvFeature.Zicsr, "_zicsr"),
    (RiscvFeature.Zifencei, "_zifencei"),
)


@dataclass(frozen=True)
class RiscvInfo:
    """Features, vendor and microarchitecture of a RISC-V processor."""

    features: frozenset[RiscvFeature] = frozenset()
    uarch: str = ""
    vendor: str = ""

    def has(self, feature: RiscvFeature) -> bool:
        """Tell whether ``feature`` is present."""
        return feature in self.features


def feature_name(feature: RiscvFeature) -> str:
    """Return the name of ``feature``, or ``"unknown_feature"``."""
    return feature.value if isinstance(feature, RiscvFeature) else UNKNOWN_FEATURE


def parse_isa(value: str) -> frozenset[RiscvFeature]:
    """Return the features named by an isa string such as ``rv64imafdc``."""
    found = set()
    remainder = value
    for feature, flag in _CPUINFO_FLAGS:
        index = index_of(remainder, flag)
        if index >= 0:
            found.add(feature)
            remainder = pop_front(remainder, index + len(flag))
    return frozenset(found)


def parse_cpuinfo(lines: Iterable[str]) -> RiscvInfo:
    """Build a RiscvInfo from the lines of a cpuinfo text."""
    features: frozenset[RiscvFeature] = frozenset()
    vendor = uarch = ""
    for line in lines:
        pair = get_attribute_key_value(line)
        if pair is None:
            continue
        key, value = pair
        if key == "isa":
            features = parse_isa(value)
        elif key == "uarch":
            comma = index_of_char(value, ",")
            if comma < 0:
                continue
            vendor = copy_string(keep_front(value, comma), _STRING_FIELD_SIZE)
            uarch = copy_string(pop_front(value, comma + 1), _STRING_FIELD_SIZE)
    return RiscvInfo(features=features, uarch=uarch, vendor=vendor)


def get_riscv_info(path: str = CPUINFO_PATH) -> RiscvInfo:
    """Read ``path``; an unreadable file gives an empty RiscvInfo."""
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            return parse_cpuinfo(result.line for result in StackLineReader(stream))
    except OSError:
        return RiscvInfo()