"""x86 processor features, microarchitectures and OS-assisted SSE detection."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable

from .string_view import (
    get_attribute_key_value,
    has_word,
    index_of_char,
    pop_back,
    pop_front,
    starts_with,
)

UNKNOWN_FEATURE = "unknown_feature"
UNKNOWN_MICROARCHITECTURE = "unknown microarchitecture"

VENDOR_GENUINE_INTEL = "GenuineIntel"
VENDOR_AUTHENTIC_AMD = "AuthenticAMD"
VENDOR_HYGON_GENUINE = "HygonGenuine"
VENDOR_CENTAUR_HAULS = "CentaurHauls"
VENDOR_SHANGHAI = "  Shanghai  "

PROC_CPUINFO_PATH = "/proc/cpuinfo"
DMESG_BOOT_PATH = "/var/run/dmesg.boot"

# Arguments accepted by the Windows IsProcessorFeaturePresent call.
PF_XMMI_INSTRUCTIONS_AVAILABLE = 6
PF_XMMI64_INSTRUCTIONS_AVAILABLE = 10
PF_SSE3_INSTRUCTIONS_AVAILABLE = 13
PF_SSSE3_INSTRUCTIONS_AVAILABLE = 36
PF_SSE4_1_INSTRUCTIONS_AVAILABLE = 37
PF_SSE4_2_INSTRUCTIONS_AVAILABLE = 38


class X86Feature(enum.Enum):
    """x86 instruction set features."""

    FPU = "fpu"
    TSC = "tsc"
    CX8 = "cx8"
    CLFSH = "clfsh"
    MMX = "mmx"
    AES = "aes"
    ERMS = "erms"
    F16C = "f16c"
    FMA4 = "fma4"
    FMA3 = "fma3"
    VAES = "vaes"
    VPCLMULQDQ = "vpclmulqdq"
    BMI1 = "bmi1"
    HLE = "hle"
    BMI2 = "bmi2"
    RTM = "rtm"
    RDSEED = "rdseed"
    CLFLUSHOPT = "clflushopt"
    CLWB = "clwb"
    SSE = "sse"
    SSE2 = "sse2"
    SSE3 = "sse3"
    SSSE3 = "ssse3"
    SSE4_1 = "sse4_1"
    SSE4_2 = "sse4_2"
    SSE4A = "sse4a"
    AVX = "avx"
    AVX_VNNI = "avx_vnni"
    AVX2 = "avx2"
    AVX512F = "avx512f"
    AVX512CD = "avx512cd"
    AVX512ER = "avx512er"
    AVX512PF = "avx512pf"
    AVX512BW = "avx512bw"
    AVX512DQ = "avx512dq"
    AVX512VL = "avx512vl"
    AVX512IFMA = "avx512ifma"
    AVX512VBMI = "avx512vbmi"
    AVX512VBMI2 = "avx512vbmi2"
    AVX512VNNI = "avx512vnni"
    AVX512BITALG = "avx512bitalg"
    AVX512VPOPCNTDQ = "avx512vpopcntdq"
    AVX512_4VNNIW = "avx512_4vnniw"
    AVX512_4VBMI2 = "avx512_4vbmi2"  # alias of AVX512_4FMAPS
    AVX512_SECOND_FMA = "avx512_second_fma"
    AVX512_4FMAPS = "avx512_4fmaps"
    AVX512_BF16 = "avx512_bf16"
    AVX512_VP2INTERSECT = "avx512_vp2intersect"
    AVX512_FP16 = "avx512_fp16"
    AMX_BF16 = "amx_bf16"
    AMX_TILE = "amx_tile"
    AMX_INT8 = "amx_int8"
    AMX_FP16 = "amx_fp16"
    PCLMULQDQ = "pclmulqdq"
    SMX = "smx"
    SGX = "sgx"
    CX16 = "cx16"
    SHA = "sha"
    POPCNT = "popcnt"
    MOVBE = "movbe"
    RDRND = "rdrnd"
    DCA = "dca"
    SS = "ss"
    ADX = "adx"
    LZCNT = "lzcnt"
    GFNI = "gfni"
    MOVDIRI = "movdiri"
    MOVDIR64B = "movdir64b"
    FS_REP_MOV = "fs_rep_mov"
    FZ_REP_MOVSB = "fz_rep_movsb"
    FS_REP_STOSB = "fs_rep_stosb"
    FS_REP_CMPSB_SCASB = "fs_rep_cmpsb_scasb"
    LAM = "lam"
    UAI = "uai"


class X86Microarchitecture(enum.Enum):
    """x86 microarchitectures, identified by vendor, family and model."""

    X86_UNKNOWN = "X86_UNKNOWN"
    ZHAOXIN_ZHANGJIANG = "ZHAOXIN_ZHANGJIANG"
    ZHAOXIN_WUDAOKOU = "ZHAOXIN_WUDAOKOU"
    ZHAOXIN_LUJIAZUI = "ZHAOXIN_LUJIAZUI"
    ZHAOXIN_YONGFENG = "ZHAOXIN_YONGFENG"
    INTEL_80486 = "INTEL_80486"
    INTEL_P5 = "INTEL_P5"
    INTEL_LAKEMONT = "INTEL_LAKEMONT"
    INTEL_CORE = "INTEL_CORE"
    INTEL_PNR = "INTEL_PNR"
    INTEL_NHM = "INTEL_NHM"
    INTEL_ATOM_BNL = "INTEL_ATOM_BNL"
    INTEL_WSM = "INTEL_WSM"
    INTEL_SNB = "INTEL_SNB"
    INTEL_IVB = "INTEL_IVB"
    INTEL_ATOM_SMT = "INTEL_ATOM_SMT"
    INTEL_HSW = "INTEL_HSW"
    INTEL_BDW = "INTEL_BDW"
    INTEL_SKL = "INTEL_SKL"
    INTEL_CCL = "INTEL_CCL"
    INTEL_ATOM_GMT = "INTEL_ATOM_GMT"
    INTEL_ATOM_GMT_PLUS = "INTEL_ATOM_GMT_PLUS"
    INTEL_ATOM_TMT = "INTEL_ATOM_TMT"
    INTEL_KBL = "INTEL_KBL"
    INTEL_CFL = "INTEL_CFL"
    INTEL_WHL = "INTEL_WHL"
    INTEL_CML = "INTEL_CML"
    INTEL_CNL = "INTEL_CNL"
    INTEL_ICL = "INTEL_ICL"
    INTEL_TGL = "INTEL_TGL"
    INTEL_SPR = "INTEL_SPR"
    INTEL_ADL = "INTEL_ADL"
    INTEL_RCL = "INTEL_RCL"
    INTEL_RPL = "INTEL_RPL"
    INTEL_KNIGHTS_M = "INTEL_KNIGHTS_M"
    INTEL_KNIGHTS_L = "INTEL_KNIGHTS_L"
    INTEL_KNIGHTS_F = "INTEL_KNIGHTS_F"
    INTEL_KNIGHTS_C = "INTEL_KNIGHTS_C"
    INTEL_NETBURST = "INTEL_NETBURST"
    AMD_HAMMER = "AMD_HAMMER"
    AMD_K10 = "AMD_K10"
    AMD_K11 = "AMD_K11"
    AMD_K12 = "AMD_K12"
    AMD_BOBCAT = "AMD_BOBCAT"
    AMD_PILEDRIVER = "AMD_PILEDRIVER"
    AMD_STREAMROLLER = "AMD_STREAMROLLER"
    AMD_EXCAVATOR = "AMD_EXCAVATOR"
    AMD_BULLDOZER = "AMD_BULLDOZER"
    AMD_JAGUAR = "AMD_JAGUAR"
    AMD_PUMA = "AMD_PUMA"
    AMD_ZEN = "AMD_ZEN"
    AMD_ZEN_PLUS = "AMD_ZEN_PLUS"
    AMD_ZEN2 = "AMD_ZEN2"
    AMD_ZEN3 = "AMD_ZEN3"
    AMD_ZEN4 = "AMD_ZEN4"


_SSE_FEATURES = (
    X86Feature.SSE,
    X86Feature.SSE2,
    X86Feature.SSE3,
    X86Feature.SSSE3,
    X86Feature.SSE4_1,
    X86Feature.SSE4_2,
)

_PROC_CPUINFO_FLAGS = dict(zip(_SSE_FEATURES, ("sse", "sse2", "pni", "ssse3", "sse4_1", "sse4_2")))
_DMESG_FLAGS = dict(zip(_SSE_FEATURES, ("SSE", "SSE2", "SSE3", "SSSE3", "SSE4.1", "SSE4.2")))
_SYSCTL_NAMES = dict(
    zip(
        _SSE_FEATURES,
        (
            "hw.optional.sse",
            "hw.optional.sse2",
            "hw.optional.sse3",
            "hw.optional.supplementalsse3",
            "hw.optional.sse4_1",
            "hw.optional.sse4_2",
        ),
    )
)
_WINDOWS_FEATURES = dict(
    zip(
        _SSE_FEATURES,
        (
            PF_XMMI_INSTRUCTIONS_AVAILABLE,
            PF_XMMI64_INSTRUCTIONS_AVAILABLE,
            PF_SSE3_INSTRUCTIONS_AVAILABLE,
            PF_SSSE3_INSTRUCTIONS_AVAILABLE,
            PF_SSE4_1_INSTRUCTIONS_AVAILABLE,
            PF_SSE4_2_INSTRUCTIONS_AVAILABLE,
        ),
    )
)


@dataclass(frozen=True)
class X86Info:
    """Features and identification of an x86 processor."""

    features: frozenset[X86Feature] = frozenset()
    family: int = 0
    model: int = 0
    stepping: int = 0
    vendor: str = ""
    brand_string: str = ""

    def has(self, feature: X86Feature) -> bool:
        """Tell whether ``feature`` is present."""
        return feature in self.features


def feature_name(feature: X86Feature) -> str:
    """Return the name of ``feature``, or ``"unknown_feature"``."""
    return feature.value if isinstance(feature, X86Feature) else UNKNOWN_FEATURE


def microarchitecture_name(uarch: X86Microarchitecture) -> str:
    """Return the name of ``uarch``, or ``"unknown microarchitecture"``."""
    if isinstance(uarch, X86Microarchitecture):
        return uarch.value
    return UNKNOWN_MICROARCHITECTURE


def features_from_proc_cpuinfo(lines: Iterable[str]) -> frozenset[X86Feature]:
    """Return the SSE features listed on the first ``flags`` line of a Linux cpuinfo."""
    for line in lines:
        pair = get_attribute_key_value(line)
        if pair is None:
            continue
        key, value = pair
        if key != "flags":
            continue
        return frozenset(
            feature for feature, flag in _PROC_CPUINFO_FLAGS.items() if has_word(value, flag, " ")
        )
    return frozenset()


def features_from_dmesg_boot(lines: Iterable[str]) -> frozenset[X86Feature]:
    """Return the SSE features named on the ``  Features`` lines of a FreeBSD dmesg.boot.

    Such lines look like ``  Features=0x1783fbff<PSE36,MMX,FXSR,SSE,SSE2,HTT>``.
    """
    found: set[X86Feature] = set()
    for line in lines:
        if not starts_with(line, "  Features"):
            continue
        csv = line
        open_bracket = index_of_char(csv, "<")
        if open_bracket >= 0:
            csv = pop_front(csv, open_bracket + 1)
        if csv.endswith(">"):
            csv = pop_back(csv, 1)
        found.update(
            feature for feature, flag in _DMESG_FLAGS.items() if has_word(csv, flag, ",")
        )
    return frozenset(found)


def features_from_sysctl(lookup: Callable[[str], bool]) -> frozenset[X86Feature]:
    """Return the SSE features that ``lookup`` reports enabled by macOS sysctl name."""
    return frozenset(feature for feature, name in _SYSCTL_NAMES.items() if lookup(name))


def features_from_windows(is_present: Callable[[int], bool]) -> frozenset[X86Feature]:
    """Return the SSE features for which ``is_present`` accepts the Windows PF constant."""
    return frozenset(
        feature for feature, code in _WINDOWS_FEATURES.items() if is_present(code)
    )