import pytest

from cpufeat.x86 import (
    PF_SSE3_INSTRUCTIONS_AVAILABLE,
    PF_SSE4_1_INSTRUCTIONS_AVAILABLE,
    PF_SSE4_2_INSTRUCTIONS_AVAILABLE,
    PF_SSSE3_INSTRUCTIONS_AVAILABLE,
    PF_XMMI64_INSTRUCTIONS_AVAILABLE,
    PF_XMMI_INSTRUCTIONS_AVAILABLE,
    X86Feature,
    X86Info,
    X86Microarchitecture,
    feature_name,
    features_from_dmesg_boot,
    features_from_proc_cpuinfo,
    features_from_sysctl,
    features_from_windows,
    microarchitecture_name,
)

ALL_SSE = frozenset(
    {
        X86Feature.SSE,
        X86Feature.SSE2,
        X86Feature.SSE3,
        X86Feature.SSSE3,
        X86Feature.SSE4_1,
        X86Feature.SSE4_2,
    }
)

DMESG_FULL = """
  ---<<BOOT>>---
Kernel boot messages follow.
CPU: sample processor (1.87-MHz K8-class CPU)
  Features=0x1783fbff<FPU,VME,DE,PSE,TSC,MSR,PAE,MCE,CX8,APIC,SEP,MTRR,PGE,MCA,CMOV,PAT,PSE36,MMX,FXSR,SSE,SSE2,HTT>
  Features2=0x5eda2203<SSE3,PCLMULQDQ,SSSE3,CX16,PCID,SSE4.1,SSE4.2,MOVBE,POPCNT,AESNI,XSAVE,OSXSAVE,RDRAND>
real memory  = 2147418112 (2047 MB)
"""

DMESG_P3 = """
  ---<<BOOT>>---
Kernel boot messages follow.
CPU: sample processor (500-MHz 686-class CPU)
  Features=0x1783fbff<FPU,VME,DE,PSE,TSC,MSR,PAE,MCE,CX8,APIC,SEP,MTRR,PGE,MCA,CMOV,PAT,PSE36,MMX,FXSR,SSE>
real memory  = 2147418112 (2047 MB)
"""


def test_feature_names_are_distinct_and_known():
    names = [feature_name(feature) for feature in X86Feature]
    assert feature_name(None) == "unknown_feature"
    assert all(name and name != "unknown_feature" for name in names)
    assert len(set(names)) == len(names)


def test_microarchitecture_names_are_distinct_and_known():
    names = [microarchitecture_name(uarch) for uarch in X86Microarchitecture]
    assert microarchitecture_name("bogus") == "unknown microarchitecture"
    assert all(name and name != "unknown microarchitecture" for name in names)
    assert len(set(names)) == len(names)


def test_feature_name_values():
    assert feature_name(X86Feature.SSE4_1) == "sse4_1"
    assert feature_name(X86Feature.AVX512_VP2INTERSECT) == "avx512_vp2intersect"


def test_info_has():
    info = X86Info(features=frozenset({X86Feature.AVX}), family=6, model=0x2A)
    assert info.has(X86Feature.AVX)
    assert not info.has(X86Feature.AVX2)


def test_proc_cpuinfo_nehalem():
    text = "processor       :\nflags           : fpu mmx sse sse2 pni ssse3 sse4_1 sse4_2\n"
    assert features_from_proc_cpuinfo(text.splitlines()) == ALL_SSE


def test_proc_cpuinfo_atom():
    text = "\nflags           : fpu mmx sse sse2 pni ssse3 sse4_1 sse4_2\n"
    assert features_from_proc_cpuinfo(text.splitlines()) == ALL_SSE


def test_proc_cpuinfo_p3():
    text = "\nflags           : fpu mmx sse\n"
    assert features_from_proc_cpuinfo(text.splitlines()) == frozenset({X86Feature.SSE})


def test_proc_cpuinfo_word_boundaries():
    lines = ["flags : sse2 sse4_1"]
    assert features_from_proc_cpuinfo(lines) == frozenset({X86Feature.SSE2, X86Feature.SSE4_1})


def test_proc_cpuinfo_only_first_flags_line():
    lines = ["flags : sse", "flags : sse sse2 pni"]
    assert features_from_proc_cpuinfo(lines) == frozenset({X86Feature.SSE})


def test_proc_cpuinfo_without_flags():
    assert features_from_proc_cpuinfo(["processor : 0", "model name : x"]) == frozenset()


def test_dmesg_boot_full():
    assert features_from_dmesg_boot(DMESG_FULL.splitlines()) == ALL_SSE


def test_dmesg_boot_p3():
    assert features_from_dmesg_boot(DMESG_P3.splitlines()) == frozenset({X86Feature.SSE})


def test_dmesg_boot_ignores_unindented_lines():
    lines = ["Features=0x1<SSE,SSE2>"]
    assert features_from_dmesg_boot(lines) == frozenset()


@pytest.mark.parametrize(
    "names, expected",
    [
        (
            {
                "hw.optional.sse",
                "hw.optional.sse2",
                "hw.optional.sse3",
                "hw.optional.supplementalsse3",
                "hw.optional.sse4_1",
                "hw.optional.sse4_2",
            },
            ALL_SSE,
        ),
        ({"hw.optional.sse"}, frozenset({X86Feature.SSE})),
        (set(), frozenset()),
    ],
)
def test_sysctl(names, expected):
    assert features_from_sysctl(names.__contains__) == expected


@pytest.mark.parametrize(
    "present, expected",
    [
        (
            {
                PF_XMMI_INSTRUCTIONS_AVAILABLE,
                PF_XMMI64_INSTRUCTIONS_AVAILABLE,
                PF_SSE3_INSTRUCTIONS_AVAILABLE,
                PF_SSSE3_INSTRUCTIONS_AVAILABLE,
                PF_SSE4_1_INSTRUCTIONS_AVAILABLE,
                PF_SSE4_2_INSTRUCTIONS_AVAILABLE,
            },
            ALL_SSE,
        ),
        ({PF_XMMI_INSTRUCTIONS_AVAILABLE}, frozenset({X86Feature.SSE})),
        (set(), frozenset()),
    ],
)
def test_windows(present, expected):
    assert features_from_windows(present.__contains__) == expected