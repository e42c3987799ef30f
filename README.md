# cpufeat

Parse what the operating system reports about the processor into plain
Python objects: feature flags, vendor, microarchitecture strings and
processor counts.

It reads text such as `/proc/cpuinfo` and FreeBSD's `/var/run/dmesg.boot`,
and describes the feature sets of x86, RISC-V, s390x, ARM and LoongArch
CPUs. No third-party dependencies.

## Installation

```
pip install cpufeat
```

## RISC-V

```python
from cpufeat.riscv import RiscvFeature, feature_name, get_riscv_info, parse_isa

info = get_riscv_info()            # reads /proc/cpuinfo by default
print(info.vendor, info.uarch)
print(info.has(RiscvFeature.V))

features = parse_isa("rv64imafdc_zicsr_zifencei")
print(sorted(feature_name(f) for f in features))
```

`get_riscv_info(path)` returns an empty `RiscvInfo` when the file cannot be
read. `parse_cpuinfo(lines)` does the same work on lines you already hold:
the `isa` line gives the features, and a `uarch` line of the form
`vendor,uarch` gives the vendor and microarchitecture (each cut to 63
characters).

## s390x

```python
from cpufeat.s390x import get_s390x_platform_strings, parse_cpuinfo

strings = get_s390x_platform_strings("/proc/cpuinfo", platform="z15")
print(strings.num_processors, strings.platform)
```

`S390XPlatformStrings.num_processors` comes from the `# processors` line;
it is 0 when that line is missing and -1 when its value is not a number.

## x86

```python
from cpufeat.x86 import X86Feature, feature_name, features_from_proc_cpuinfo

with open("/proc/cpuinfo") as f:
    features = features_from_proc_cpuinfo(f)

print(X86Feature.SSE4_2 in features, feature_name(X86Feature.SSE4_2))
```

These functions report the SSE family (`SSE`, `SSE2`, `SSE3`, `SSSE3`,
`SSE4_1`, `SSE4_2`) as each system lists it:

- `features_from_proc_cpuinfo(lines)`: the first `flags` line of a Linux
  cpuinfo (`pni` stands for SSE3).
- `features_from_dmesg_boot(lines)`: the `  Features...=0x...<A,B,C>` lines
  of a FreeBSD boot log.
- `features_from_sysctl(lookup)`: a callable answering macOS sysctl names
  such as `hw.optional.sse4_2`.
- `features_from_windows(is_present)`: a callable answering the Windows
  `PF_*_INSTRUCTIONS_AVAILABLE` constants, which the module defines.

`X86Info` holds features, family, model, stepping, vendor and brand string,
with `has(feature)`. `X86Microarchitecture` lists the known
microarchitectures and `microarchitecture_name(uarch)` names one. The
vendor strings are available as `VENDOR_GENUINE_INTEL`,
`VENDOR_AUTHENTIC_AMD` and the like.

## ARM and LoongArch

`cpufeat.arm` and `cpufeat.loongarch` provide the feature enumerations
`ArmFeature` and `LoongArchFeature`, the records `ArmInfo` and
`LoongArchInfo` with a `has(feature)` method, and `feature_name(feature)`.
Every `feature_name` returns `"unknown_feature"` for a value that is not a
member of its enumeration.

## Lower-level helpers

`cpufeat.string_view` holds the text helpers the parsers share, such as
`get_attribute_key_value(line)` for `key : value` lines,
`has_word(line, word, separator)` and `parse_positive_number(view)`, which
reads decimal or `0x` hexadecimal and raises `ValueError` otherwise.

`cpufeat.line_reader.StackLineReader(stream, buffer_size=1024)` reads lines
from a text stream through a fixed-size buffer. Each `LineResult` carries
the line, an `eof` flag on the last result, and `full_line=False` when a
line did not fit in the buffer and was cut short; the rest of such a line
is skipped.

## What it does not do

The package does not execute the CPUID instruction or query the hardware
directly. It does not fill in an `X86Info` itself, work out an
`X86Microarchitecture` from family and model, or describe caches; nor does
it detect ARM, LoongArch or s390x features from hardware capability bits.
It works only from the text and callables you give it. There is no
command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```