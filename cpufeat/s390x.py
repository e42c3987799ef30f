"""s390x platform strings read from /proc/cpuinfo."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterable

from .line_reader import StackLineReader
from .string_view import get_attribute_key_value, parse_positive_number

CPUINFO_PATH = "/proc/cpuinfo"


@dataclass(frozen=True)
class S390XPlatformStrings:
    """Processor count and platform name of an s390x machine.

    ``num_processors`` is -1 when the cpuinfo value is not a number.
    """

    num_processors: int = 0
    platform: str = ""


def parse_cpuinfo(lines: Iterable[str]) -> S390XPlatformStrings:
    """Build platform strings from the lines of a cpuinfo text."""
    num_processors = 0
    for line in lines:
        pair = get_attribute_key_value(line)
        if pair is None:
            continue
        key, value = pair
        if key == "# processors":
            try:
                num_processors = parse_positive_number(value)
            except ValueError:
                num_processors = -1
    return S390XPlatformStrings(num_processors=num_processors)


def get_s390x_platform_strings(
    path: str = CPUINFO_PATH, platform: str | None = None
) -> S390XPlatformStrings:
    """Read ``path`` and attach ``platform`` when one is given."""
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            strings = parse_cpuinfo(result.line for result in StackLineReader(stream))
    except OSError:
        strings = S390XPlatformStrings()
    if platform is not None:
        strings = dataclasses.replace(strings, platform=platform)
    return strings