"""Parse CPU feature reports from operating-system text into Python objects."""

__version__ = "0.1.0"
__all__ = ["arm", "line_reader", "loongarch", "riscv", "s390x", "string_view", "x86"]