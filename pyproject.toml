[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpufeat"
version = "0.1.0"
description = "Parse CPU feature reports for x86, RISC-V, s390x, ARM and LoongArch processors"
requires-python = ">=3.10"
dependencies = []
keywords = ["cpu", "cpuinfo", "features", "hardware", "x86", "riscv", "s390x", "sse"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cpufeat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
