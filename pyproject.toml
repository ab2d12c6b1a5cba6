[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mlz6502"
version = "0.1.0"
description = "A small, extensible MOS 6502 CPU emulator"
requires-python = ">=3.10"
dependencies = []
keywords = ["6502", "emulator", "cpu", "mos6502", "retro"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mlz6502 = "mlz6502.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mlz6502"]

[tool.pytest.ini_options]
addopts = "-ra"
