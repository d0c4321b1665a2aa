[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bigarith"
version = "0.1.0"
description = "Big-integer helpers for cryptography: modular arithmetic, primality testing, sampling and encoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "modular arithmetic", "primality", "miller-rabin", "cryptography"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bigarith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
