[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gammakit"
version = "0.2.0"
description = "Constant-product pool math, instruction and event-log decoding, and a decoding command line for the Gamma pool program"
requires-python = ">=3.10"
keywords = ["amm", "constant-product", "liquidity", "swap", "defi", "decoder", "base58"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gamma-cli = "gammakit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gammakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
