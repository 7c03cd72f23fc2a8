[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dssms"
version = "0.1.0"
description = "Sanitizable signatures with multiple sanitizers over the BLS12-381 curve, in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "sanitizable-signature",
    "chameleon-hash",
    "bls12-381",
    "pairing",
    "elliptic-curve",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
dssms = "dssms.dss:main"

[tool.hatch.build.targets.wheel]
packages = ["dssms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
