[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schnorr-sponge"
version = "0.1.0"
description = "Schnorr and MuSig signatures over BN254 with a Poseidon Fiat-Shamir transcript"
requires-python = ">=3.10"
dependencies = []
keywords = ["schnorr", "musig", "poseidon", "bn254", "signature", "fiat-shamir", "zero-knowledge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
schnorr-sponge = "schnorr_sponge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["schnorr_sponge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
