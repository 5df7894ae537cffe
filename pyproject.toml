[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bazuka"
version = "0.1.0"
description = "Core primitives of a zero-knowledge blockchain node: money amounts, hashing, Merkle trees, Ed25519 keys, JubJub curve points and key-value storage."
requires-python = ">=3.10"
dependencies = [
    "pynacl",
]
keywords = ["blockchain", "merkle", "ed25519", "jubjub", "zero-knowledge", "key-value store"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bazuka"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
