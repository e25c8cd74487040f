[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "randomx"
version = "0.1.0"
description = "Building blocks of the RandomX proof-of-work function: AES generators, AES hash, Blake2b generator and VM setup"
requires-python = ">=3.10"
dependencies = ["cryptography"]
keywords = ["randomx", "proof-of-work", "aes", "blake2b", "hash"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["randomx"]

[tool.pytest.ini_options]
addopts = "-ra"
