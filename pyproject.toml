[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rijndael197"
version = "0.1.0"
description = "Pure-Python AES block cipher (FIPS 197) with its finite-field building blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "rijndael", "fips-197", "block-cipher", "cryptography", "galois-field"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest", "hypothesis"]

[project.scripts]
rijndael197 = "rijndael197.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rijndael197"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
