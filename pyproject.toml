[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oraquadra"
version = "0.1.0"
description = "LED sweep paths and a compact QR code generator for a 16x16 word clock"
requires-python = ">=3.10"
dependencies = []
keywords = ["word clock", "qr code", "reed-solomon", "led matrix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oraquadra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
