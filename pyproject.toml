[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ethscan"
version = "0.0.4"
description = "Typed records for the decoded JSON replies of the Etherscan API, plus hex, ether and timestamp helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["ethereum", "etherscan", "blockchain", "api", "parsing"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ethscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
