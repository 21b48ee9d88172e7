[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tailtray"
version = "0.1.0"
description = "Helpers for a local Tailscale client: status parsing, display names, DNS and route checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["tailscale", "vpn", "status", "exit-node", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tailtray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
