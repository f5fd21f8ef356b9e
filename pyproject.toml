[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "achainkit"
version = "0.1.0"
description = "Wallet-side helpers for an Achain-style blockchain: JSON-RPC request text, reply routing, transaction parsing, settings and account checks."
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "wallet", "json-rpc", "achain", "tokens"]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["achainkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
