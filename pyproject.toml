[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "topicmatch"
version = "0.1.0"
description = "Trie-based matching of MQTT topics, NATS subjects and router paths against patterns with parameters and wildcards"
requires-python = ">=3.10"
dependencies = []
keywords = ["mqtt", "nats", "topic", "router", "trie", "wildcard", "matching"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["topicmatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
