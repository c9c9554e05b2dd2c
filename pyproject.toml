[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ipcdemos"
version = "0.1.0"
description = "Small inter-process communication demos: an in-process pub/sub broker, a FIFO echo server and client, and a two-client pipe relay."
requires-python = ">=3.10"
keywords = ["ipc", "fifo", "named-pipe", "pubsub", "publish-subscribe", "relay"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pubsub-demo = "ipcdemos.pubsub:main"
fifo-server = "ipcdemos.fifo:server_main"
fifo-client = "ipcdemos.fifo:client_main"
relay-server = "ipcdemos.relay:server_main"
relay-client = "ipcdemos.relay:client_main"

[tool.hatch.build.targets.wheel]
packages = ["ipcdemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
