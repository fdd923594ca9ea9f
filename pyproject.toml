[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "faucet"
version = "0.1.0"
description = "A client that renders server-driven layouts received over a web socket as HTML"
requires-python = ">=3.10"
keywords = ["websocket", "layout", "server-driven-ui", "html", "markdown"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Framework :: AsyncIO",
]
dependencies = [
    "websockets",
    "markdown-it-py",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
faucet = "faucet.app:main"

[tool.hatch.build.targets.wheel]
packages = ["faucet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
