[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reqopts"
version = "1.11.1"
description = "Request option types for an HTTP client: parameters, payloads, cookies, authentication, byte ranges, error codes, cancellable future wrappers and interceptor base classes."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "requests", "cookies", "url-encoding", "interceptor", "future", "cancellation"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reqopts"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
