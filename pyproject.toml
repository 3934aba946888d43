[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tsrand"
version = "1.0.0"
description = "Secure random integers, ranges, strings and UUIDs"
requires-python = ">=3.10"
dependencies = []
keywords = ["random", "secure", "token", "password", "uuid", "string"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tsrand-demo = "tsrand.demo:main"
tsrand-benchmark = "tsrand.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["tsrand"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
