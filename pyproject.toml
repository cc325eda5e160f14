[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "friendcore"
version = "0.1.0"
description = "Core building blocks for a social platform backend: settings, records, users, password hashing, JWT authentication and logging."
requires-python = ">=3.10"
keywords = ["jwt", "bcrypt", "starlette", "sqlalchemy", "middleware", "authentication", "dotenv"]
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
    "Framework :: AsyncIO",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "python-dotenv>=1.0",
    "bcrypt>=4.0",
    "pyjwt>=2.6",
    "sqlalchemy>=2.0",
    "starlette>=0.27",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "httpx>=0.24",
]

[tool.hatch.build.targets.wheel]
packages = ["friendcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
