[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopapi"
version = "0.1.0"
description = "A small JSON HTTP API for a shop catalogue of products and categories."
requires-python = ">=3.10"
keywords = ["shop", "catalogue", "products", "categories", "rest", "api", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask>=2.2",
    "werkzeug>=2.2",
    "sqlalchemy>=2.0",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
shopapi = "shopapi.app:main"
shopapi-fixtures = "shopapi.fixtures:main"

[tool.hatch.build.targets.wheel]
packages = ["shopapi"]

[tool.hatch.build.targets.sdist]
include = ["shopapi", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
target-version = "py310"
line-length = 100

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
