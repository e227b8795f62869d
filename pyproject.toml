[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlprogress"
version = "0.1.0"
description = "Numbered SQL querying lessons that run each query through an ORM, as SQL text and as a data frame, and check that they agree"
requires-python = ">=3.10"
keywords = ["sql", "postgresql", "sqlalchemy", "pandas", "learning", "queries"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Education",
]
dependencies = [
    "sqlalchemy>=2.0",
    "pandas>=2.0",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
sqlprogress = "sqlprogress.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sqlprogress"]

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
