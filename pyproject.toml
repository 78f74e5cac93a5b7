[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "payroll-compliance"
version = "0.1.0"
description = "In-memory payroll compliance: jurisdiction rules, payroll validation, regulatory reports, metrics and an audit trail."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "payroll",
    "compliance",
    "audit",
    "regulatory-reporting",
    "jurisdiction",
    "minimum-wage",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["payroll_compliance"]

[tool.hatch.build.targets.sdist]
include = ["payroll_compliance", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
