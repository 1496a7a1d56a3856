[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "backrooms"
version = "0.1.0"
description = "A first-person raycasting exploration game set in endless yellow rooms."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "raycasting", "raycaster", "first-person", "backrooms", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
backrooms = "backrooms.app:main"

[tool.hatch.build.targets.wheel]
packages = ["backrooms"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
