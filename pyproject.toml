[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blogapi"
version = "0.1.0"
description = "A small JSON blog API with posts and comments, persisted to a JSON file"
requires-python = ">=3.10"
keywords = ["blog", "rest", "api", "json", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: News/Diary",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blogapi = "blogapi.server:main"

[tool.hatch.build.targets.wheel]
packages = ["blogapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
