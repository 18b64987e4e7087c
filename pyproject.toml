[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "urlinsight"
version = "0.1.0"
description = "Data models, Flask handlers and authentication middleware for a URL analysis service"
requires-python = ">=3.10"
keywords = ["url", "crawler", "analysis", "flask", "links", "html", "jwt"]
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
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["urlinsight"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
