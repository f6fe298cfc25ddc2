[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "restview"
version = "0.1.0"
description = "Models for a REST response viewer: icon-font code points, an icon factory, a key/value table and an XML tree model"
requires-python = ">=3.10"
dependencies = []
keywords = ["rest", "http", "xml", "tree-model", "font-awesome", "icons"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["restview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
