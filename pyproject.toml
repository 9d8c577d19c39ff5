[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pbxadd"
version = "2.0.0"
description = "Add files and directories to an Xcode project.pbxproj file from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["xcode", "pbxproj", "xcodeproj", "ios", "macos", "build"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pbxadd = "pbxadd.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pbxadd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
