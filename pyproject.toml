[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "packwiz"
version = "0.1.0"
description = "Version ordering, fingerprints and file selection rules for Minecraft modpacks built from CurseForge and Modrinth"
requires-python = ">=3.10"
keywords = ["minecraft", "modpack", "curseforge", "modrinth", "flexver", "murmur2"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["packwiz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
