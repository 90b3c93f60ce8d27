[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nippon"
version = "0.1.0"
description = "Decrypt and unpack game data archives, verify installed files and load level scenes from them"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "game",
    "archive",
    "unpacker",
    "blowfish",
    "crc32",
    "level",
    "model",
    "modding",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: System :: Archiving",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nippon-packer = "nippon.packer:main"

[tool.hatch.build.targets.wheel]
packages = ["nippon"]

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
