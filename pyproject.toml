[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vinechess"
version = "0.1.0"
description = "Bitboard chess move generation, perft node counting and a small UCI command loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "uci", "bitboard", "perft", "move-generation"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vinechess = "vinechess.uci:main"

[tool.hatch.build.targets.wheel]
packages = ["vinechess"]

[tool.pytest.ini_options]
addopts = "-ra"
