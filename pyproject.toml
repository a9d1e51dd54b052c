[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mondrian"
version = "0.1.0"
description = "Tiling layout core for a compositor: split trees, neighbour graphs, animations, key bindings and pointer rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["tiling", "window-manager", "layout", "compositor", "wayland"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mondrian = "mondrian.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mondrian"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
