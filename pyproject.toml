[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lessonkit"
version = "0.1.0"
description = "Small teaching exercises: Roman numerals, recursion, a decimal-to-binary float layout, bit flipping, moon tables and least-perimeter triangles"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "roman-numerals", "recursion", "bit-reversal", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lessonkit-roman = "lessonkit.roman:main"
lessonkit-recursion = "lessonkit.recursion:main"
lessonkit-float-binary = "lessonkit.float_binary:main"
lessonkit-bitflip = "lessonkit.bitflip:main"
lessonkit-moon = "lessonkit.moon:main"
lessonkit-min-perimeter = "lessonkit.min_perimeter:main"

[tool.hatch.build.targets.wheel]
packages = ["lessonkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
