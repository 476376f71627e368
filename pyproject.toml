[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remorahal"
version = "0.1.0"
description = "Machine-control building blocks: PID loops, encoder capture, pendant packets, board detection and RP1 GPIO register logic"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cnc",
    "motion-control",
    "pid",
    "encoder",
    "mpg",
    "pendant",
    "gpio",
    "raspberry-pi",
    "rp1",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["remorahal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
