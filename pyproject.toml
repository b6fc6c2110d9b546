[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysstat"
version = "0.1.0"
description = "Read-only Linux system statistics: memory, power supplies, batteries, backlights and users."
requires-python = ">=3.10"
keywords = ["linux", "sysfs", "procfs", "meminfo", "battery", "backlight", "monitoring"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sysstat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
