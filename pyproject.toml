[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pedometer"
version = "0.1.0"
description = "Step-counter logic: IMU filtering, peak detection, debounced inputs, a cooperative scheduler and an SSD1306 display model"
requires-python = ">=3.10"
dependencies = []
keywords = ["pedometer", "step counter", "imu", "ssd1306", "framebuffer", "debounce", "scheduler"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pedometer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
