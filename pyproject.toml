[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sonarpanel"
version = "0.1.0"
description = "Bitmap fonts, a packed 1-bit framebuffer and an ultrasonic distance readout for small monochrome panels"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitmap font", "framebuffer", "monochrome display", "ultrasonic", "distance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sonarpanel = "sonarpanel.monitor:main"

[tool.hatch.build.targets.wheel]
packages = ["sonarpanel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
