[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "visionbasics"
version = "0.1.0"
description = "Small, readable image-processing routines on NumPy arrays: BMP parsing, pixel access, interpolation, convolution, morphology, masking and HSV colour segmentation."
requires-python = ">=3.10"
keywords = [
    "image-processing",
    "computer-vision",
    "bmp",
    "interpolation",
    "convolution",
    "morphology",
    "hsv",
    "numpy",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Education",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
visionbasics-bmp = "visionbasics.bmp:main"
visionbasics-interpolate = "visionbasics.interpolation:main"
visionbasics-morph = "visionbasics.morphology:main"
visionbasics-mask = "visionbasics.masking:main"
visionbasics-convolve = "visionbasics.convolution:main"

[tool.hatch.build.targets.wheel]
packages = ["visionbasics"]

[tool.pytest.ini_options]
addopts = "-ra"
