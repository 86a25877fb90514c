[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterlab"
version = "0.1.0"
description = "Resampling, hue isolation and DCT/DWT compression experiments on raw planar RGB images"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = [
    "image-processing",
    "resampling",
    "gaussian-blur",
    "bilinear",
    "hsv",
    "dct",
    "dwt",
    "haar",
    "compression",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[project.scripts]
rasterlab-resample = "rasterlab.cli:resample_main"
rasterlab-hue = "rasterlab.cli:hue_main"
rasterlab-compress = "rasterlab.cli:compression_main"

[tool.hatch.build.targets.wheel]
packages = ["rasterlab"]

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
