"""Resampling, hue isolation and DCT/DWT compression for raw planar RGB images."""

__version__ = "0.1.0"