"""Code-like block skeletons generated from raster images."""

__version__ = "0.1.0"
