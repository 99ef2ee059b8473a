"""Blur and swiss-cheese filters for 24-bit BMP images, with BMP reading and writing."""

__version__ = "1.1.0"
__all__ = ["bmp", "filters", "pixels"]