"""
Sample image loading package.
"""

from .loader import ImageLoader, SampleImage, load_images

__all__ = [
    "ImageLoader",
    "SampleImage",
    "load_images",
]
