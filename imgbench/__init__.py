"""
Image Format Benchmark.

Re-encodes sample images into WebP, PNG, JPEG, AVIF and HEIF and reports
output size and encode time against the originals.
"""

__version__ = "1.0.0"
