"""
Configuration management for Image Format Benchmark.
Loads settings from environment variables and .env file.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional
from dotenv import load_dotenv

from .codecs.base import EncodeOptions, ImageFormat

# Load .env file from project root
PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(PROJECT_ROOT / ".env")


DEFAULT_SAMPLE_IMAGES = [
    "image-1.jpg",
    "image-2.webp",
    "image-3.png",
    "image-4.avif",
    "image-5.jpeg",
    "image-6.heic",
]


def _split_list(value: Optional[str], default: List[str]) -> List[str]:
    """Parse a comma-separated environment value."""
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Central configuration management."""

    # ==========================================================================
    # Sample Images
    # ==========================================================================
    ASSETS_DIR: Path = PROJECT_ROOT / os.getenv("ASSETS_DIR", "assets")
    SAMPLE_IMAGES: List[str] = _split_list(os.getenv("SAMPLE_IMAGES"), DEFAULT_SAMPLE_IMAGES)

    # ==========================================================================
    # Benchmark Settings
    # ==========================================================================
    CODEC: str = os.getenv("CODEC", "pillow")
    ENCODE_QUALITY: int = int(os.getenv("ENCODE_QUALITY", "100"))
    HEIF_COMPRESSION: str = os.getenv("HEIF_COMPRESSION", "av1")
    MAX_CONCURRENCY: int = int(os.getenv("MAX_CONCURRENCY", "0"))  # 0 = unbounded

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    @classmethod
    def get_encode_options(cls) -> Dict[ImageFormat, EncodeOptions]:
        """
        Get encode options for every target format.

        All formats are encoded at the configured quality; HEIF additionally
        requests the configured compression algorithm.
        """
        options = {fmt: EncodeOptions(quality=cls.ENCODE_QUALITY) for fmt in ImageFormat}
        options[ImageFormat.HEIF] = EncodeOptions(
            quality=cls.ENCODE_QUALITY,
            compression=cls.HEIF_COMPRESSION,
        )
        return options
