"""
Image codecs package.
Each codec implements the BaseCodec interface.
"""

from .base import (
    BaseCodec,
    CodecError,
    ConfigurationError,
    EncodeError,
    EncodeOptions,
    EncodeResult,
    ImageFormat,
    default_options,
)
from .pillow import PillowCodec

# Registry of available codecs
CODECS = {
    "pillow": PillowCodec,
}


def get_codec(name: str) -> BaseCodec:
    """
    Get a codec instance by name.

    Args:
        name: Codec name (e.g., 'pillow')

    Returns:
        Codec instance

    Raises:
        ConfigurationError: If codec is not found
    """
    codec_class = CODECS.get(name.lower())
    if not codec_class:
        available = ", ".join(list_codecs())
        raise ConfigurationError(f"Unknown codec: {name}. Available: {available}")

    return codec_class()


def list_codecs() -> list:
    """List all available codec names."""
    return list(CODECS.keys())


__all__ = [
    "BaseCodec",
    "CodecError",
    "ConfigurationError",
    "EncodeError",
    "EncodeOptions",
    "EncodeResult",
    "ImageFormat",
    "default_options",
    "PillowCodec",
    "get_codec",
    "list_codecs",
    "CODECS",
]
