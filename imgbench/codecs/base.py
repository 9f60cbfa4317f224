"""
Base codec interface for image encoders.
All codecs must implement this interface.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class ImageFormat(Enum):
    """Target formats, in report order."""
    WEBP = "webp"
    PNG = "png"
    JPEG = "jpeg"
    AVIF = "avif"
    HEIF = "heif"


@dataclass(frozen=True)
class EncodeOptions:
    """
    Options passed to a single encode call.

    Attributes:
        quality: Encoder quality (1-100)
        compression: Compression algorithm for container formats (HEIF only)
    """
    quality: int = 100
    compression: Optional[str] = None


@dataclass(frozen=True)
class EncodeResult:
    """Size (bytes) and duration (ms) of a single encode."""
    size: int
    duration: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"size": self.size, "duration": self.duration}


def default_options(fmt: ImageFormat) -> EncodeOptions:
    """Maximum quality for every format; HEIF is AV1-compressed."""
    if fmt == ImageFormat.HEIF:
        return EncodeOptions(quality=100, compression="av1")
    return EncodeOptions(quality=100)


class BaseCodec(ABC):
    """
    Abstract base class for image codecs.

    Codecs wrap an external image library that turns an encoded image
    buffer into a buffer of another format. The benchmark only ever calls
    ``encode``; implementations provide ``encode_bytes``.

    Example:
        class MyCodec(BaseCodec):
            name = "mycodec"

            def encode_bytes(self, image, fmt, options):
                # Implementation
                pass
    """

    # Codec identification
    name: str = "base"
    display_name: str = "Base Codec"

    # Formats this codec can write
    supported_formats: List[ImageFormat] = list(ImageFormat)

    @abstractmethod
    def encode_bytes(self, image: bytes, fmt: ImageFormat, options: EncodeOptions) -> bytes:
        """
        Re-encode an image buffer.

        Args:
            image: Encoded source image
            fmt: Target format
            options: Encoder options

        Returns:
            Encoded output buffer

        Raises:
            EncodeError: If the codec cannot produce output
        """
        pass

    def encode(
        self,
        image: bytes,
        fmt: ImageFormat,
        options: Optional[EncodeOptions] = None,
    ) -> EncodeResult:
        """
        Encode an image and measure the output.

        Args:
            image: Encoded source image
            fmt: Target format
            options: Encoder options (default: ``default_options(fmt)``)

        Returns:
            EncodeResult with output size and elapsed whole milliseconds
        """
        if not self.supports(fmt):
            raise EncodeError(f"{self.name} cannot encode {fmt.value}")

        if options is None:
            options = default_options(fmt)

        start = time.perf_counter()
        output = self.encode_bytes(image, fmt, options)
        duration = int((time.perf_counter() - start) * 1000)

        return EncodeResult(size=len(output), duration=duration)

    def supports(self, fmt: ImageFormat) -> bool:
        """Check whether this codec can write the given format."""
        return fmt in self.supported_formats

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name={self.name})>"


class CodecError(Exception):
    """Base exception for codec errors."""
    pass


class ConfigurationError(CodecError):
    """Raised when codec configuration is invalid."""
    pass


class EncodeError(CodecError):
    """Raised when a codec fails to encode an image."""
    pass
