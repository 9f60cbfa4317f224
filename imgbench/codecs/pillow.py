"""
Pillow codec.

Decodes the source buffer with Pillow and re-encodes it in memory. HEIF
support (decoding HEIC samples and writing HEVC HEIF) comes from pillow-heif.
"""

import io
import logging
from typing import Any, Dict

import pillow_heif
from PIL import Image

from .base import BaseCodec, EncodeError, EncodeOptions, ImageFormat

logger = logging.getLogger(__name__)

pillow_heif.register_heif_opener()


# Pillow save format names
PIL_FORMATS = {
    ImageFormat.WEBP: "WEBP",
    ImageFormat.PNG: "PNG",
    ImageFormat.JPEG: "JPEG",
    ImageFormat.AVIF: "AVIF",
    ImageFormat.HEIF: "HEIF",
}

# Modes the PNG writer accepts as-is
PNG_MODES = {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}

HEIF_COMPRESSIONS = ("av1", "hevc")


class PillowCodec(BaseCodec):
    """
    Codec backed by Pillow and pillow-heif.

    Quality handling:
        - WebP, JPEG, AVIF, HEIF: passed to the encoder
        - PNG: lossless, quality is ignored

    HEIF compression:
        - "av1": AV1-coded HEIF, i.e. the AVIF brand, written by the AVIF plugin
        - "hevc" (or None): HEVC-coded HEIF written by pillow-heif
    """

    name = "pillow"
    display_name = "Pillow"

    png_compress_level: int = 6
    webp_method: int = 4
    jpeg_background: tuple = (255, 255, 255)

    def encode_bytes(self, image: bytes, fmt: ImageFormat, options: EncodeOptions) -> bytes:
        try:
            with Image.open(io.BytesIO(image)) as im:
                im.load()
                im = self._prepare(im, fmt)
                save_format, save_kwargs = self._build_save_kwargs(fmt, options)

                buffer = io.BytesIO()
                im.save(buffer, format=save_format, **save_kwargs)
        except EncodeError:
            raise
        except (OSError, ValueError, KeyError, Image.DecompressionBombError) as e:
            # UnidentifiedImageError is an OSError; missing encoders raise KeyError or OSError
            raise EncodeError(f"Failed to encode {fmt.value}: {e}") from e

        output = buffer.getvalue()
        logger.debug(f"Encoded {len(image)} bytes to {fmt.value}: {len(output)} bytes")
        return output

    def _build_save_kwargs(self, fmt: ImageFormat, options: EncodeOptions) -> tuple:
        """
        Build Pillow save arguments for a target format.

        Returns:
            Tuple of (Pillow format name, save kwargs)
        """
        kwargs: Dict[str, Any] = {}

        if fmt == ImageFormat.WEBP:
            kwargs["quality"] = int(options.quality)
            kwargs["method"] = self.webp_method

        elif fmt == ImageFormat.PNG:
            kwargs["compress_level"] = self.png_compress_level

        elif fmt == ImageFormat.JPEG:
            kwargs["quality"] = int(options.quality)

        elif fmt == ImageFormat.AVIF:
            kwargs["quality"] = int(options.quality)

        elif fmt == ImageFormat.HEIF:
            compression = (options.compression or "hevc").lower()
            if compression not in HEIF_COMPRESSIONS:
                raise EncodeError(
                    f"Unsupported HEIF compression: {options.compression}. "
                    f"Available: {', '.join(HEIF_COMPRESSIONS)}"
                )
            kwargs["quality"] = int(options.quality)
            if compression == "av1":
                return PIL_FORMATS[ImageFormat.AVIF], kwargs

        return PIL_FORMATS[fmt], kwargs

    def _prepare(self, im: Image.Image, fmt: ImageFormat) -> Image.Image:
        """Convert the decoded image to a mode the target writer accepts."""
        alpha = _has_alpha(im)

        if fmt == ImageFormat.JPEG:
            if alpha:
                return _flatten_alpha(im, self.jpeg_background)
            if im.mode not in ("RGB", "L", "CMYK"):
                return im.convert("RGB")
            return im

        if fmt == ImageFormat.PNG:
            if im.mode in PNG_MODES:
                return im
            return im.convert("RGBA" if alpha else "RGB")

        target = "RGBA" if alpha else "RGB"
        if im.mode != target:
            return im.convert(target)
        return im


def _flatten_alpha(im: Image.Image, background_rgb: tuple) -> Image.Image:
    rgba = im.convert("RGBA")
    bg = Image.new("RGBA", rgba.size, background_rgb + (255,))
    comp = Image.alpha_composite(bg, rgba)
    return comp.convert("RGB")


def _has_alpha(im: Image.Image) -> bool:
    if im.mode in ("RGBA", "LA", "PA"):
        return True
    if im.mode == "P" and "transparency" in im.info:
        return True
    return False
