"""
Loader for benchmark sample images.
Reads each sample into memory as raw bytes.
"""

import logging
from pathlib import Path
from dataclasses import dataclass
from typing import List, Sequence, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleImage:
    """
    A sample image held in memory for the whole run.

    Attributes:
        name: File name the image was loaded from
        content: Raw encoded bytes, shared read-only by every encode
    """
    name: str
    content: bytes

    @property
    def size(self) -> int:
        """Size of the original encoded image in bytes."""
        return len(self.content)


def load_images(paths: Sequence[Union[str, Path]]) -> List[SampleImage]:
    """
    Read every path as raw bytes, preserving input order.

    Args:
        paths: Ordered image file paths

    Returns:
        List of SampleImage in the same order

    Raises:
        OSError: If any path cannot be read
    """
    images: List[SampleImage] = []

    for path in paths:
        path = Path(path)
        try:
            content = path.read_bytes()
        except OSError as e:
            logger.error(f"Cannot read sample image {path}: {e}")
            raise

        images.append(SampleImage(name=path.name, content=content))
        logger.debug(f"Loaded {path.name}: {len(content)} bytes")

    logger.info(f"Loaded {len(images)} sample images")
    return images


class ImageLoader:
    """
    Load sample images from a directory.

    Example:
        loader = ImageLoader("assets")
        images = loader.load(["image-1.jpg", "image-2.webp"])
    """

    def __init__(self, base_dir: Union[str, Path]):
        """
        Initialize image loader.

        Args:
            base_dir: Directory containing the sample images
        """
        self.base_dir = Path(base_dir)

    def load(self, names: Sequence[str]) -> List[SampleImage]:
        """Load the named images from the base directory, in order."""
        return load_images([self.base_dir / name for name in names])
