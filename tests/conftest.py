"""Pytest configuration and fixtures."""

import io
import random
import threading
import time

import pytest
from PIL import Image

from imgbench.codecs.base import BaseCodec, EncodeError, EncodeResult, ImageFormat
from imgbench.data.loader import SampleImage


# Output size as a percentage of the input size, per format
RATIOS = {
    ImageFormat.WEBP: 40,
    ImageFormat.PNG: 150,
    ImageFormat.JPEG: 80,
    ImageFormat.AVIF: 30,
    ImageFormat.HEIF: 35,
}


class FakeCodec(BaseCodec):
    """Deterministic codec: sizes depend only on input length and format."""

    name = "fake"
    display_name = "Fake Codec"
    ratios = RATIOS

    def __init__(self, fail_on=None, jitter=True, delays=None, fail_always=False):
        self.fail_on = fail_on  # (image bytes, ImageFormat)
        self.fail_always = fail_always
        self.jitter = jitter
        self.delays = delays or {}  # image bytes -> seconds
        self.calls = []
        self._lock = threading.Lock()
        self._in_flight = 0
        self.max_in_flight = 0

    def encode_bytes(self, image, fmt, options):
        with self._lock:
            self.calls.append((fmt, options))
            self._in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self._in_flight)
        try:
            if self.fail_always or (self.fail_on and self.fail_on == (image, fmt)):
                raise EncodeError(f"cannot encode {fmt.value}")
            if image in self.delays:
                time.sleep(self.delays[image])
            elif self.jitter:
                time.sleep(random.uniform(0, 0.005))
            return b"x" * (len(image) * self.ratios[fmt] // 100)
        finally:
            with self._lock:
                self._in_flight -= 1

    def encode(self, image, fmt, options=None):
        result = super().encode(image, fmt, options)
        # Fixed duration so repeated runs aggregate identically
        return EncodeResult(size=result.size, duration=len(image) % 7)


def _image_bytes(mode, size, fmt, color):
    im = Image.new(mode, size, color)
    for x in range(size[0]):
        pixel = (x * 4 % 256, 0, 0)
        if mode == "RGBA":
            pixel += (x * 8 % 256,)
        im.putpixel((x, x % size[1]), pixel)
    buffer = io.BytesIO()
    im.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    """An RGB PNG image."""
    return _image_bytes("RGB", (32, 24), "PNG", (10, 120, 200))


@pytest.fixture
def rgba_png_bytes():
    """An RGBA PNG image with transparent pixels."""
    return _image_bytes("RGBA", (32, 24), "PNG", (200, 30, 30, 255))


@pytest.fixture
def jpeg_bytes():
    """An RGB JPEG image."""
    return _image_bytes("RGB", (40, 30), "JPEG", (90, 90, 20))


@pytest.fixture
def sample_images():
    """Three in-memory samples of distinct sizes."""
    return [
        SampleImage(name="a.bin", content=b"a" * 1000),
        SampleImage(name="b.bin", content=b"b" * 2000),
        SampleImage(name="c.bin", content=b"c" * 3000),
    ]


@pytest.fixture
def fake_codec():
    """Deterministic codec with random completion order."""
    return FakeCodec()


@pytest.fixture
def assets_dir(tmp_path, png_bytes, jpeg_bytes, rgba_png_bytes):
    """A directory holding three sample image files."""
    (tmp_path / "image-1.jpg").write_bytes(jpeg_bytes)
    (tmp_path / "image-2.png").write_bytes(png_bytes)
    (tmp_path / "image-3.png").write_bytes(rgba_png_bytes)
    return tmp_path


@pytest.fixture
def make_codec():
    """The fake codec class, for tests that need custom behavior."""
    return FakeCodec
