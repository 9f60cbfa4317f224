"""Tests for sample image loading."""

import pytest

from imgbench.data.loader import ImageLoader, SampleImage, load_images


class TestLoadImages:
    """Tests for load_images and ImageLoader."""

    def test_loads_in_input_order(self, assets_dir):
        """Test images keep the order of the path list."""
        names = ["image-3.png", "image-1.jpg", "image-2.png"]

        images = load_images([assets_dir / name for name in names])

        assert [img.name for img in images] == names
        for img in images:
            assert img.content == (assets_dir / img.name).read_bytes()

    def test_size(self):
        """Test size is the byte length."""
        assert SampleImage(name="x", content=b"12345").size == 5

    def test_missing_file(self, assets_dir):
        """Test an unreadable path raises OSError."""
        with pytest.raises(OSError):
            load_images([assets_dir / "image-1.jpg", assets_dir / "missing.heic"])

    def test_directory_is_unreadable(self, assets_dir):
        """Test a directory path raises OSError."""
        with pytest.raises(OSError):
            load_images([assets_dir])

    def test_image_loader(self, assets_dir):
        """Test loading names relative to a base directory."""
        images = ImageLoader(assets_dir).load(["image-1.jpg", "image-2.png"])

        assert len(images) == 2
        assert images[0].name == "image-1.jpg"

    def test_accepts_strings(self, assets_dir):
        """Test string paths are accepted."""
        images = load_images([str(assets_dir / "image-1.jpg")])

        assert images[0].size > 0
