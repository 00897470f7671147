"""
Shared fixtures: small solid-color images written to temporary directories
"""
import pytest
from PIL import Image


def write_image(path, width, height, color=(255, 0, 0, 255), fmt=None):
    """Write a solid-color image; mode follows the format's needs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    img = Image.new('RGBA', (width, height), color)
    if fmt in ('JPEG', 'BMP') or path.suffix in ('.jpg', '.jpeg', '.bmp'):
        img = img.convert('RGB')
    img.save(path, format=fmt)
    return path


@pytest.fixture
def make_image():
    """The write_image helper, for tests that build their own files."""
    return write_image


@pytest.fixture
def sprite_dir(tmp_path):
    """
    Directory with three sprites matching the packer's worked example.

    a.png 50x100, b.png 40x80, c.png 60x100 (collected in that order).
    """
    root = tmp_path / "sprites"
    write_image(root / "a.png", 50, 100, (255, 0, 0, 255))
    write_image(root / "b.png", 40, 80, (0, 255, 0, 255))
    write_image(root / "c.png", 60, 100, (0, 0, 255, 255))
    return root
