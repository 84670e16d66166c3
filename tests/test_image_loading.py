import numpy as np
import pytest
from PIL import Image

from namegrid.image import load_image_oriented


def test_load_image_oriented_applies_exif_rotation(tmp_path):
    path = tmp_path / "portrait.jpg"
    img = Image.new("RGB", (40, 20), (255, 255, 255))
    exif = Image.Exif()
    exif[0x0112] = 6  # rotate 90 degrees clockwise
    img.save(path, exif=exif)
    out = load_image_oriented(str(path))
    assert out.shape == (40, 20, 3)
    assert out.dtype == np.uint8


def test_load_image_oriented_without_exif(tmp_path):
    path = tmp_path / "plain.png"
    Image.new("RGB", (30, 10), (0, 0, 255)).save(path)
    out = load_image_oriented(str(path))
    assert out.shape == (10, 30, 3)
    # RGB blue comes back as BGR
    assert tuple(out[0, 0]) == (255, 0, 0)


def test_load_image_oriented_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image_oriented(str(tmp_path / "nope.jpg"))


def test_load_image_oriented_not_an_image(tmp_path):
    path = tmp_path / "notes.jpg"
    path.write_text("not an image", encoding="utf-8")
    with pytest.raises(RuntimeError):
        load_image_oriented(str(path))
