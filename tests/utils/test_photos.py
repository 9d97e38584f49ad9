"""Tests for photo preparation."""

import io
import os

import pytest
from PIL import Image

from window_measure.utils.photos import PhotoProcessingError, prepare_photo, scaled_size


def noise_png(width, height, mode="RGB"):
    channels = len(mode)
    image = Image.frombytes(mode, (width, height), os.urandom(width * height * channels))
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


class TestScaledSize:
    def test_landscape(self):
        assert scaled_size(4000, 3000, 1920) == (1920, 1440)

    def test_portrait(self):
        assert scaled_size(1000, 3000, 1920) == (640, 1920)

    def test_small_unchanged(self):
        assert scaled_size(800, 600, 1920) == (800, 600)


class TestPreparePhoto:
    def test_large_photo_downscaled_to_jpeg(self):
        data = noise_png(2400, 1600)
        photo = prepare_photo(data, "site.png", "image/png")

        assert photo.compressed
        assert photo.file_name == "site.jpg"
        assert photo.content_type == "image/jpeg"
        assert (photo.width, photo.height) == (1920, 1280)
        decoded = Image.open(io.BytesIO(photo.data))
        assert decoded.format == "JPEG"
        assert decoded.size == (1920, 1280)

    def test_alpha_flattened(self):
        data = noise_png(1200, 1000, mode="RGBA")
        photo = prepare_photo(data, "sill.png", "image/png")
        decoded = Image.open(io.BytesIO(photo.data))
        assert decoded.mode == "RGB"
        assert decoded.size == (1200, 1000)

    def test_small_photo_untouched(self):
        data = noise_png(40, 30)
        photo = prepare_photo(data, "tiny.png", "image/png")
        assert not photo.compressed
        assert photo.data == data
        assert photo.file_name == "tiny.png"

    def test_non_image_untouched(self):
        data = b"%PDF" + b"0" * (2 * 1024 * 1024)
        photo = prepare_photo(data, "quote.pdf", "application/pdf")
        assert photo.data is data
        assert photo.content_type == "application/pdf"

    def test_corrupt_image(self):
        with pytest.raises(PhotoProcessingError):
            prepare_photo(b"\x00" * (2 * 1024 * 1024), "broken.jpg", "image/jpeg")

    def test_unnamed_image_gets_default_name(self):
        data = noise_png(2400, 1600)
        photo = prepare_photo(data, "", "image/png")
        assert photo.compressed
        assert photo.file_name == "photo.jpg"

    def test_name_without_extension(self):
        photo = prepare_photo(noise_png(2400, 1600), "IMG_2041", "image/png")
        assert photo.file_name == "IMG_2041.jpg"
