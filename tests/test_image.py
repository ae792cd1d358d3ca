"""Tests for the pixel buffer, gamma conversion and the image encoders."""

import numpy as np
import pytest
from PIL import Image as PILImage

from core.vector import Vector3
from renderer.image import Image
from renderer.ppm import encode_ppm, write_ppm
from renderer.tone_mapping import color_to_rgb8, gamma_correct_buffer, linear_to_gamma


class TestToneMapping:
    """Tests for linear to display-space conversion."""

    def test_linear_to_gamma(self):
        assert linear_to_gamma(0.25) == 0.5
        assert linear_to_gamma(0.0) == 0.0
        assert linear_to_gamma(-0.3) == 0.0

    def test_color_to_rgb8_clamps(self):
        assert color_to_rgb8(Vector3(0.0, 0.25, 1.0)) == (0, 128, 255)
        assert color_to_rgb8(Vector3(4.0, -1.0, 0.999 ** 2)) == (255, 0, 255)

    def test_buffer_matches_single_color_conversion(self):
        samples = np.random.default_rng(0).uniform(-0.2, 1.5, size=(4, 5, 3))
        scale = 0.5
        rgb = gamma_correct_buffer(samples * 2, scale)

        assert rgb.dtype == np.uint8
        assert rgb.shape == (4, 5, 3)
        for y in range(4):
            for x in range(5):
                expected = color_to_rgb8(Vector3(*samples[y, x]))
                assert tuple(int(c) for c in rgb[y, x]) == expected


class TestImage:
    """Tests for the Image pixel sink."""

    def test_starts_black(self):
        image = Image(3, 2)
        assert image.pixels.shape == (2, 3, 3)
        assert not image.pixels.any()

    def test_set_and_get_pixel(self):
        image = Image(3, 2)
        image.set_pixel(2, 1, (10, 20, 30))
        assert image.get_pixel(2, 1) == (10, 20, 30)
        # Rows are indexed by y first
        assert tuple(image.pixels[1, 2]) == (10, 20, 30)

    @pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (-1, 0), (0, -1)])
    def test_out_of_bounds_rejected(self, x, y):
        image = Image(3, 2)
        with pytest.raises(IndexError):
            image.set_pixel(x, y, (1, 2, 3))
        with pytest.raises(IndexError):
            image.get_pixel(x, y)

    def test_fill_rect(self):
        image = Image(4, 4)
        image.fill_rect(1, 1, 2, 3, (255, 0, 0))
        assert image.get_pixel(1, 1) == (255, 0, 0)
        assert image.get_pixel(2, 3) == (255, 0, 0)
        assert image.get_pixel(0, 0) == (0, 0, 0)
        assert image.get_pixel(3, 1) == (0, 0, 0)

    def test_fill_rect_out_of_bounds(self):
        with pytest.raises(IndexError):
            Image(4, 4).fill_rect(3, 3, 2, 1, (1, 1, 1))

    def test_invalid_dimensions(self):
        with pytest.raises(ValueError):
            Image(0, 4)


class TestEncoders:
    """Tests for PPM and Pillow output."""

    def test_encode_ppm(self):
        image = Image(2, 2)
        image.set_pixel(0, 0, (255, 0, 0))
        image.set_pixel(1, 1, (1, 2, 3))
        assert encode_ppm(image) == "P3\n2 2\n255\n255 0 0 0 0 0 \n0 0 0 1 2 3 \n"

    def test_write_ppm(self, tmp_path):
        image = Image(1, 1)
        image.set_pixel(0, 0, (7, 8, 9))
        path = tmp_path / "out.ppm"
        write_ppm(image, path)
        assert path.read_text() == "P3\n1 1\n255\n7 8 9 \n"

    def test_save_routes_ppm_extension(self, tmp_path):
        image = Image(2, 1)
        path = tmp_path / "frame.PPM"
        image.save(path)
        assert path.read_text().startswith("P3\n2 1\n255\n")

    def test_save_png_round_trip(self, tmp_path):
        image = Image(3, 2)
        image.fill_rect(0, 0, 3, 1, (12, 34, 56))
        path = tmp_path / "frame.png"
        image.save(path)
        with PILImage.open(path) as loaded:
            assert loaded.size == (3, 2)
            np.testing.assert_array_equal(np.asarray(loaded.convert("RGB")), image.pixels)
