import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "raster"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from tinydraw import BackgroundKind, ImageRGB8, InvalidByteLength, InvalidColor, InvalidCoordinate, OutOfBounds


class ImageStoreTests(unittest.TestCase):
    def test_new_image_is_filled_with_background(self):
        img = ImageRGB8(3, 2, (10, 20, 30))
        self.assertEqual(img.to_bytes(), bytes([10, 20, 30] * 6))
        self.assertIs(img.background.kind, BackgroundKind.SOLID)

    def test_set_then_get_single_pixel(self):
        img = ImageRGB8(4, 4, [0, 0, 0])
        img.set_pixel(0, 0, [255, 0, 0])
        self.assertEqual(img.get_pixel(0, 0), (255, 0, 0))
        others = [img.get_pixel(x, y) for x in range(4) for y in range(4) if (x, y) != (0, 0)]
        self.assertTrue(all(p == (0, 0, 0) for p in others))

    def test_origin_is_bottom_left(self):
        img = ImageRGB8(2, 2, (0, 0, 0))
        img.set_pixel(0, 0, (1, 2, 3))
        # bottom-left pixel is the first pixel of the last stored row
        self.assertEqual(img.to_bytes()[6:9], bytes([1, 2, 3]))
        self.assertEqual(img.index(0, 1), 0)
        self.assertEqual(img.index(1, 0), 3)

    def test_out_of_bounds_access(self):
        img = ImageRGB8(3, 3)
        before = img.to_bytes()
        for x, y in ((3, 0), (0, 3), (-1, 0), (0, -1)):
            with self.assertRaises(OutOfBounds):
                img.get_pixel(x, y)
            with self.assertRaises(OutOfBounds):
                img.set_pixel(x, y, (9, 9, 9))
        self.assertEqual(img.to_bytes(), before)

    def test_non_integer_coordinates_rejected(self):
        img = ImageRGB8(3, 3)
        with self.assertRaises(InvalidCoordinate):
            img.get_pixel(1.5, 0)
        with self.assertRaises(InvalidCoordinate):
            img.set_pixel(0, True, (1, 1, 1))
        with self.assertRaises(InvalidCoordinate):
            img.draw_line(0, 0, 2.0, 2, (1, 1, 1))
        self.assertEqual(img.to_bytes(), bytes(27))

    def test_numpy_integer_coordinates_accepted(self):
        img = ImageRGB8(3, 3)
        img.set_pixel(np.int64(2), np.uint8(1), (4, 5, 6))
        self.assertEqual(img.get_pixel(2, 1), (4, 5, 6))

    def test_out_of_bounds_is_an_index_error(self):
        img = ImageRGB8(1, 1)
        with self.assertRaises(IndexError) as ctx:
            img.get_pixel(1, 0)
        self.assertEqual((ctx.exception.width, ctx.exception.height), (1, 1))

    def test_numpy_color_accepted(self):
        img = ImageRGB8(1, 1)
        img.set_pixel(0, 0, np.array([7, 8, 9], dtype=np.uint8))
        self.assertEqual(img.get_pixel(0, 0), (7, 8, 9))

    def test_invalid_color_rejected(self):
        img = ImageRGB8(2, 2)
        for bad in ((256, 0, 0), (0, 0), (-1, 0, 0), "red", (1.9, 0, 0), (True, 0, 0), None):
            with self.assertRaises(InvalidColor):
                img.set_pixel(0, 0, bad)

    def test_from_bytes_then_to_bytes(self):
        img = ImageRGB8.from_bytes(2, 1, bytes([1, 2, 3, 4, 5, 6]))
        self.assertEqual(img.to_bytes(), bytes([1, 2, 3, 4, 5, 6]))
        self.assertIs(img.background.kind, BackgroundKind.SNAPSHOT)

    def test_from_bytes_wrong_length(self):
        with self.assertRaises(InvalidByteLength):
            ImageRGB8.from_bytes(2, 2, bytes(11))
        with self.assertRaises(ValueError):
            ImageRGB8.from_bytes(1, 1, b"")

    def test_round_trip_after_drawing(self):
        img = ImageRGB8(5, 4, (7, 7, 7))
        img.draw_line(0, 0, 4, 3, (200, 100, 50))
        copy = ImageRGB8.from_bytes(img.width, img.height, img.to_bytes())
        self.assertEqual(copy.to_bytes(), img.to_bytes())

    def test_clear_restores_solid_background(self):
        img = ImageRGB8(6, 6, (1, 2, 3))
        original = img.to_bytes()
        img.draw_rectangle_filled(0, 0, 5, 5, (90, 90, 90))
        img.draw_line(0, 5, 5, 1, (255, 255, 255))
        img.clear()
        self.assertEqual(img.to_bytes(), original)

    def test_clear_restores_snapshot(self):
        data = bytes(range(27))
        img = ImageRGB8.from_bytes(3, 3, data)
        img.set_pixel(1, 1, (255, 255, 255))
        img.draw_rectangle(0, 0, 2, 2, (0, 0, 0))
        self.assertNotEqual(img.to_bytes(), data)
        img.clear()
        self.assertEqual(img.to_bytes(), data)

    def test_snapshot_is_independent_of_pixels(self):
        img = ImageRGB8.from_bytes(1, 1, bytes([5, 5, 5]))
        img.set_pixel(0, 0, (6, 6, 6))
        self.assertEqual(img.background.samples.tobytes(), bytes([5, 5, 5]))
        self.assertFalse(img.background.samples.flags.writeable)

    def test_zero_area_image(self):
        img = ImageRGB8(0, 0, (1, 1, 1))
        self.assertEqual(img.to_bytes(), b"")
        img.clear()
        with self.assertRaises(OutOfBounds):
            img.get_pixel(0, 0)

    def test_negative_dimensions_rejected(self):
        with self.assertRaises(ValueError):
            ImageRGB8(-1, 2)


if __name__ == "__main__":
    unittest.main()
