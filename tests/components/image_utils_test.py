import os
import tempfile
import unittest

from PIL import Image

from watermarker.components.image_processing.image_utils import (
    composite,
    load_image,
    resize_image,
    rotate_image,
    save_image,
    scale_image,
    set_opacity,
    to_pixels,
)
from watermarker.utils.errors import ImageLoadError, ImageWriteError


class TestToPixels(unittest.TestCase):
    def test_rounds_half_up(self):
        self.assertEqual(to_pixels(2.5), 3)
        self.assertEqual(to_pixels(2.49), 2)
        self.assertEqual(to_pixels(-0.5), 0)
        self.assertEqual(to_pixels(7), 7)

    def test_minimum(self):
        self.assertEqual(to_pixels(0.2, minimum=1), 1)


class TestImageOperations(unittest.TestCase):
    def test_set_opacity_scales_alpha(self):
        image = Image.new('RGBA', (2, 2), (10, 20, 30, 200))
        set_opacity(image, 0.5)
        self.assertEqual(image.getpixel((0, 0)), (10, 20, 30, 100))

    def test_set_opacity_keeps_transparent_pixels(self):
        image = Image.new('RGBA', (2, 2), (10, 20, 30, 0))
        set_opacity(image, 0.8)
        self.assertEqual(image.getpixel((1, 1))[3], 0)

    def test_resize_rounds_sizes(self):
        image = Image.new('RGBA', (20, 20))
        self.assertEqual(resize_image(image, 10.5, 4.4).size, (11, 4))

    def test_scale(self):
        image = Image.new('RGBA', (100, 50))
        self.assertEqual(scale_image(image, 0.3).size, (30, 15))
        self.assertEqual(scale_image(image, 3).size, (300, 150))

    def test_rotate_expands_canvas(self):
        image = Image.new('RGBA', (100, 50))
        self.assertEqual(rotate_image(image, 90).size, (50, 100))

    def test_composite_clips_at_edges(self):
        base = Image.new('RGBA', (10, 10), (255, 255, 255, 255))
        overlay = Image.new('RGBA', (4, 4), (255, 0, 0, 255))
        composite(base, overlay, 8, 8)
        self.assertEqual(base.size, (10, 10))
        self.assertEqual(base.getpixel((9, 9)), (255, 0, 0, 255))
        self.assertEqual(base.getpixel((7, 7)), (255, 255, 255, 255))

    def test_composite_blends_translucent_overlay(self):
        base = Image.new('RGBA', (4, 4), (0, 0, 0, 255))
        overlay = Image.new('RGBA', (4, 4), (255, 255, 255, 128))
        composite(base, overlay, 0, 0)
        red = base.getpixel((0, 0))[0]
        self.assertGreater(red, 100)
        self.assertLess(red, 160)


class TestLoadAndSave(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)

    def path(self, name):
        return os.path.join(self.tmp_dir.name, name)

    def test_load_converts_to_rgba(self):
        Image.new('RGB', (30, 20), (1, 2, 3)).save(self.path('base.jpg'))
        image = load_image(self.path('base.jpg'))
        self.assertEqual(image.mode, 'RGBA')
        self.assertEqual(image.size, (30, 20))

    def test_load_missing_file(self):
        with self.assertRaises(ImageLoadError):
            load_image(self.path('missing.png'))

    def test_load_not_an_image(self):
        with open(self.path('notes.png'), 'w') as f:
            f.write('not an image')
        with self.assertRaises(ImageLoadError):
            load_image(self.path('notes.png'))

    def test_save_jpeg_drops_alpha(self):
        save_image(Image.new('RGBA', (30, 20), (0, 0, 255, 255)), self.path('out.jpg'))
        with Image.open(self.path('out.jpg')) as saved:
            self.assertEqual(saved.format, 'JPEG')
            self.assertEqual(saved.mode, 'RGB')
            self.assertEqual(saved.size, (30, 20))

    def test_save_png_keeps_alpha(self):
        save_image(Image.new('RGBA', (30, 20), (0, 0, 255, 100)), self.path('out.png'))
        with Image.open(self.path('out.png')) as saved:
            self.assertEqual(saved.mode, 'RGBA')

    def test_save_unknown_extension(self):
        with self.assertRaises(ImageWriteError):
            save_image(Image.new('RGBA', (3, 3)), self.path('out.unknownext'))

    def test_save_to_missing_folder(self):
        with self.assertRaises(ImageWriteError):
            save_image(Image.new('RGBA', (3, 3)), self.path(os.path.join('missing', 'out.png')))
