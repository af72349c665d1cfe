import unittest
from unittest.mock import patch

from watermarker.components.image_processing.fonts import load_font, resolve_font
from watermarker.utils.data_structures import FontResource
from watermarker.utils.errors import FontLoadError, InvalidTextSizeError


class TestResolveFont(unittest.TestCase):
    def test_known_levels(self):
        self.assertEqual(resolve_font(3), FontResource('sans', 12))
        self.assertEqual(resolve_font(8).pixel_size, 128)

    def test_unknown_levels(self):
        for text_size in (0, 9, '3', [1]):
            with self.subTest(text_size=text_size):
                with self.assertRaises(InvalidTextSizeError):
                    resolve_font(text_size)


class TestLoadFont(unittest.TestCase):
    def setUp(self):
        load_font.cache_clear()
        self.addCleanup(load_font.cache_clear)

    def test_font_is_cached(self):
        resource = FontResource('sans', 14)
        self.assertIs(load_font(resource), load_font(resource))

    @patch('watermarker.components.image_processing.fonts.ImageFont')
    def test_falls_back_to_default_font(self, mock_image_font):
        mock_image_font.truetype.side_effect = OSError('cannot open resource')
        font = load_font(FontResource('sans', 16))
        mock_image_font.load_default.assert_called_once_with(size=16)
        self.assertIs(font, mock_image_font.load_default.return_value)

    @patch('watermarker.components.image_processing.fonts.ImageFont')
    def test_first_available_file_wins(self, mock_image_font):
        mock_image_font.truetype.side_effect = [OSError('missing'), 'dejavu']
        self.assertEqual(load_font(FontResource('sans', 10)), 'dejavu')
        mock_image_font.load_default.assert_not_called()

    @patch('watermarker.components.image_processing.fonts.ImageFont')
    def test_no_font_available(self, mock_image_font):
        mock_image_font.truetype.side_effect = OSError('cannot open resource')
        mock_image_font.load_default.side_effect = OSError('no freetype')
        with self.assertRaises(FontLoadError):
            load_font(FontResource('sans', 32))
