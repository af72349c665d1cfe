from __future__ import annotations

import logging

from PIL import Image, ImageDraw

from watermarker.components.image_processing.fonts import load_font, resolve_font
from watermarker.components.image_processing.image_utils import (
    rotate_image,
    scale_image,
    set_opacity,
    to_pixels,
)
from watermarker.utils.data_structures import (
    TEXT_FILL,
    TILE_DOWNSCALE,
    TILE_TEXT_BOX,
    TILE_TEXT_OFFSET,
    TILE_UPSCALE,
    Options,
)

logger = logging.getLogger(__name__)


def wrap_text(text, font, max_width):
    """Break ``text`` into lines no wider than ``max_width``; a single long word keeps its own line."""
    lines = []
    for paragraph in text.split('\n'):
        line = ''
        for word in paragraph.split(' '):
            candidate = f"{line} {word}" if line else word
            if line and font.getlength(candidate) > max_width:
                lines.append(line)
                line = word
            else:
                line = candidate
        lines.append(line)
    return '\n'.join(lines)


def draw_centered_text(image, font, x, y, text, box_width, box_height, fill=TEXT_FILL):
    """
    Print ``text`` centered horizontally and vertically inside the box at (x, y).

    Args:
        image (PIL.Image.Image): Image drawn on in place.
        font: Pillow font used for the text.
        x (int): Left edge of the box.
        y (int): Top edge of the box.
        text (str): Text to print, wrapped to the box width.
        box_width (int): Width of the box.
        box_height (int): Height of the box.
        fill (tuple): RGBA text colour.

    Returns:
        PIL.Image.Image: The same image.
    """
    draw = ImageDraw.Draw(image)
    wrapped = wrap_text(text, font, box_width)
    left, top, right, bottom = draw.multiline_textbbox((0, 0), wrapped, font=font, align='center')
    text_x = x + (box_width - (right - left)) / 2 - left
    text_y = y + (box_height - (bottom - top)) / 2 - top
    draw.multiline_text(
        (to_pixels(text_x), to_pixels(text_y)),
        wrapped,
        font=font,
        fill=fill,
        align='center',
    )
    return image


def text_watermark(text, options: Options):
    """Render ``text`` into a small translucent rotated tile for covering an image."""
    resource = resolve_font(options.text_size)
    font = load_font(resource)

    tile = Image.new('RGBA', (options.col_width, options.row_height), (255, 255, 255, 0))
    draw_centered_text(tile, font, *TILE_TEXT_OFFSET, text, *TILE_TEXT_BOX, fill=resource.fill)
    set_opacity(tile, options.opacity)

    # Rotating the upscaled tile keeps the glyph edges smooth
    tile = scale_image(tile, TILE_UPSCALE)
    tile = rotate_image(tile, options.rotation)
    tile = scale_image(tile, TILE_DOWNSCALE)
    logger.debug(f"Rendered text tile {tile.width}x{tile.height} at {options.rotation} degrees")
    return tile
