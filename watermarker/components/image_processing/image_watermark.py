from __future__ import annotations

import logging

from watermarker.components.image_processing.fonts import load_font
from watermarker.components.image_processing.geometry import calculate_position_list, get_dimensions
from watermarker.components.image_processing.image_utils import (
    composite,
    load_image,
    resize_image,
    save_image,
    set_opacity,
)
from watermarker.components.image_processing.text_watermark import draw_centered_text, text_watermark
from watermarker.utils.data_structures import FONT_SIZES, JPEG_QUALITY, WatermarkResult
from watermarker.utils.errors import InvalidTextSizeError
from watermarker.utils.options_handler import validate_options

logger = logging.getLogger(__name__)


def _result(options, main):
    return WatermarkResult(
        destination_path=options.dst_path,
        image_height=main.height,
        image_width=main.width,
    )


def add_text_watermark(main_image, options=None) -> WatermarkResult:
    """
    Print ``options.text`` centered over the whole image.

    Args:
        main_image (str): Path of the image to be watermarked.
        options (dict | Options): ``text``, ``text_size`` (1-8) and ``dst_path`` are used.

    Returns:
        WatermarkResult: Destination path and size of the watermarked image.
    """
    options = validate_options(options)
    main = load_image(main_image)
    if options.text_size not in FONT_SIZES:
        raise InvalidTextSizeError()

    resource = FONT_SIZES[options.text_size]
    font = load_font(resource)
    draw_centered_text(main, font, 0, 0, options.text, main.width, main.height, fill=resource.fill)
    save_image(main, options.dst_path, quality=JPEG_QUALITY)
    return _result(options, main)


def add_watermark(main_image, watermark_image, options=None) -> WatermarkResult:
    """
    Resize ``watermark_image`` to ``options.ratio`` of the main image and overlay it in the center.

    Args:
        main_image (str): Path of the image to be watermarked.
        watermark_image (str): Path of the watermark image to be applied.
        options (dict | Options): ``ratio``, ``opacity`` and ``dst_path`` are used.

    Returns:
        WatermarkResult: Destination path and size of the watermarked image.
    """
    options = validate_options(options)
    main = load_image(main_image)
    watermark = load_image(watermark_image)

    new_height, new_width = get_dimensions(
        main.height,
        main.width,
        watermark.height,
        watermark.width,
        options.ratio,
    )
    watermark = resize_image(watermark, new_width, new_height)
    set_opacity(watermark, options.opacity)

    # Offsets use the rounded size so the watermark stays centered
    x = (main.width - watermark.width) / 2
    y = (main.height - watermark.height) / 2
    composite(main, watermark, x, y)
    save_image(main, options.dst_path, quality=JPEG_QUALITY)
    return _result(options, main)


def cover_text_watermark(main_image, options=None) -> WatermarkResult:
    """
    Tile a rotated translucent text watermark across the whole image.

    Args:
        main_image (str): Path of the image to be watermarked.
        options (dict | Options): ``text``, ``text_size``, ``opacity``, ``rotation``,
            ``col_width``, ``row_height`` and ``dst_path`` are used.

    Returns:
        WatermarkResult: Destination path and size of the watermarked image.
    """
    options = validate_options(options)
    main = load_image(main_image)
    watermark = text_watermark(options.text, options)

    position_list = calculate_position_list(main.width, main.height, watermark.width, watermark.height)
    logger.info(f"Covering {main.width}x{main.height} image with {len(position_list)} text tiles")
    for x, y in position_list:
        composite(main, watermark, x, y)
    save_image(main, options.dst_path, quality=JPEG_QUALITY)
    return _result(options, main)
