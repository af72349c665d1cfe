from __future__ import annotations

from watermarker.utils.data_structures import Dimensions
from watermarker.utils.errors import InvalidTileSizeError


def get_dimensions(base_height, base_width, watermark_height, watermark_width, ratio) -> Dimensions:
    """
    Fit the watermark inside ``ratio`` of the base image while keeping its aspect ratio.

    Args:
        base_height (float): Height of the base image.
        base_width (float): Width of the base image.
        watermark_height (float): Height of the watermark image.
        watermark_width (float): Width of the watermark image.
        ratio (float): Fraction of the constraining base dimension the watermark should take.

    Returns:
        Dimensions: Unrounded (height, width) of the resized watermark.
    """
    if not (base_height and base_width and watermark_height and watermark_width):
        raise ValueError('Image dimensions must be non-zero')

    if base_height / base_width < watermark_height / watermark_width:
        # Watermark is relatively taller, height constrains
        height = ratio * base_height
        width = height / watermark_height * watermark_width
    else:
        # Watermark is relatively wider, width constrains
        width = ratio * base_width
        height = width / watermark_width * watermark_height
    return Dimensions(height=height, width=width)


def calculate_position_list(canvas_width, canvas_height, tile_width, tile_height) -> list[tuple[int, int]]:
    """Top-left offsets of the tiles covering the canvas, x-major then y. All sizes are whole pixels."""
    if not (isinstance(tile_width, int) and isinstance(tile_height, int)):
        raise InvalidTileSizeError(f"Tile size must be whole pixels, got {tile_width!r}x{tile_height!r}")
    if tile_width <= 0 or tile_height <= 0:
        raise InvalidTileSizeError(f"Tile size must be greater than 0, got {tile_width}x{tile_height}")

    positions = []
    for x in range(0, canvas_width, tile_width):
        for y in range(0, canvas_height, tile_height):
            positions.append((x, y))
    return positions
