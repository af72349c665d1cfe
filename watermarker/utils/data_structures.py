from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import NamedTuple


class WatermarkModeEnum(StrEnum):
    TEXT = 'text'
    IMAGE = 'image'
    COVER = 'cover'

    @classmethod
    def has_value(cls, value: str) -> bool:
        return value in {c.value for c in cls}


TEXT_FILL = (0, 0, 0, 255)


@dataclass(frozen=True)
class FontResource:
    family: str
    pixel_size: int
    fill: tuple[int, int, int, int] = TEXT_FILL


# Text size level (1-8) -> black sans font
FONT_SIZES = MappingProxyType({
    1: FontResource('sans', 8),
    2: FontResource('sans', 10),
    3: FontResource('sans', 12),
    4: FontResource('sans', 14),
    5: FontResource('sans', 16),
    6: FontResource('sans', 32),
    7: FontResource('sans', 64),
    8: FontResource('sans', 128),
})


@dataclass(frozen=True)
class Options:
    ratio: float = 0.6
    opacity: float = 0.6
    dst_path: str = './watermark.jpg'
    text: str = 'jimp-watermark'
    text_size: int = 1
    rotation: int = 30
    col_width: int = 300
    row_height: int = 50


# Keys accepted in option mappings besides the field names themselves.
OPTION_ALIASES = MappingProxyType({
    'dstPath': 'dst_path',
    'textSize': 'text_size',
    'colWidth': 'col_width',
    'rowHeight': 'row_height',
})


class Dimensions(NamedTuple):
    height: float
    width: float


@dataclass(frozen=True)
class WatermarkResult:
    destination_path: str
    image_height: int
    image_width: int

    def to_dict(self) -> dict:
        return {
            'destinationPath': self.destination_path,
            'imageHeight': self.image_height,
            'imageWidth': self.image_width,
        }


IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.bmp', '.gif', '.webp', '.tif', '.tiff'}
JPEG_QUALITY = 100
TILE_TEXT_OFFSET = (10, 0)
TILE_TEXT_BOX = (400, 50)
TILE_UPSCALE = 3
TILE_DOWNSCALE = 0.3
