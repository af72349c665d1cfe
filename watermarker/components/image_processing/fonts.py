import logging
from functools import lru_cache

from PIL import ImageFont

from watermarker.utils.data_structures import FONT_SIZES, FontResource
from watermarker.utils.errors import FontLoadError, InvalidTextSizeError

logger = logging.getLogger(__name__)

FONT_FILES = {
    'sans': (
        'DejaVuSans.ttf',
        '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
        '/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf',
        '/System/Library/Fonts/Helvetica.ttc',
        'arial.ttf',
    ),
}


def resolve_font(text_size) -> FontResource:
    try:
        return FONT_SIZES[text_size]
    except (KeyError, TypeError) as e:
        raise InvalidTextSizeError() from e


@lru_cache(maxsize=None)
def load_font(resource: FontResource):
    """
    Load a TrueType font for ``resource``, falling back to Pillow's bundled font.

    Fonts are cached and shared between calls; they are never modified after loading.
    """
    for font_file in FONT_FILES.get(resource.family, ()):
        try:
            return ImageFont.truetype(font_file, resource.pixel_size)
        except OSError:
            continue

    logger.warning(f"No {resource.family} font file found, using Pillow default font")
    try:
        return ImageFont.load_default(size=resource.pixel_size)
    except (OSError, ImportError) as e:
        raise FontLoadError(f"Could not load a {resource.family} font of size {resource.pixel_size}") from e
