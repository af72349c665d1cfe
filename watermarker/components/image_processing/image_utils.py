import logging
import math
import os

from PIL import Image, ImageOps

from watermarker.utils.data_structures import JPEG_QUALITY
from watermarker.utils.errors import ImageLoadError, ImageWriteError

logger = logging.getLogger(__name__)

# Pillow formats that cannot store an alpha channel.
RGB_ONLY_FORMATS = {'JPEG', 'PPM', 'EPS', 'PCX'}


def to_pixels(value, minimum=None):
    """Round half up to a whole pixel."""
    pixels = int(math.floor(value + 0.5))
    if minimum is not None:
        return max(pixels, minimum)
    return pixels


def load_image(image_path):
    try:
        with Image.open(image_path) as image:
            loaded = ImageOps.exif_transpose(image).convert('RGBA')
    except OSError as e:
        logger.error(f"Failed to load image {image_path}: {e}")
        raise ImageLoadError(f"Could not load image: {image_path}") from e
    logger.debug(f"Loaded {image_path} ({loaded.width}x{loaded.height})")
    return loaded


def save_image(image, output_path, quality=JPEG_QUALITY):
    extension = os.path.splitext(output_path)[1].lower()
    image_format = Image.registered_extensions().get(extension)
    if image_format is None:
        raise ImageWriteError(f"Unsupported output extension: {output_path}")

    if image_format in RGB_ONLY_FORMATS:
        image = image.convert('RGB')
    try:
        image.save(output_path, format=image_format, quality=quality)
    except OSError as e:
        logger.error(f"Failed to write image {output_path}: {e}")
        raise ImageWriteError(f"Could not write image: {output_path}") from e
    logger.info(f"Watermarked image saved to {output_path}")


def set_opacity(image, opacity):
    # Scale the existing alpha so transparent pixels stay transparent
    alpha = image.getchannel('A')
    alpha = alpha.point(lambda p: int(p * opacity))
    image.putalpha(alpha)
    return image


def resize_image(image, width, height):
    new_size = (to_pixels(width, minimum=1), to_pixels(height, minimum=1))
    return image.resize(new_size, Image.Resampling.LANCZOS)


def scale_image(image, factor):
    return resize_image(image, image.width * factor, image.height * factor)


def rotate_image(image, degrees):
    return image.rotate(degrees, resample=Image.Resampling.BICUBIC, expand=True)


def composite(base, overlay, x, y):
    """Blend ``overlay`` onto ``base`` in place; parts outside the base are clipped."""
    base.paste(overlay, (to_pixels(x), to_pixels(y)), overlay)
    return base
