from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import asdict, fields, replace

from watermarker.utils.data_structures import FONT_SIZES, OPTION_ALIASES, Options
from watermarker.utils.errors import (
    InvalidColWidthError,
    InvalidOpacityError,
    InvalidOptionError,
    InvalidRatioError,
    InvalidRotationError,
    InvalidRowHeightError,
    InvalidTextSizeError,
)

logger = logging.getLogger(__name__)

OPTION_FIELDS = {field.name for field in fields(Options)}


def merge_options(user_options: Mapping | Options | None = None) -> Options:
    """Overlay user supplied fields onto the default options.

    Keys can be field names (``dst_path``) or their camelCase aliases (``dstPath``).
    Unknown keys are skipped with a warning.
    """
    if user_options is None:
        return Options()
    if isinstance(user_options, Options):
        return user_options

    overrides = {}
    for key, value in user_options.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in OPTION_FIELDS:
            logger.warning(f"Skipped unsupported option: {key}")
            continue
        overrides[name] = value
    return replace(Options(), **overrides)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def validate_options(user_options: Mapping | Options | None = None) -> Options:
    """Merge ``user_options`` with the defaults and raise on the first invalid field."""
    options = merge_options(user_options)
    if not _is_number(options.ratio) or options.ratio > 1:
        raise InvalidRatioError()
    if not _is_number(options.opacity) or options.opacity > 1:
        raise InvalidOpacityError()
    if not _is_int(options.rotation) or options.rotation < 1 or options.rotation > 360:
        raise InvalidRotationError()
    if not _is_int(options.text_size) or options.text_size not in FONT_SIZES:
        raise InvalidTextSizeError()
    if not _is_int(options.col_width) or options.col_width <= 0:
        raise InvalidColWidthError()
    if not _is_int(options.row_height) or options.row_height <= 0:
        raise InvalidRowHeightError()
    if not isinstance(options.text, str):
        raise InvalidOptionError(f"Text must be a string, got {type(options.text).__name__}")
    if not isinstance(options.dst_path, (str, os.PathLike)):
        raise InvalidOptionError(f"dstPath must be a path, got {type(options.dst_path).__name__}")
    return options


def load_options_json(file_path) -> Options:
    try:
        with open(file_path) as f:
            data = json.load(f)
        logger.info(f"Loaded options file: {file_path}")
    except FileNotFoundError:
        logger.error(f"File not found: {file_path}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"Error decoding JSON: {e}")
        raise

    if not isinstance(data, dict):
        logger.error(f"Options file must contain a JSON object: {file_path}")
        raise InvalidOptionError(f"Options file must contain a JSON object: {file_path}")
    return validate_options(data)


def save_options_json(options: Options, file_path):
    with open(file_path, 'w') as f:
        json.dump(asdict(options), f, indent=4)
