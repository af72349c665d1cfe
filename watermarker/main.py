from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import asdict

from watermarker.components.batch_processing import BatchWatermarker
from watermarker.utils.data_structures import WatermarkModeEnum
from watermarker.utils.errors import InvalidOptionError, WatermarkError
from watermarker.utils.options_handler import load_options_json, validate_options

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FOLDER = 'watermarked'

OPTION_FLAGS = ('ratio', 'opacity', 'text', 'text_size', 'rotation', 'col_width', 'row_height')


def add_common_arguments(parser):
    parser.add_argument('input', help='Image to watermark, or a folder of images')
    parser.add_argument('-o', '--output', default=None, help='Output image path, or output folder for a folder input')
    parser.add_argument('--config', default=None, help='JSON file with watermark options')
    parser.add_argument('--workers', type=int, default=None, help='Worker threads for a folder input')


def arg_parser():
    parser = argparse.ArgumentParser(description='Add a text or image watermark to images.')
    subparsers = parser.add_subparsers(dest='mode', required=True)

    text_parser = subparsers.add_parser(WatermarkModeEnum.TEXT.value, help='Print text in the center of the image')
    add_common_arguments(text_parser)
    text_parser.add_argument('--text', help='Watermark text')
    text_parser.add_argument('--text-size', type=int, help='Text size from 1 to 8')

    image_parser = subparsers.add_parser(WatermarkModeEnum.IMAGE.value, help='Overlay a watermark image in the center')
    add_common_arguments(image_parser)
    image_parser.add_argument('watermark', help='Path to the watermark image')
    image_parser.add_argument('--ratio', type=float, help='Watermark size relative to the image (0.0-1.0)')
    image_parser.add_argument('--opacity', type=float, help='Watermark opacity (0.0-1.0)')

    cover_parser = subparsers.add_parser(WatermarkModeEnum.COVER.value, help='Tile rotated text over the whole image')
    add_common_arguments(cover_parser)
    cover_parser.add_argument('--text', help='Watermark text')
    cover_parser.add_argument('--text-size', type=int, help='Text size from 1 to 8')
    cover_parser.add_argument('--opacity', type=float, help='Text opacity (0.0-1.0)')
    cover_parser.add_argument('--rotation', type=int, help='Text rotation in degrees (1-360)')
    cover_parser.add_argument('--col-width', type=int, help='Width of one text tile in pixels')
    cover_parser.add_argument('--row-height', type=int, help='Height of one text tile in pixels')
    return parser


def build_options(args):
    options = asdict(load_options_json(args.config)) if args.config else {}
    for field_name in OPTION_FLAGS:
        value = getattr(args, field_name, None)
        if value is not None:
            options[field_name] = value
    if args.output and not os.path.isdir(args.input):
        options['dst_path'] = args.output
    return validate_options(options)


def run(args):
    options = build_options(args)
    batch = BatchWatermarker(
        args.mode,
        options,
        watermark_image=getattr(args, 'watermark', None),
        max_workers=args.workers,
    )
    if os.path.isdir(args.input):
        _, failed = batch.process_folder(args.input, args.output or DEFAULT_OUTPUT_FOLDER)
        return 1 if failed else 0

    result = batch.process_image(args.input, options.dst_path)
    logger.info(f"{result.destination_path}: {result.image_width}x{result.image_height}")
    return 0


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format='%(levelname)s:%(message)s')
    parser = arg_parser()
    args = parser.parse_args(argv)
    try:
        return run(args)
    except InvalidOptionError as e:
        parser.error(str(e))
    except WatermarkError as e:
        logger.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
