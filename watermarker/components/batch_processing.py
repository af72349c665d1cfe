import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import replace

from tqdm import tqdm

from watermarker.components.image_processing.image_watermark import (
    add_text_watermark,
    add_watermark,
    cover_text_watermark,
)
from watermarker.utils.data_structures import IMAGE_EXTENSIONS, WatermarkModeEnum
from watermarker.utils.options_handler import validate_options


class BatchWatermarker:
    OUTPUT_TEMPLATE = "{name}_watermark{ext}"

    def __init__(self, mode, options=None, watermark_image=None, max_workers=None):
        self.logger = logging.getLogger(__name__)
        self.mode = WatermarkModeEnum(mode)
        if self.mode == WatermarkModeEnum.IMAGE and not watermark_image:
            raise ValueError("Image mode needs a watermark image")
        self.options = validate_options(options)
        self.watermark_image = watermark_image
        self.max_workers = max_workers or max((os.cpu_count() or 1) - 2, 1)

    @staticmethod
    def list_images(input_folder):
        images = []
        for file_name in sorted(os.listdir(input_folder)):
            full_path = os.path.join(input_folder, file_name)
            if not os.path.isfile(full_path):
                continue
            if os.path.splitext(file_name)[1].lower() not in IMAGE_EXTENSIONS:
                continue
            images.append(full_path)
        return images

    def output_path(self, image_path, output_folder):
        name, ext = os.path.splitext(os.path.basename(image_path))
        return os.path.join(output_folder, self.OUTPUT_TEMPLATE.format(name=name, ext=ext))

    def process_image(self, image_path, dst_path):
        options = replace(self.options, dst_path=dst_path)
        if self.mode == WatermarkModeEnum.TEXT:
            return add_text_watermark(image_path, options)
        if self.mode == WatermarkModeEnum.IMAGE:
            return add_watermark(image_path, self.watermark_image, options)
        return cover_text_watermark(image_path, options)

    def process_folder(self, input_folder, output_folder):
        """
        Watermark every image of ``input_folder`` into ``output_folder``.

        Returns:
            tuple: (list of WatermarkResult, list of image paths that failed)
        """
        os.makedirs(output_folder, exist_ok=True)
        images = self.list_images(input_folder)
        if not images:
            self.logger.warning(f"No images found in {input_folder}")
            return [], []

        results, failed = [], []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(self.process_image, image, self.output_path(image, output_folder)): image
                for image in images
            }
            for future in tqdm(as_completed(futures), total=len(futures), desc="Watermarking images"):
                image = futures[future]
                try:
                    results.append(future.result())
                except Exception:
                    self.logger.exception(f"Failed to watermark {image}")
                    failed.append(image)

        self.logger.info(f"Watermarked {len(results)} of {len(images)} images into {output_folder}")
        return results, failed
