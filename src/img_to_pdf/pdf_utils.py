"""
Utility classes for assembling images into a PDF
"""

import contextlib
from pathlib import Path
from typing import List, Sequence

from PIL import Image, UnidentifiedImageError

from .errors import ConversionError, ImageError


class ImageLoader:
    """Utility class for loading images as PDF pages"""

    @staticmethod
    def load_page(image_path: str) -> Image.Image:
        """Load an image file as a single RGB page"""
        try:
            with Image.open(image_path) as image:
                image.load()
                # convert() also drops any extra frames of multi-page TIFF/WebP
                return image.convert("RGB")
        except (OSError, UnidentifiedImageError, ValueError) as e:
            raise ImageError(image_path, f"failed to load: {e}") from e


class PDFBuilder:
    """Write an ordered list of images to a multi-page PDF with Pillow"""

    DEFAULT_RESOLUTION = 72.0

    def __init__(self, resolution: float = DEFAULT_RESOLUTION):
        self.resolution = resolution
        self.loader = ImageLoader()

    def build(self, image_paths: Sequence[str], output_path: str):
        """Create ``output_path`` with one page per image, in order"""
        if not image_paths:
            raise ConversionError(str(output_path), "no images to convert")

        pages: List[Image.Image] = []
        try:
            for image_path in image_paths:
                pages.append(self.loader.load_page(image_path))
        except ImageError as e:
            self._close_all(pages)
            raise ConversionError(str(output_path), str(e)) from e

        output = Path(output_path)
        created = not output.exists()
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            pages[0].save(
                output,
                format="PDF",
                save_all=True,
                append_images=pages[1:],
                resolution=self.resolution,
            )
        except (OSError, ValueError) as e:
            if created and output.is_file():
                with contextlib.suppress(OSError):
                    output.unlink()
            raise ConversionError(str(output_path), str(e)) from e
        finally:
            self._close_all(pages)

    @staticmethod
    def _close_all(pages: List[Image.Image]):
        for page in pages:
            page.close()
