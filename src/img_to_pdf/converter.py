"""
Collect, order and convert images into a single PDF
"""

from typing import List, Optional

from .errors import InvalidInputError, NoImagesFoundError
from .file_collector import FileCollector
from .logger import Logger
from .ordering import SortOrder, sort_images
from .pdf_utils import PDFBuilder
from .stats import ConversionStats


class ImageToPDFConverter:
    """Collect images, put them in page order and write them to one PDF"""

    def __init__(
        self,
        logger: Optional[Logger] = None,
        builder: Optional[PDFBuilder] = None,
    ):
        self.logger = logger or Logger()
        self.collector = FileCollector(self.logger)
        self.builder = builder or PDFBuilder()
        self.stats = ConversionStats()

    def convert(self, input_value: str, output: str, order: str = "seq") -> List[str]:
        """Convert the images named by ``input_value`` into ``output``.

        Returns the image paths in the order they were written as pages.
        Raises InvalidInputError, NoImagesFoundError, DirectoryError or
        ConversionError; nothing is written unless images were found.
        """
        if not input_value or not input_value.strip():
            raise InvalidInputError()

        warnings_before = len(self.logger.warnings)
        images = self.collector.collect_images(input_value)
        self.stats.collected = len(images)
        self.stats.skipped = len(self.logger.warnings) - warnings_before

        if not images:
            raise NoImagesFoundError()

        sort_order = SortOrder.parse(order)
        ordered = [entry.path for entry in sort_images(images, sort_order)]
        self.logger.debug(
            f"Converting {len(ordered)} image(s) in {sort_order.name.lower()} order"
        )

        self.builder.build(ordered, output)
        self.stats.pages = len(ordered)
        return ordered
