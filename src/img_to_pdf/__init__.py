"""
Image to PDF - combine directories and lists of images into one PDF.

Main package initialization.
"""

from .converter import ImageToPDFConverter
from .errors import (
    ConversionError,
    ConverterError,
    DirectoryError,
    ImageError,
    ImageNotFoundError,
    InvalidExtensionError,
    InvalidInputError,
    NoImagesFoundError,
)
from .file_collector import IMAGE_EXTENSIONS, FileCollector, ImageEntry
from .ordering import SortOrder, sort_images
from .pdf_utils import ImageLoader, PDFBuilder
from .stats import ConversionStats

__version__ = "1.0.0"

__all__ = [
    "ImageToPDFConverter",
    "ConversionError",
    "ConverterError",
    "DirectoryError",
    "ImageError",
    "ImageNotFoundError",
    "InvalidExtensionError",
    "InvalidInputError",
    "NoImagesFoundError",
    "IMAGE_EXTENSIONS",
    "FileCollector",
    "ImageEntry",
    "SortOrder",
    "sort_images",
    "ImageLoader",
    "PDFBuilder",
    "ConversionStats",
]
