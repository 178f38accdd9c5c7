"""
Image collection from comma-separated file and directory lists
"""

import os
import stat
from pathlib import Path
from typing import List, NamedTuple, Optional

from .errors import DirectoryError, ImageError, ImageNotFoundError, InvalidExtensionError
from .logger import Logger

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp", ".tif", ".tiff"})


class ImageEntry(NamedTuple):
    """One candidate image and its modification time at collection"""

    path: str
    mod_time: float


def file_extension(path: str) -> str:
    """Text from the last dot of the base name, so ".png" itself counts"""
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def has_image_extension(path: str) -> bool:
    """Check the file suffix against the supported formats, ignoring case"""
    return file_extension(path).lower() in IMAGE_EXTENSIONS


class FileCollector:
    """Utilities for collecting images to convert"""

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger or Logger()

    @staticmethod
    def get_image_info(path: str) -> ImageEntry:
        """Stat a single image file"""
        try:
            info = os.stat(path)
        except FileNotFoundError as e:
            raise ImageNotFoundError(path) from e
        except OSError as e:
            raise ImageError(path, e.strerror or str(e)) from e

        if not stat.S_ISREG(info.st_mode):
            raise ImageError(path, "not a regular file")

        return ImageEntry(path=path, mod_time=info.st_mtime)

    def collect_from_directory(self, directory: str) -> List[ImageEntry]:
        """Walk a directory depth-first and collect every supported image.

        Entries are visited in sorted name order. A file that fails to stat
        is skipped with a warning; a directory that cannot be read raises
        DirectoryError and aborts the walk.
        """
        images = []

        def _on_error(error: OSError):
            raise DirectoryError(
                error.filename or directory, error.strerror or str(error)
            ) from error

        for root, dirs, files in os.walk(directory, onerror=_on_error):
            dirs.sort()
            for name in sorted(files):
                path = os.path.join(root, name)
                if not has_image_extension(path):
                    self.logger.debug(f"Ignoring non-image file {path}")
                    continue

                try:
                    images.append(self.get_image_info(path))
                except ImageError as e:
                    self.logger.warning(f"skipping {path}: {e.reason}")

        return images

    def _collect_file(self, path: str) -> Optional[ImageEntry]:
        """Validate a single file token, warning instead of raising"""
        try:
            if not has_image_extension(path):
                raise InvalidExtensionError(path, file_extension(path))
            return self.get_image_info(path)
        except ImageError as e:
            self.logger.warning(f"skipping {path}: {e}")
            return None

    def collect_images(self, input_value: str) -> List[ImageEntry]:
        """Resolve a comma-separated list of files and directories.

        Blank tokens are ignored. The result keeps discovery order and holds
        each file once, even when it is named twice or also found in a
        listed directory.
        """
        all_images = []

        for token in input_value.split(","):
            token = token.strip()
            if not token:
                continue

            if os.path.isdir(token):
                found = self.collect_from_directory(token)
                self.logger.debug(f"Found {len(found)} image(s) in {token}")
                all_images.extend(found)
            else:
                entry = self._collect_file(token)
                if entry is not None:
                    all_images.append(entry)

        # Remove duplicates while preserving order
        seen = set()
        unique_images = []
        for entry in all_images:
            key = str(Path(entry.path).resolve())
            if key in seen:
                self.logger.debug(f"Skipping duplicate {entry.path}")
                continue
            seen.add(key)
            unique_images.append(entry)

        return unique_images
