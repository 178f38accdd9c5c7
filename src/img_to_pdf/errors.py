"""
Error types for image collection and PDF conversion
"""


class ConverterError(Exception):
    """Base class for all fatal and per-image conversion errors"""


class InvalidInputError(ConverterError):
    """Raised when the input string contains no paths at all"""

    def __init__(self, reason: str = "no input paths given"):
        self.reason = reason
        super().__init__(f"invalid input: {reason}")


class NoImagesFoundError(ConverterError):
    """Raised when collection finished without a single usable image"""

    def __init__(self):
        super().__init__("no images found")


class ImageError(ConverterError):
    """A single image could not be used"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"image error for {path!r}: {reason}")


class ImageNotFoundError(ImageError):
    def __init__(self, path: str):
        super().__init__(path, "file not found")

    def __str__(self) -> str:
        return f"file not found: {self.path!r}"


class InvalidExtensionError(ImageError):
    def __init__(self, path: str, extension: str):
        self.extension = extension
        super().__init__(path, f"invalid extension {extension!r}")

    def __str__(self) -> str:
        return f"invalid extension {self.extension!r} for file {self.path!r}"


class DirectoryError(ConverterError):
    """A directory could not be walked"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"directory error for {path!r}: {reason}")


class ConversionError(ConverterError):
    """The PDF could not be assembled from the collected images"""

    def __init__(self, output: str, reason: str):
        self.output = output
        self.reason = reason
        super().__init__(f"conversion error for output {output!r}: {reason}")
