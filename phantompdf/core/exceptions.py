"""Domain-specific exceptions raised while generating PDFs."""

from typing import Optional


class PDFGenerationError(Exception):
    """Base exception for PDF generation failures."""

    pass


class InvalidArgumentError(PDFGenerationError, ValueError):
    """Raised when options, folders or other arguments are invalid."""

    pass


class UnsupportedPlatformError(PDFGenerationError):
    """Raised when the host operating system cannot be classified."""

    pass


class RasterizationError(PDFGenerationError):
    """Raised when the rasterizer cannot be launched, times out or exits non-zero."""

    def __init__(self, message: str, return_code: Optional[int] = None):
        super().__init__(message)
        self.return_code = return_code
