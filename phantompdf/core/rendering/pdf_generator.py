"""
PDF Generator
=============

PhantomJS-based PDF generation from HTML content.
Writes the HTML to a temporary file next to the PhantomJS tooling, runs the
platform executable with rasterize.js, and reports where the PDF was written.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Any, Iterator, List, Union
import subprocess
import tempfile
import time

from pydantic import ValidationError

from phantompdf.config.logging import get_logger
from phantompdf.config.settings import Settings, get_settings
from phantompdf.core.exceptions import InvalidArgumentError, RasterizationError
from phantompdf.core.platform import OSPlatform, detect_platform
from phantompdf.models.schemas import (
    GenerationRequest,
    GeneratorOptions,
    PDFResult,
    describe_validation_error,
)

logger = get_logger(__name__)


class BasePDFGenerator(ABC):
    """Interface for HTML to PDF generators."""

    @abstractmethod
    def generate_pdf(self, html: str, output_folder: Union[str, Path]) -> str:
        """
        Render the HTML to a PDF saved in the output folder.

        Args:
            html: HTML to convert to PDF
            output_folder: Directory to save the PDF to

        Returns:
            Full file path of the generated PDF
        """


class PdfGenerator(BasePDFGenerator):
    """PDF generator driving the platform-specific PhantomJS executable."""

    def __init__(self, options: GeneratorOptions):
        if not isinstance(options, GeneratorOptions):
            raise InvalidArgumentError("options must be a GeneratorOptions instance")

        self.options = options
        self.platform: OSPlatform = detect_platform()
        self.logger: Any = logger.bind(component="pdf_generator")  # structlog.BoundLoggerBase

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PdfGenerator":
        """Build a generator from application settings."""
        if settings is None:
            settings = get_settings()
        if settings.phantom_root_folder is None:
            raise InvalidArgumentError("phantom_root_folder is not configured")

        options = GeneratorOptions(
            settings.phantom_root_folder,
            paper_size=settings.paper_size,
            rasterize_script=settings.rasterize_script,
            timeout=settings.render_timeout,
            check_exit_status=settings.check_exit_status,
        )
        return cls(options)

    @property
    def executable_path(self) -> Path:
        """Absolute path of the PhantomJS executable for the host platform."""
        return self.options.phantom_root_folder / self.platform.executable_name

    def generate_pdf(self, html: str, output_folder: Union[str, Path]) -> str:
        """
        Render HTML to a PDF saved in ``output_folder``.

        The path is returned even if the rasterizer failed, unless the
        options enable ``check_exit_status``. Use ``render`` for the full
        result.

        Raises:
            InvalidArgumentError: If the output folder is not a directory
            RasterizationError: If the rasterizer cannot run or, when
                checking is enabled, exits non-zero
        """
        try:
            request = GenerationRequest(html=html, output_folder=output_folder)
        except ValidationError as e:
            raise InvalidArgumentError(describe_validation_error(e)) from e
        return self.render(request).output_path

    def render(self, request: GenerationRequest) -> PDFResult:
        """
        Render a generation request and report the rasterizer outcome.

        Args:
            request: HTML and destination folder

        Returns:
            PDFResult describing the run
        """
        output_folder = request.output_folder.absolute()
        with self._temporary_html(request.html) as input_file_name:
            if not output_folder.is_dir():
                raise InvalidArgumentError(
                    f"The output folder is not a valid directory: {output_folder}"
                )

            # absolute, the child runs with the tool root as its working directory
            output_path = str(output_folder / f"{input_file_name}.pdf")
            return self._execute_phantomjs(input_file_name, output_path)

    def build_command(self, input_file_name: str, output_path: str) -> List[str]:
        """Assemble the rasterizer command line."""
        return [
            str(self.executable_path),
            self.options.rasterize_script,
            input_file_name,
            output_path,
            self.options.paper_size,
        ]

    def _execute_phantomjs(self, input_file_name: str, output_path: str) -> PDFResult:
        """Run PhantomJS and wait for it to exit."""
        command = self.build_command(input_file_name, output_path)
        self.logger.info(
            "Spawning rasterizer",
            executable=command[0],
            input_file=input_file_name,
            output_path=output_path,
            paper_size=self.options.paper_size,
        )

        start_time = time.perf_counter()
        try:
            completed = subprocess.run(
                command,
                cwd=str(self.options.phantom_root_folder),
                check=False,
                timeout=self.options.timeout,
            )
        except subprocess.TimeoutExpired as e:
            self.logger.error("Rasterizer timed out", timeout=self.options.timeout)
            raise RasterizationError(
                f"Rasterizer did not finish within {self.options.timeout} seconds"
            ) from e
        except OSError as e:
            self.logger.error("Rasterizer could not be launched", error=str(e))
            raise RasterizationError(f"Rasterizer could not be launched: {e}") from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        result = PDFResult(
            output_path=output_path,
            input_file_name=input_file_name,
            platform=self.platform,
            executable=command[0],
            paper_size=self.options.paper_size,
            return_code=completed.returncode,
            file_exists=Path(output_path).is_file(),
            duration_ms=duration_ms,
            metadata={"generator": "phantomjs", "script": self.options.rasterize_script},
        )

        if completed.returncode != 0:
            self.logger.warning(
                "Rasterizer exited with non-zero status",
                return_code=completed.returncode,
                output_path=output_path,
            )
            if self.options.check_exit_status:
                raise RasterizationError(
                    f"Rasterizer exited with status {completed.returncode}",
                    return_code=completed.returncode,
                )
        else:
            self.logger.info(
                "PDF generation completed",
                output_path=output_path,
                file_exists=result.file_exists,
                duration_ms=round(duration_ms, 2),
            )

        return result

    @contextmanager
    def _temporary_html(self, html: str) -> Iterator[str]:
        """Write HTML to a randomly named file in the root folder, removing it on exit."""
        temp_file = tempfile.NamedTemporaryFile(
            mode="w",
            suffix=".html",
            dir=self.options.phantom_root_folder,
            delete=False,
            encoding="utf-8",
        )
        temp_path = Path(temp_file.name)
        try:
            with temp_file:
                temp_file.write(html)
            yield temp_path.name
        finally:
            temp_path.unlink(missing_ok=True)
            self.logger.debug("Removed temporary HTML", input_file=temp_path.name)


class PDFGeneratorFactory:
    """Factory for creating PDF generators."""

    _generators = {
        "phantomjs": PdfGenerator,
    }

    @classmethod
    def create_generator(
        cls, generator_type: str = "phantomjs", options: Optional[GeneratorOptions] = None
    ) -> BasePDFGenerator:
        """
        Create PDF generator instance.

        Args:
            generator_type: Type of generator
            options: Generator options, read from settings when omitted

        Returns:
            PDF generator instance
        """
        if generator_type not in cls._generators:
            raise ValueError(f"Unsupported generator type: {generator_type}")

        generator_class = cls._generators[generator_type]
        if options is None:
            return generator_class.from_settings()
        return generator_class(options)


# Global generator instance
_default_generator: Optional[PdfGenerator] = None


def get_default_generator() -> PdfGenerator:
    """Get the settings-driven generator, creating it on first use."""
    global _default_generator
    if _default_generator is None:
        _default_generator = PdfGenerator.from_settings()
    return _default_generator


def reset_default_generator() -> None:
    """Drop the cached default generator."""
    global _default_generator
    _default_generator = None


def generate_pdf_from_html(
    html: str, output_folder: Union[str, Path], options: Optional[GeneratorOptions] = None
) -> str:
    """
    Generate a PDF from HTML.

    Uses a one-off generator when ``options`` is given, otherwise the
    default generator built from settings.

    Args:
        html: HTML content to render
        output_folder: Directory to save the PDF to

    Returns:
        Path of the generated PDF
    """
    generator = PdfGenerator(options) if options is not None else get_default_generator()
    return generator.generate_pdf(html, output_folder)
