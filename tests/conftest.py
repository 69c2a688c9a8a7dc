"""
Test Configuration
==================

Pytest configuration with fixtures for all test types.
Provides test settings, tool/output folders and generator instances.
"""

import os

os.environ.setdefault("PHANTOM_PDF_ENVIRONMENT", "testing")
os.environ.setdefault("PHANTOM_PDF_LOG_LEVEL", "DEBUG")

import pytest
from pathlib import Path
from typing import Generator
from unittest.mock import patch

from pydantic_settings import SettingsConfigDict

from phantompdf.config.settings import Settings
from phantompdf.core.platform import OSPlatform
from phantompdf.core.rendering.pdf_generator import PdfGenerator, reset_default_generator
from phantompdf.models.schemas import GeneratorOptions

from tests.utils.mocks import FakeRasterizer


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    __test__ = False

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=None, env_prefix="PHANTOM_PDF_TEST_")


@pytest.fixture
def test_settings(phantom_root: Path) -> TestSettings:
    """Test settings pointing at the temporary tool root."""
    return TestSettings(phantom_root_folder=phantom_root)


@pytest.fixture
def phantom_root(tmp_path: Path) -> Path:
    """Empty PhantomJS tool root folder."""
    root = tmp_path / "phantom"
    root.mkdir()
    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Existing output folder for generated PDFs."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def generator_options(phantom_root: Path) -> GeneratorOptions:
    """Default generator options."""
    return GeneratorOptions(phantom_root)


@pytest.fixture
def linux_generator(generator_options: GeneratorOptions) -> PdfGenerator:
    """Generator with the host platform pinned to Linux."""
    with patch(
        "phantompdf.core.rendering.pdf_generator.detect_platform", return_value=OSPlatform.LINUX
    ):
        return PdfGenerator(generator_options)


@pytest.fixture
def fake_rasterizer() -> Generator[FakeRasterizer, None, None]:
    """Replace the rasterizer subprocess with a recording fake."""
    fake = FakeRasterizer()
    with patch("phantompdf.core.rendering.pdf_generator.subprocess.run", side_effect=fake):
        yield fake


@pytest.fixture(autouse=True)
def clean_default_generator() -> Generator[None, None, None]:
    """Drop the cached default generator around each test."""
    reset_default_generator()
    yield
    reset_default_generator()


@pytest.fixture
def sample_html() -> str:
    """Small HTML document."""
    return "<html><body>Hi</body></html>"
