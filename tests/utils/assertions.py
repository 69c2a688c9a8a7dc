"""
Test Assertions
===============

Custom assertion helpers for testing PDF generation.
"""

from pathlib import Path
from typing import Union

from phantompdf.models.schemas import PDFResult


def assert_pdf_path_in_folder(pdf_path: Union[str, Path], output_folder: Union[str, Path]) -> None:
    """Assert that a generated path is a PDF directly inside the output folder."""
    path = Path(pdf_path)
    assert path.parent == Path(output_folder)
    assert path.suffix == ".pdf"
    assert path.name.endswith(".html.pdf")


def assert_no_temp_html(root_folder: Union[str, Path]) -> None:
    """Assert that no temporary HTML artifacts remain in the tool root."""
    leftovers = sorted(p.name for p in Path(root_folder).glob("*.html"))
    assert leftovers == [], f"Temporary HTML left behind: {leftovers}"


def assert_valid_pdf_result(result: PDFResult, output_folder: Union[str, Path]) -> None:
    """Assert that a result describes a successful run."""
    assert isinstance(result, PDFResult)
    assert_pdf_path_in_folder(result.output_path, output_folder)
    assert result.return_code == 0
    assert result.file_exists
    assert result.succeeded
    assert result.duration_ms >= 0
    assert result.output_path.endswith(f"{result.input_file_name}.pdf")
