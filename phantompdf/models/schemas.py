"""
Pydantic Models and Schemas
===========================

Data models for generator options, generation requests and rasterization results.
"""

from typing import Optional, Dict, Any, Union
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from phantompdf.core.exceptions import InvalidArgumentError
from phantompdf.core.platform import OSPlatform


DEFAULT_PAPER_SIZE = "Letter"
DEFAULT_RASTERIZE_SCRIPT = "rasterize.js"


class PaperSize(str, Enum):
    """Paper formats understood by rasterize.js."""
    LETTER = "Letter"
    LEGAL = "Legal"
    TABLOID = "Tabloid"
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic validation error into a single readable message."""
    parts = []
    for error in exc.errors():
        ctx_error = error.get("ctx", {}).get("error")
        message = str(ctx_error) if ctx_error is not None else error["msg"]
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


class GeneratorOptions(BaseModel):
    """Options for the PhantomJS PDF generator.

    ``phantom_root_folder`` must name an existing directory holding the
    platform executables and the driver script. ``paper_size`` may be
    changed after construction; assignments are validated again.
    """
    phantom_root_folder: Path = Field(..., description="Folder holding the PhantomJS tooling")
    paper_size: str = Field(DEFAULT_PAPER_SIZE, description="Paper size passed to rasterize.js")
    rasterize_script: str = Field(DEFAULT_RASTERIZE_SCRIPT, description="Driver script name")
    timeout: Optional[float] = Field(None, gt=0, description="Rasterizer timeout in seconds")
    check_exit_status: bool = Field(False, description="Raise on a non-zero rasterizer exit")

    model_config = ConfigDict(validate_assignment=True)

    def __init__(self, phantom_root_folder: Union[str, Path, None] = None, **data: Any) -> None:
        try:
            super().__init__(phantom_root_folder=phantom_root_folder, **data)
        except ValidationError as exc:
            raise InvalidArgumentError(describe_validation_error(exc)) from exc

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as exc:
            raise InvalidArgumentError(describe_validation_error(exc)) from exc

    @field_validator("phantom_root_folder", mode="before")
    @classmethod
    def validate_root_not_blank(cls, v: Any) -> Any:
        """Reject a missing or blank root folder."""
        if v is None or not str(v).strip():
            raise ValueError("phantom_root_folder must not be blank")
        return v

    @field_validator("phantom_root_folder")
    @classmethod
    def validate_root_exists(cls, v: Path) -> Path:
        """Ensure the root folder exists."""
        if not v.is_dir():
            raise ValueError(f"Invalid Path: No such folder exists: {v}")
        return v.resolve()

    @field_validator("paper_size", "rasterize_script", mode="before")
    @classmethod
    def validate_not_blank(cls, v: Any) -> Any:
        """Reject blank strings."""
        if isinstance(v, PaperSize):
            return v.value
        if isinstance(v, str):
            if not v.strip():
                raise ValueError("Value must not be blank")
            return v.strip()
        return v


class GenerationRequest(BaseModel):
    """HTML to render and the folder that receives the PDF."""
    html: str = Field(..., description="HTML document to render")
    output_folder: Path = Field(..., description="Destination folder for the PDF")


class PDFResult(BaseModel):
    """Outcome of a single rasterizer run."""
    output_path: str = Field(..., description="Path the PDF was written to")
    input_file_name: str = Field(..., description="Temporary HTML file name")
    platform: OSPlatform = Field(..., description="Detected host platform")
    executable: str = Field(..., description="Absolute path of the executable")
    paper_size: str = Field(..., description="Paper size passed to rasterize.js")
    return_code: int = Field(..., description="Rasterizer exit status")
    file_exists: bool = Field(..., description="Whether the PDF exists after the run")
    duration_ms: float = Field(..., ge=0, description="Wall time of the run in milliseconds")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional metadata")

    @property
    def succeeded(self) -> bool:
        """True when the rasterizer exited cleanly and produced the PDF."""
        return self.return_code == 0 and self.file_exists
