"""Error types for the slnrun build-and-run pipeline."""

from enum import Enum
from pydantic import BaseModel
from typing import Optional


class NoSolutionsFoundError(FileNotFoundError):
    """Raised at startup when the scan root holds no solution files."""


class DotnetErrorKind(Enum):
    BUILD_ERROR = "BUILD_ERROR"
    SPAWN_ERROR = "SPAWN_ERROR"


class DotnetError(BaseModel):
    type: DotnetErrorKind
    error_message: str


class LaunchResult(BaseModel):
    """Result of a build-then-run invocation."""
    success: bool
    project_path: str
    working_dir: str
    launch_profile: Optional[str] = None
    error: Optional[DotnetError] = None
