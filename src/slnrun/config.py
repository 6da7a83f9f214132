import os
import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from slnrun.ui.logging_config import logger, log_capture

ROOT_ENV_VAR = "SLNRUN_ROOT"


class Settings(BaseModel):
    """Contents of the optional settings file."""
    scan_root: Optional[str] = None
    build_configuration: str = "Debug"
    dotnet_executable: str = "dotnet"
    poll_interval: float = Field(default=0.1, gt=0)
    max_log_lines: int = Field(default=100, gt=0)
    launch_settings_relpath: str = "Properties/launchSettings.json"


scan_root: Path
build_configuration: str
dotnet_executable: str
poll_interval: float
max_log_lines: int
launch_settings_relpath: str


def get_settings_file_path() -> Path:
    """Get the path to the settings file."""
    return Path.home() / ".slnrun" / "settings.json"


def load_settings(settings_path: Optional[Path] = None) -> Settings:
    """Load the settings file, falling back to defaults when it is absent or invalid."""
    settings_path = Path(settings_path) if settings_path else get_settings_file_path()

    if not settings_path.exists():
        return Settings()

    try:
        with open(settings_path, 'r') as f:
            return Settings.model_validate(json.load(f))
    except (OSError, ValueError, ValidationError) as e:
        logger.warning(f"Failed to load settings from {settings_path}: {e}")
        return Settings()


def init(root=None, configuration=None, dotnet=None, settings_path=None):
    """Initialise module settings. Explicit arguments win over the environment and the settings file."""
    settings = load_settings(settings_path)

    global scan_root
    if root is not None:
        scan_root = Path(root)
    elif os.environ.get(ROOT_ENV_VAR):
        scan_root = Path(os.environ[ROOT_ENV_VAR])
    elif settings.scan_root:
        scan_root = Path(settings.scan_root).expanduser()
    else:
        scan_root = Path.cwd()

    global build_configuration
    build_configuration = configuration or settings.build_configuration

    global dotnet_executable
    dotnet_executable = dotnet or settings.dotnet_executable

    global poll_interval
    poll_interval = settings.poll_interval

    global max_log_lines
    max_log_lines = settings.max_log_lines
    log_capture.resize(max_log_lines)

    global launch_settings_relpath
    launch_settings_relpath = settings.launch_settings_relpath
