import subprocess
from pathlib import Path
from typing import Optional, Tuple

from slnrun import config
from slnrun.errors import LaunchResult, DotnetError, DotnetErrorKind
from slnrun.launch_profile import detect_launch_profile
from slnrun.ui.logging_config import logger


def resolve_project_location(solution_path, reference: str) -> Tuple[Path, Path]:
    """Join a project reference onto its solution's directory.

    Returns (project_path, working_dir). The working directory is the
    project file's parent when the reference names an existing file,
    otherwise the joined path itself.
    """
    project_path = Path(solution_path).parent / reference.replace('\\', '/')
    working_dir = project_path.parent if project_path.is_file() else project_path
    return project_path, working_dir


def invoke_build(project_path: Path, configuration: str, dotnet: str) -> Optional[DotnetError]:
    """Build the project and block until the toolchain exits. Returns None on success."""
    logger.info(f"Building {project_path} ({configuration})")
    try:
        build_result = subprocess.run(
            [dotnet, "build", "--configuration", configuration, str(project_path)],
            encoding="utf-8",
            errors="replace",
            capture_output=True
        )
    except OSError as e:
        return DotnetError(type=DotnetErrorKind.SPAWN_ERROR, error_message=f"Could not start {dotnet}: {e}")

    if build_result.returncode == 0:
        return None

    # dotnet reports compiler errors on stdout
    error_message = build_result.stderr or build_result.stdout
    return DotnetError(type=DotnetErrorKind.BUILD_ERROR, error_message=error_message)


def launch_run(working_dir: Path, launch_profile: Optional[str], dotnet: str) -> None:
    """Start `dotnet run` in working_dir and detach from it.

    The process gets its own session and no terminal streams, so it can
    outlive the picker. Its handle and exit code are dropped. Raises OSError
    if the executable cannot be spawned.
    """
    command = [dotnet, "run"]
    if launch_profile:
        command += ["--launch-profile", launch_profile]

    subprocess.Popen(
        command,
        cwd=working_dir,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True
    )


def run_project(reference: str, solution_path, configuration: Optional[str] = None,
                dotnet: Optional[str] = None) -> LaunchResult:
    """Build the referenced project, then launch it with its first launch profile."""
    configuration = configuration or config.build_configuration
    dotnet = dotnet or config.dotnet_executable

    project_path, working_dir = resolve_project_location(solution_path, reference)
    logger.info(f"Running project: {reference}")

    error = invoke_build(project_path, configuration, dotnet)
    if error is not None:
        if error.type == DotnetErrorKind.BUILD_ERROR:
            logger.error(f"Build failed: {error.error_message}")
        else:
            logger.error(error.error_message)
        return LaunchResult(success=False, project_path=str(project_path),
                            working_dir=str(working_dir), error=error)

    logger.info("Build successful! Running ...")

    launch_profile = detect_launch_profile(working_dir / config.launch_settings_relpath)
    if launch_profile:
        logger.info(f"Detected launch profile: {launch_profile}")
    else:
        logger.info("No launch profile found, running normally...")

    try:
        launch_run(working_dir, launch_profile, dotnet)
    except OSError as e:
        error = DotnetError(type=DotnetErrorKind.SPAWN_ERROR, error_message=f"Could not start {dotnet} run: {e}")
        logger.error(error.error_message)
        return LaunchResult(success=False, project_path=str(project_path), working_dir=str(working_dir),
                            launch_profile=launch_profile, error=error)

    return LaunchResult(success=True, project_path=str(project_path),
                        working_dir=str(working_dir), launch_profile=launch_profile)
