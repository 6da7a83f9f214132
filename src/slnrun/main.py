#!/usr/bin/env python3
"""slnrun - pick a .NET solution, then build and run one of its projects.

Main entry point for the interactive picker and the plain listing mode.
"""

import argparse
import sys

from slnrun.ui.logging_config import logger  # Import logger first to ensure it's initialized
from slnrun import config
from slnrun.discovery import find_solution_files
from slnrun.navigator import Session
from slnrun.parsing import parse_solution_for_projects


def print_summary(session: Session):
    """Print the active solution and its projects to stdout."""
    print(f"\nSelected solution: {session.selected_solution}")
    print("Projects:")
    for project in session.projects:
        print(f"  - {project}")


def list_solutions(root) -> int:
    """Print every solution under root with its project references."""
    from slnrun.ui.logging_config import enable_console_logging
    enable_console_logging()

    solutions = find_solution_files(root)
    if not solutions:
        logger.error(f"No .sln files found under {root}")
        return 1

    for solution in solutions:
        print(solution)
        for project in parse_solution_for_projects(solution):
            print(f"  - {project}")
    return 0


def run_textual_ui(session: Session):
    """Run the textual-based picker."""
    from slnrun.ui.textual.picker_app import SolutionPickerApp
    app = SolutionPickerApp(session)
    app.run()


def main():
    """Main entry point for slnrun."""
    parser = argparse.ArgumentParser(
        description="slnrun - pick a solution and project, then build and run it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  slnrun                            # Scan the configured root (or the current directory)
  slnrun ~/src                      # Scan ~/src for .sln files
  slnrun --configuration Release    # Build with the Release configuration
  slnrun --list ~/src               # Print solutions and projects without the UI
"""
    )

    parser.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Directory to scan for .sln files (default: SLNRUN_ROOT, settings file, or cwd)"
    )

    parser.add_argument(
        "--configuration",
        default=None,
        help="Build configuration passed to dotnet build (default: Debug)"
    )

    parser.add_argument(
        "--dotnet",
        default=None,
        metavar="PATH",
        help="dotnet executable to use (default: dotnet)"
    )

    parser.add_argument(
        "--settings",
        default=None,
        metavar="FILE",
        help="Settings file to read instead of ~/.slnrun/settings.json"
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="Print discovered solutions and their projects, then exit"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="slnrun 0.1.0"
    )

    args = parser.parse_args()

    config.init(root=args.root, configuration=args.configuration,
                dotnet=args.dotnet, settings_path=args.settings)

    try:
        if args.list:
            sys.exit(list_solutions(config.scan_root))

        logger.info(f"Scanning {config.scan_root}")
        session = Session.from_root(config.scan_root)
    except OSError as e:
        # Startup failures are printed directly; the capture sink is not visible yet
        print(f"Error: {e}", file=sys.stderr)
        logger.error(f"Fatal error: {e}")
        sys.exit(1)

    try:
        run_textual_ui(session)
    except KeyboardInterrupt:
        logger.info("\nExiting...")
        sys.exit(0)

    print_summary(session)


if __name__ == "__main__":
    main()
