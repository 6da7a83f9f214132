"""Extraction of project references from solution files."""

from pathlib import Path
from typing import List, Optional

PROJECT_LINE_PREFIX = "Project("


def parse_project_line(line: str) -> Optional[str]:
    """Return the project reference on a solution line, or None if the line declares none."""
    if not line.strip().startswith(PROJECT_LINE_PREFIX):
        return None
    fields = line.split(',')
    if len(fields) < 2:
        return None
    return fields[1].strip().strip('"')


def parse_solution_for_projects(sln_path) -> List[str]:
    """Read a solution file and return its project references in file order.

    Raises OSError when the file cannot be read.
    """
    text = Path(sln_path).read_text(encoding="utf-8-sig", errors="replace")
    projects = []
    for line in text.splitlines():
        reference = parse_project_line(line)
        if reference is not None:
            projects.append(reference)
    return projects
