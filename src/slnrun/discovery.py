"""Recursive discovery of solution files under a scan root."""

import os
from pathlib import Path
from typing import List

from slnrun.ui.logging_config import logger

SOLUTION_EXTENSION = ".sln"


def find_solution_files(root) -> List[str]:
    """Return the path of every solution file below root, in traversal order.

    Only an unopenable root raises (OSError); unreadable entries further down
    are skipped.
    """
    root = Path(root)
    # os.walk swallows an unreadable root, so open it explicitly first
    with os.scandir(root):
        pass

    def skip(error: OSError):
        logger.debug(f"Skipping unreadable entry: {error}")

    found = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=skip):
        for name in filenames:
            if Path(name).suffix == SOLUTION_EXTENSION:
                found.append(os.path.join(dirpath, name))

    logger.info(f"Found {len(found)} solution file(s) under {root}")
    return found
