import json
from pathlib import Path
from typing import Optional


def detect_launch_profile(launch_settings_path) -> Optional[str]:
    """Return the first profile name in a launchSettings.json, or None.

    A missing, unreadable or malformed file counts as having no profile.
    Profile order is document order, as kept by json.loads.
    """
    try:
        settings = json.loads(Path(launch_settings_path).read_text(encoding="utf-8-sig"))
    except (OSError, ValueError):
        return None

    if not isinstance(settings, dict):
        return None
    profiles = settings.get("profiles")
    if not isinstance(profiles, dict):
        return None
    return next(iter(profiles), None)
