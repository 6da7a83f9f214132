"""Pytest configuration for slnrun tests."""

import pytest
import sys
from pathlib import Path

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def default_config(tmp_path, monkeypatch):
    """Initialise config with defaults and an empty status log for every test."""
    from slnrun import config
    from slnrun.ui.logging_config import log_capture

    monkeypatch.delenv("SLNRUN_ROOT", raising=False)
    config.init(root=tmp_path, settings_path=tmp_path / "no-settings.json")
    log_capture.clear()
    yield
    log_capture.clear()


@pytest.fixture
def make_solution(tmp_path):
    """Write a solution file whose Project lines reference the given paths."""
    def _make(relpath: str, references, extra_lines=()):
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = ["Microsoft Visual Studio Solution File, Format Version 12.00"]
        for i, reference in enumerate(references):
            name = Path(reference.replace('\\', '/')).stem
            lines.append(f'Project("{{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}}") = "{name}", "{reference}", "{{0000000{i}}}"')
            lines.append("EndProject")
        lines.extend(extra_lines)
        path.write_text("\n".join(lines) + "\n")
        return str(path)
    return _make
