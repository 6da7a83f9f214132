"""Tests for the textual picker loop, driven through textual's pilot."""

import asyncio
from unittest.mock import MagicMock

from slnrun.navigator import Mode, Session
from slnrun.ui.textual.picker_app import SolutionPickerApp


def drive(session, *keys):
    """Run the app headless, press keys, and return it once the pilot finishes."""
    app = SolutionPickerApp(session)

    async def scenario():
        async with app.run_test() as pilot:
            for key in keys:
                await pilot.press(key)

    asyncio.run(scenario())
    return app


def test_enter_then_escape(make_solution, tmp_path):
    make_solution("repo/app.sln", ["src/Web/Web.csproj", "src/Core/Core.csproj"])
    runner = MagicMock()
    session = Session.from_root(tmp_path, runner=runner)

    drive(session, "enter", "escape")

    assert session.mode == Mode.PROJECTS
    assert session.projects == ["src/Web/Web.csproj", "src/Core/Core.csproj"]
    assert session.exit
    runner.assert_not_called()


def test_enter_on_project_runs_it(make_solution):
    sln = make_solution("app.sln", ["Web/Web.csproj", "Api/Api.csproj"])
    runner = MagicMock()
    session = Session([sln], runner=runner)

    drive(session, "enter", "down", "enter", "q")

    runner.assert_called_once_with("Api/Api.csproj", sln)
    assert session.exit


def test_other_keys_are_ignored(make_solution):
    session = Session([make_solution("app.sln", ["A/A.csproj"])], runner=MagicMock())

    drive(session, "x", "left", "tab")

    assert session.mode == Mode.SOLUTIONS
    assert session.selected_index == 0
    assert not session.exit


def test_selection_stays_visible_in_long_list(make_solution):
    slns = [make_solution(f"sol{i:02d}.sln", []) for i in range(40)]
    session = Session(slns, runner=MagicMock())
    app = SolutionPickerApp(session)
    screens = {}

    async def scenario():
        async with app.run_test(size=(80, 24)) as pilot:
            for _ in range(30):
                await pilot.press("down")
            screens["after"] = app.export_screenshot()
            for _ in range(30):
                await pilot.press("up")
            screens["back"] = app.export_screenshot()

    asyncio.run(scenario())

    assert session.selected_index == 0
    assert "sol30.sln" in screens["after"]
    assert "sol00.sln" not in screens["after"]
    assert "sol00.sln" in screens["back"]
