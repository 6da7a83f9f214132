"""Two-level selection state machine: solution list, then project list.

Movement and mode changes are pure functions over NavigationState so they can
be exercised without a terminal. Session applies their effects.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from slnrun.discovery import find_solution_files
from slnrun.dotnet import run_project
from slnrun.errors import NoSolutionsFoundError
from slnrun.parsing import parse_solution_for_projects
from slnrun.ui.logging_config import logger


class Mode(Enum):
    SOLUTIONS = "solutions"
    PROJECTS = "projects"


class Command(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    CONFIRM = "confirm"
    QUIT = "quit"


class Effect(Enum):
    SELECT_SOLUTION = "select_solution"
    RUN_PROJECT = "run_project"
    QUIT = "quit"


@dataclass(frozen=True)
class NavigationState:
    mode: Mode = Mode.SOLUTIONS
    selected_index: int = 0


@dataclass(frozen=True)
class Transition:
    state: NavigationState
    effect: Optional[Effect] = None


def move_selection(state: NavigationState, delta: int, length: int) -> NavigationState:
    """Shift the selection by delta, clamped to [0, length - 1]. No-op on an empty list."""
    if length == 0:
        return state
    new = min(max(state.selected_index + delta, 0), length - 1)
    return NavigationState(mode=state.mode, selected_index=new)


def apply_command(state: NavigationState, command: Command, length: int) -> Transition:
    """Compute the next state for command, given the length of the list on screen.

    Confirming a solution always lands on the first project. Confirming a
    project leaves the state unchanged so it can be run again.
    """
    if command == Command.QUIT:
        return Transition(state, Effect.QUIT)
    if command == Command.MOVE_UP:
        return Transition(move_selection(state, -1, length))
    if command == Command.MOVE_DOWN:
        return Transition(move_selection(state, 1, length))

    if length == 0:
        return Transition(state)
    if state.mode == Mode.SOLUTIONS:
        return Transition(NavigationState(mode=Mode.PROJECTS, selected_index=0), Effect.SELECT_SOLUTION)
    return Transition(state, Effect.RUN_PROJECT)


class Session:
    """Everything the interactive loop works on: file lists, selection and exit flag."""

    def __init__(self, solutions: List[str], runner: Callable = run_project):
        if not solutions:
            raise NoSolutionsFoundError("No .sln files found")
        self.solutions = list(solutions)
        self.selected_solution = self.solutions[0]
        self.projects = parse_solution_for_projects(self.selected_solution)
        self.state = NavigationState()
        self.runner = runner
        self.exit = False

    @classmethod
    def from_root(cls, root, runner: Callable = run_project) -> "Session":
        return cls(find_solution_files(root), runner=runner)

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def selected_index(self) -> int:
        return self.state.selected_index

    def current_items(self) -> List[str]:
        return self.projects if self.state.mode == Mode.PROJECTS else self.solutions

    def handle(self, command: Command):
        previous = self.state
        transition = apply_command(previous, command, len(self.current_items()))
        self.state = transition.state

        if transition.effect == Effect.QUIT:
            self.exit = True
        elif transition.effect == Effect.SELECT_SOLUTION:
            self._select_solution(previous.selected_index)
        elif transition.effect == Effect.RUN_PROJECT:
            self.runner(self.projects[self.state.selected_index], self.selected_solution)

        if command == Command.CONFIRM:
            logger.info(f"Selected item at index: {self.state.selected_index}")

    def _select_solution(self, index: int):
        solution = self.solutions[index]
        try:
            projects = parse_solution_for_projects(solution)
        except OSError as e:
            logger.error(f"Could not read {solution}: {e}")
            self.state = NavigationState(mode=Mode.SOLUTIONS, selected_index=index)
            return
        self.selected_solution = solution
        self.projects = projects
        logger.info(f"Loaded {len(projects)} project(s) from {solution}")
