from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Static
from rich.panel import Panel
from rich.text import Text

from slnrun import config
from slnrun.navigator import Command, Mode, Session
from slnrun.ui.logging_config import log_capture

HELP = "↑/↓: navigate, Enter: select, q: quit"


class ItemList(Static):
    """The solution or project list, scrolled so the selected row stays visible."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.session = None
        self.first_row = 0

    def visible_rows(self) -> int:
        return max(self.size.height - 2, 1)

    def show_session(self, session: Session):
        self.session = session
        if session.mode == Mode.SOLUTIONS:
            title = f" Solutions ({HELP}) "
            names = [Path(path).name for path in session.solutions]
        else:
            title = f" Projects of {Path(session.selected_solution).name} ({HELP}) "
            names = session.projects

        rows = self.visible_rows()
        selected = session.selected_index
        if selected < self.first_row:
            self.first_row = selected
        elif selected >= self.first_row + rows:
            self.first_row = selected - rows + 1
        self.first_row = max(min(self.first_row, len(names) - rows), 0)

        content = Text()
        if not names:
            content.append("(nothing to select)", style="dim")
        window = names[self.first_row:self.first_row + rows]
        for index, name in enumerate(window, start=self.first_row):
            if index > self.first_row:
                content.append("\n")
            if index == selected:
                content.append(f"➤ {name}", style="bold yellow on grey30")
            else:
                content.append(f"  {name}", style="yellow")
        self.update(Panel(content, title=title, border_style="blue"))

    def on_resize(self) -> None:
        if self.session is not None:
            self.show_session(self.session)


class LogPanel(Static):
    """Tail of the captured status log."""

    def refresh_logs(self):
        lines = "\n".join(log_capture.get_logs()).split("\n")
        visible = max(self.size.height - 2, 1)
        self.update(Panel(Text("\n".join(lines[-visible:])), title=" Logs ", border_style="white"))


class SolutionPickerApp(App):
    """Interactive picker: choose a solution, then build and run one of its projects."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #items {
        height: 70%;
    }

    #logs {
        height: 30%;
    }
    """

    BINDINGS = [
        Binding("up", "move_up", "Up", priority=True),
        Binding("down", "move_down", "Down", priority=True),
        Binding("enter", "confirm", "Select", priority=True),
        Binding("escape", "leave", "Quit", priority=True),
        Binding("q", "leave", "Quit", priority=True),
    ]

    def __init__(self, session: Session):
        super().__init__()
        self.session = session
        self.log_update_timer = None

    def compose(self) -> ComposeResult:
        with Vertical():
            yield ItemList(id="items")
            yield LogPanel(id="logs")

    def on_mount(self) -> None:
        self.redraw()
        self.log_update_timer = self.set_interval(config.poll_interval, self.update_logs)

    def redraw(self):
        self.query_one("#items", ItemList).show_session(self.session)
        self.update_logs()

    def update_logs(self) -> None:
        self.query_one("#logs", LogPanel).refresh_logs()

    def handle_command(self, command: Command):
        # Builds run synchronously here; the UI is frozen until they finish
        self.session.handle(command)
        if self.session.exit:
            self.exit()
            return
        self.redraw()

    def action_move_up(self) -> None:
        self.handle_command(Command.MOVE_UP)

    def action_move_down(self) -> None:
        self.handle_command(Command.MOVE_DOWN)

    def action_confirm(self) -> None:
        self.handle_command(Command.CONFIRM)

    def action_leave(self) -> None:
        self.handle_command(Command.QUIT)
