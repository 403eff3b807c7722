"""Terminal front end: renders both columns and simulates drag and drop.

The REPL stands in for a pointer-driven UI. ``drag`` starts a drag on a
card (the card is drawn as an empty slot until the drop), ``drop`` releases
it over a column at a pixel offset, which the board turns into an index.
"""
import logging
import math
import shutil
from typing import Dict, List, Optional, Sequence
import click
from board import Board
from errors import BoardError
from models import DONE, STATUS_LABELS, STATUSES, TODO, Task

logger = logging.getLogger(__name__)

MIN_COL_WIDTH = 18
SEP = " | "
PLACEHOLDER = '.' * 8

STATUS_ALIASES: Dict[str, str] = {
    't': TODO,
    'todo': TODO,
    'd': DONE,
    'done': DONE,
}

# --- terminal control helpers ---
# ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home)


def _clear_screen() -> None:
    click.echo("\033[3J\033[H\033[2J\033[H", nl=False)


def _enter_alt_screen() -> None:
    click.echo("\033[?1049h", nl=False)


def _leave_alt_screen() -> None:
    click.echo("\033[?1049l", nl=False)


# -------------------- rendering --------------------
def _card_lines(position: int, task: Task, dragged_id: Optional[str]) -> List[str]:
    prefix = f"{position}. "
    if task.id == dragged_id:
        return [prefix + PLACEHOLDER, ' ' * len(prefix) + PLACEHOLDER]
    return [prefix + (task.title or '<untitled>'), ' ' * len(prefix) + task.description]


def _column_lines(tasks: Sequence[Task], dragged_id: Optional[str]) -> List[str]:
    if not tasks:
        return ['(empty)']
    lines: List[str] = []
    for position, task in enumerate(tasks, start=1):
        lines.extend(_card_lines(position, task, dragged_id))
    return lines


def _fit(line: str, width: int) -> str:
    if len(line) > width:
        return line[:max(0, width - 1)] + '…'
    return line.ljust(width)


def render_board(board: Board, term_width: Optional[int] = None) -> List[str]:
    """Lay both columns out side by side; returns the lines to print."""
    if term_width is None:
        term_width = shutil.get_terminal_size((120, 30)).columns
    dragged = board.dragged_task_id
    columns = {s: _column_lines(board.tasks(s), dragged) for s in STATUSES}
    headers = {s: STATUS_LABELS[s].upper() for s in STATUSES}
    available = max(MIN_COL_WIDTH, (term_width - len(SEP)) // len(STATUSES))
    widths = {}
    for s in STATUSES:
        longest = max([len(headers[s])] + [len(line) for line in columns[s]])
        widths[s] = min(available, max(MIN_COL_WIDTH, longest))
    out = [
        SEP.join(_fit(headers[s], widths[s]) for s in STATUSES).rstrip(),
        SEP.join('-' * widths[s] for s in STATUSES),
    ]
    rows = max(len(columns[s]) for s in STATUSES)
    for r in range(rows):
        cells = [_fit(columns[s][r] if r < len(columns[s]) else '', widths[s]) for s in STATUSES]
        out.append(SEP.join(cells).rstrip())
    return out


class CLI:
    def __init__(self, board: Board, alt_screen: bool = True):
        self.board: Board = board
        self.alt_screen: bool = alt_screen
        self._payload: Optional[Task] = None
        self._dirty: bool = True
        board.subscribe(self._on_board_change)

    def _on_board_change(self, board: Board) -> None:
        self._dirty = True

    def redraw(self) -> None:
        _clear_screen()
        click.echo("Task Board:")
        for line in render_board(self.board):
            click.echo(line)
        if self.board.dragged_task_id is not None and self._payload is not None:
            click.echo(f'\nDragging "{self._payload.title}" (drop <col> <y> or cancel)')
        self._dirty = False

    def run(self) -> None:
        """Main REPL loop; the board is redrawn after every change."""
        exit_message: Optional[str] = None
        if self.alt_screen:
            _enter_alt_screen()
        try:
            while True:
                if self._dirty:
                    self.redraw()
                line = click.prompt("\n", prompt_suffix=': ', default='', show_default=False).strip()
                if not line:
                    continue
                lower = line.lower()
                if lower == 'help':
                    _clear_screen()
                    self._help()
                    click.prompt("\nPress Enter to return to the board", default='', show_default=False)
                    self._dirty = True
                    continue
                if lower == 'exit':
                    exit_message = "Goodbye."
                    break
                message = self.handle_command(line)
                if self._dirty:
                    self.redraw()
                if message:
                    click.echo(message)
        except (KeyboardInterrupt, EOFError, click.Abort):
            exit_message = "Interrupted. Goodbye."
        finally:
            if self.alt_screen:
                _leave_alt_screen()
            if exit_message:
                click.echo(exit_message)

    # -------------------- command dispatch --------------------
    def handle_command(self, line: str) -> Optional[str]:
        """Run one command; returns a message for the user, if any."""
        tokens = line.split()
        if not tokens:
            return None
        cmd = tokens[0].lower()
        if cmd == 'drag':
            return self._cmd_drag(tokens)
        if cmd == 'drop':
            return self._cmd_drop(tokens)
        if cmd == 'mv':
            return self._cmd_mv(tokens)
        if cmd == 'cancel':
            self._payload = None
            self.board.cancel_drag()
            return None
        return "Unknown command. Type 'help' for instructions."

    # ---- individual command helpers ----
    def _pick(self, col_token: str, number_token: str) -> Optional[Task]:
        status = STATUS_ALIASES.get(col_token.lower())
        if not status or not number_token.isdigit():
            return None
        tasks = self.board.tasks(status)
        idx = int(number_token) - 1
        if idx < 0 or idx >= len(tasks):
            return None
        return tasks[idx]

    def _cmd_drag(self, tokens: List[str]) -> Optional[str]:
        if len(tokens) != 3:
            return "Usage: drag <col> <n>; columns: t/d"
        task = self._pick(tokens[1], tokens[2])
        if task is None:
            return f"No card #{tokens[2]} in {tokens[1]}."
        self._payload = self.board.begin_drag(task.id)
        return None

    def _cmd_drop(self, tokens: List[str]) -> Optional[str]:
        if len(tokens) != 3:
            return "Usage: drop <col> <y>; columns: t/d"
        if self._payload is None:
            return "Nothing is being dragged."
        status = STATUS_ALIASES.get(tokens[1].lower())
        if not status:
            return "Invalid column."
        try:
            y = float(tokens[2])
        except ValueError:
            return "Invalid y."
        if not math.isfinite(y):
            return "Invalid y."
        payload, self._payload = self._payload, None
        if not self.board.on_drop(payload, status, y):
            return "Drop ignored."
        return None

    def _cmd_mv(self, tokens: List[str]) -> Optional[str]:
        if len(tokens) != 5:
            return "Usage: mv <col> <n> <col> <index>; columns: t/d"
        task = self._pick(tokens[1], tokens[2])
        if task is None:
            return f"No card #{tokens[2]} in {tokens[1]}."
        status = STATUS_ALIASES.get(tokens[3].lower())
        if not status:
            return "Invalid column."
        if not tokens[4].isdigit():
            return "Invalid index."
        self._payload = None
        try:
            payload = self.board.begin_drag(task.id)
            self.board.move_task(payload, status, int(tokens[4]))
        except BoardError as e:
            logger.warning(f"Move failed: {e}")
            return "Move failed."
        return None

    def _help(self) -> None:
        click.echo("Commands:")
        click.echo("  drag <col> <n>              Start dragging card n of column t (To Do) or d (Done)")
        click.echo("  drop <col> <y>              Drop the dragged card on a column, y pixels from its top")
        click.echo("  mv <col> <n> <col> <index>  Drag and drop in one step, by target index")
        click.echo("  cancel                      Abandon the current drag")
        click.echo("  help                        Show this help (press Enter to return)")
        click.echo("  exit                        Exit")
