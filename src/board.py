"""Board controller: owns both columns, the drag marker, and change listeners.

Status keys: "todo", "done". Columns are stored as tuples and replaced
wholesale on every move; callers only ever see copies of the tasks.
"""
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple
from errors import DuplicateTaskError, NotFoundError
from layout import CARD_CELL_HEIGHT, estimate_target_index
from models import DONE, STATUSES, TODO, Task, normalize_status
from movement import MoveResult, resolve_move

logger = logging.getLogger(__name__)

Listener = Callable[['Board'], None]


class Board:
    def __init__(self, tasks: Optional[Iterable[Task]] = None, cell_height: float = CARD_CELL_HEIGHT):
        if cell_height <= 0:
            raise ValueError(f'cell_height must be positive, got {cell_height}')
        self.cell_height: float = cell_height
        self._columns: Dict[str, Tuple[Task, ...]] = {TODO: (), DONE: ()}
        self._dragged_task_id: Optional[str] = None
        self._listeners: List[Listener] = []
        if tasks:
            self._load(tasks)

    # -------------------- seeding --------------------
    def _load(self, tasks: Iterable[Task]) -> None:
        collected: Dict[str, List[Task]] = {TODO: [], DONE: []}
        seen = set()
        for task in tasks:
            if task.id in seen:
                raise DuplicateTaskError(task.id)
            seen.add(task.id)
            status = normalize_status(task.status)
            collected[status].append(task.copy(status=status))
        self._columns = {status: tuple(collected[status]) for status in STATUSES}
        logger.info(f"Board seeded: {self}")

    # -------------------- queries --------------------
    @property
    def todo_tasks(self) -> Tuple[Task, ...]:
        return self.tasks(TODO)

    @property
    def done_tasks(self) -> Tuple[Task, ...]:
        return self.tasks(DONE)

    def tasks(self, status: str) -> Tuple[Task, ...]:
        return tuple(t.copy() for t in self._columns[normalize_status(status)])

    @property
    def dragged_task_id(self) -> Optional[str]:
        return self._dragged_task_id

    def find(self, task_id: str) -> Tuple[str, int]:
        """Return ``(status, index)`` of the task with ``task_id``."""
        for status in STATUSES:
            for idx, task in enumerate(self._columns[status]):
                if task.id == task_id:
                    return status, idx
        raise NotFoundError(task_id, STATUSES)

    def __len__(self) -> int:
        return sum(len(col) for col in self._columns.values())

    # -------------------- observers --------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(board)`` after every published change.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # -------------------- drag & drop --------------------
    def begin_drag(self, task_id: str) -> Task:
        """Mark ``task_id`` as being dragged and return its drag payload."""
        status, idx = self.find(task_id)
        self._dragged_task_id = task_id
        self._notify()
        return self._columns[status][idx].copy()

    def cancel_drag(self) -> None:
        if self._dragged_task_id is None:
            return
        self._dragged_task_id = None
        self._notify()

    def submit_drop(self, task: Task, target_status: str, raw_y: float) -> MoveResult:
        """Drop ``task`` on ``target_status`` at ``raw_y`` pixels from the column top.

        The drag marker is cleared whether or not the move succeeds.
        NotFoundError propagates with the board unchanged.
        """
        try:
            target_status = normalize_status(target_status)
            target_index = estimate_target_index(raw_y, self.cell_height, len(self._columns[target_status]))
            return self.move_task(task, target_status, target_index)
        finally:
            self._clear_marker()

    def move_task(self, task: Task, target_status: str, target_index: int) -> MoveResult:
        """Same as ``submit_drop`` with an already estimated target index."""
        try:
            result = resolve_move(self._columns[TODO], self._columns[DONE], task, normalize_status(target_status), target_index)
            # both columns are published in one assignment
            self._columns = {TODO: result.todo, DONE: result.done}
            self._dragged_task_id = None
            logger.debug(f'Task {result.moved.id} moved to "{result.moved.status}" at {result.index}')
            self._notify()
            return MoveResult(self.todo_tasks, self.done_tasks, result.moved.copy(), result.index)
        finally:
            # no-op after a successful move, the marker is already cleared
            self._clear_marker()

    def on_drop(self, task: Task, target_status: str, raw_y: float) -> bool:
        """Rendering-facing drop callback; a stale drag source becomes a no-op."""
        try:
            self.submit_drop(task, target_status, raw_y)
        except NotFoundError as e:
            logger.warning(f"Drop ignored: {e}")
            return False
        return True

    def _clear_marker(self) -> None:
        if self._dragged_task_id is not None:
            self._dragged_task_id = None
            self._notify()

    # -------------------- serialization --------------------
    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {status: [t.to_dict() for t in self._columns[status]] for status in STATUSES}

    @classmethod
    def from_dict(cls, data: Mapping[str, Iterable[Mapping[str, Any]]], cell_height: float = CARD_CELL_HEIGHT) -> 'Board':
        """Rebuild a board; column order comes from the lists, status from each task."""
        tasks: List[Task] = []
        for status in STATUSES:
            for raw in data.get(status, ()):
                tasks.append(Task.from_dict(raw))
        return cls(tasks, cell_height=cell_height)

    def __str__(self) -> str:
        return (f'Todo: {len(self._columns[TODO])} tasks, '
                f'Done: {len(self._columns[DONE])} tasks')
