"""Task movement: the column state transition for a single drop.

``resolve_move`` is pure. It never mutates the sequences it is given and
builds both resulting columns completely before returning, so a caller can
publish them in one step.
"""
from typing import List, NamedTuple, Optional, Sequence, Tuple
from errors import InvalidStatusError, NotFoundError
from models import DONE, STATUSES, TODO, Task


class MoveResult(NamedTuple):
    todo: Tuple[Task, ...]
    done: Tuple[Task, ...]
    moved: Task
    index: int

    def column(self, status: str) -> Tuple[Task, ...]:
        return self.todo if status == TODO else self.done


def _index_of(tasks: Sequence[Task], task_id: str) -> Optional[int]:
    for idx, task in enumerate(tasks):
        if task.id == task_id:
            return idx
    return None


def _clamp(index: int, upper: int) -> int:
    return max(0, min(index, upper))


def resolve_move(
    todo: Sequence[Task],
    done: Sequence[Task],
    dropped: Task,
    target_status: str,
    target_index: int,
) -> MoveResult:
    """Compute both columns after ``dropped`` lands in ``target_status``.

    ``dropped`` is the drag-start snapshot: only its id and status are used.
    When its status equals ``target_status`` the task is reordered within that
    column, otherwise it is transferred between columns. ``target_index`` is
    measured against the layout before the task is removed.

    Raises NotFoundError if the task is not where the case requires it.
    """
    if target_status not in STATUSES:
        raise InvalidStatusError(target_status)
    columns = {TODO: list(todo), DONE: list(done)}
    target: List[Task] = columns[target_status]

    if dropped.status == target_status:
        source_index = _index_of(target, dropped.id)
        if source_index is None:
            raise NotFoundError(dropped.id, (target_status,))
        task = target.pop(source_index)
        adjusted = target_index
        # removal shifted everything after source_index up by one
        if source_index < adjusted:
            adjusted = max(0, adjusted - 1)
        index = _clamp(adjusted, len(target))
        target.insert(index, task)
    else:
        task = None
        for status in STATUSES:
            source_index = _index_of(columns[status], dropped.id)
            if source_index is not None:
                task = columns[status].pop(source_index)
                break
        if task is None:
            raise NotFoundError(dropped.id, STATUSES)
        task = task.copy(status=target_status)
        index = _clamp(target_index, len(target))
        target.insert(index, task)

    return MoveResult(tuple(columns[TODO]), tuple(columns[DONE]), task, index)
