"""Exceptions raised by the task board.

Out-of-range drop positions are clamped rather than raised, so there is no
index error here.
"""


class BoardError(Exception):
    """Base class for task board errors."""


class NotFoundError(BoardError, LookupError):
    """A task id is missing from the column(s) that were searched."""

    def __init__(self, task_id: str, searched: tuple = ()):
        self.task_id = task_id
        self.searched = tuple(searched)
        where = ', '.join(self.searched) if self.searched else 'board'
        super().__init__(f'Task id {task_id} not found in {where}.')


class InvalidStatusError(BoardError, ValueError):
    """A status value that is neither "todo" nor "done"."""

    def __init__(self, status: object):
        self.status = status
        super().__init__(f'Invalid status: {status!r}')


class DuplicateTaskError(BoardError, ValueError):
    """A seed list contains the same task id more than once."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f'Duplicate task id: {task_id}')
