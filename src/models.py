"""Data models for the two-column task board.

Internal status keys are "todo" and "done". The serialized / display labels
are "To Do" and "Done"; ``normalize_status`` accepts either form.
"""
from __future__ import annotations
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Tuple
from errors import InvalidStatusError

TODO = 'todo'
DONE = 'done'
STATUSES: Tuple[str, ...] = (TODO, DONE)
STATUS_LABELS: Dict[str, str] = {TODO: 'To Do', DONE: 'Done'}

_STATUS_LOOKUP: Dict[str, str] = {}
for _key, _label in STATUS_LABELS.items():
    _STATUS_LOOKUP[_key] = _key
    _STATUS_LOOKUP[_label.lower()] = _key


def normalize_status(value: Any) -> str:
    """Map a status key or label to its internal key."""
    if isinstance(value, str):
        key = _STATUS_LOOKUP.get(value.strip().lower())
        if key:
            return key
    raise InvalidStatusError(value)


def new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass(eq=False)
class Task:
    """A single card on the board.

    Fields:
        id: Opaque identifier; fixed for the task's lifetime and the only
            key used for equality, hashing and lookup.
        title: Short free-text title.
        description: Free-text body, may be empty.
        status: "todo" or "done"; always matches the column holding the task.
    """
    title: str
    description: str = ''
    status: str = TODO
    id: str = field(default_factory=new_task_id)

    def __post_init__(self) -> None:
        self.status = normalize_status(self.status)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == 'id' and 'id' in self.__dict__:
            raise AttributeError('Task.id cannot be reassigned')
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(id={self.id}, title={self.title}, status={self.status})"

    def copy(self, **changes: Any) -> 'Task':
        """Independent value copy; ``changes`` replaces fields (not ``id``)."""
        if 'id' in changes:
            raise AttributeError('Task.id cannot be reassigned')
        return replace(self, **changes)

    @property
    def status_label(self) -> str:
        return STATUS_LABELS[self.status]

    # -------------------- serialization --------------------
    def to_dict(self) -> Dict[str, str]:
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'status': self.status_label,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> 'Task':
        raw_title = raw.get('title')
        if raw_title is None:
            raise ValueError('Task title is required')
        tid = raw.get('id')
        return cls(
            id=str(tid) if tid is not None else new_task_id(),
            title=str(raw_title),
            description=str(raw.get('description') or ''),
            status=normalize_status(raw.get('status', TODO)),
        )


def sample_tasks() -> List[Task]:
    """Demo seed: three cards in To Do, two in Done."""
    return [
        Task(title='Buy Groceries', description='Milk, eggs, bread, fruits', status=TODO),
        Task(title='Finish Project Proposal', description='Draft the proposal for the new project.', status=TODO),
        Task(title='Call John Doe', description='Discuss meeting agenda.', status=DONE),
        Task(title='Plan Weekend Trip', description='Research destinations and book accommodation.', status=TODO),
        Task(title="Read 'The Martian'", description='Finish the current book.', status=DONE),
    ]
