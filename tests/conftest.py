"""
Pytest configuration and fixtures.
"""

import pytest

from board import Board
from models import DONE, TODO, Task


@pytest.fixture
def t1():
    return Task(id="T1", title="Task 1", description="first", status=TODO)


@pytest.fixture
def t2():
    return Task(id="T2", title="Task 2", description="second", status=TODO)


@pytest.fixture
def t3():
    return Task(id="T3", title="Task 3", description="third", status=TODO)


@pytest.fixture
def d1():
    return Task(id="D1", title="Done 1", description="finished", status=DONE)


@pytest.fixture
def board(t1, t2, t3, d1):
    """todo = [T1, T2, T3], done = [D1], cell height 110."""
    return Board([t1, t2, t3, d1])