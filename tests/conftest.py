"""Shared fakes and fixtures for the test suite."""

import random
from contextlib import contextmanager
from decimal import Decimal

import pytest

from turfzone.confirmation import ConfirmationGenerator
from turfzone.controller import ViewController
from turfzone.models import Turf
from turfzone.notices import NoticeBoard
from turfzone.session import Session


FOOTBALL_ROWS = [
    {"id": 1, "name": "Star Turf Club", "address": "12 MG Road", "hourly_rate": Decimal("1200.00"),
     "operating_hours": "06:00 - 23:00", "category": "Football"},
    {"id": 3, "name": "Ground Zero Arena", "address": "7 Lake View", "hourly_rate": Decimal("999.50"),
     "operating_hours": "07:00 - 22:00", "category": "Football"},
]


class FakeCursor:
    def __init__(self, rows, error=None):
        self.rows = rows
        self.error = error
        self.executed = []

    def execute(self, sql, params=None):
        self.executed.append((sql, params))
        if self.error is not None:
            raise self.error

    def fetchall(self):
        return list(self.rows)


class FakeConnection:
    def __init__(self, rows, error=None):
        self.cursors = []
        self.closed = False
        self._rows = rows
        self._error = error

    def cursor(self):
        cursor = FakeCursor(self._rows, self._error)
        self.cursors.append(cursor)
        return cursor


class FakeDatabase:
    """Stands in for ``turfzone.database.get_db``."""

    def __init__(self, rows=None, connect_error=None, query_error=None):
        self.rows = rows or []
        self.connect_error = connect_error
        self.query_error = query_error
        self.connections = []

    @contextmanager
    def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        conn = FakeConnection(self.rows, self.query_error)
        self.connections.append(conn)
        try:
            yield conn
        finally:
            conn.closed = True


class InMemoryTurfRepository:
    def __init__(self, turfs_by_category=None):
        self.turfs_by_category = turfs_by_category or {}
        self.calls = []

    def list_turfs_by_category(self, category):
        self.calls.append(category)
        return list(self.turfs_by_category.get(category, []))


@pytest.fixture
def football_turfs():
    return [Turf.from_row(row) for row in FOOTBALL_ROWS]


@pytest.fixture
def repository(football_turfs):
    return InMemoryTurfRepository({"Football": football_turfs})


@pytest.fixture
def session():
    return Session(logged_in=True)


@pytest.fixture
def notices():
    return NoticeBoard()


@pytest.fixture
def controller(repository, session, notices):
    controller = ViewController(
        repository=repository,
        session=session,
        generator=ConfirmationGenerator(random.Random(42)),
        notices=notices,
    )
    controller.start()
    return controller
