from __future__ import annotations

import copy
import itertools
from types import SimpleNamespace

import pytest

from utils.supabase_client import RecordStore
from utils.verifications import VerificationHook


class FakeAPIError(Exception):
    """Stand-in for postgrest's APIError: carries a ``message`` attribute."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FakeQuery:
    """Minimal Supabase query builder over an in-memory table."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.op = None
        self.payload = None
        self.filters = []
        self.order_by = None

    def select(self, _columns="*"):
        self.op = "select"
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def insert(self, row):
        self.op = "insert"
        self.payload = row
        return self

    def update(self, fields):
        self.op = "update"
        self.payload = fields
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def _matches(self, row):
        return all(row.get(c) == v for c, v in self.filters)

    def execute(self):
        self.db.calls.append((self.op, self.table, copy.deepcopy(self.payload), list(self.filters)))
        if self.db.fail_with is not None:
            error, self.db.fail_with = self.db.fail_with, None
            raise error

        rows = self.db.rows
        if self.op == "select":
            data = [dict(r) for r in rows]
            if self.order_by:
                column, desc = self.order_by
                data.sort(key=lambda r: r.get(column) or "", reverse=desc)
            return SimpleNamespace(data=data)
        if self.op == "insert":
            row = dict(self.payload)
            row["id"] = f"id-{next(self.db.ids)}"
            row["created_at"] = self.db.next_timestamp()
            rows.append(row)
            return SimpleNamespace(data=[dict(row)])
        if self.op == "update":
            changed = []
            for row in rows:
                if self._matches(row):
                    row.update(self.payload)
                    changed.append(dict(row))
            return SimpleNamespace(data=changed)
        if self.op == "delete":
            removed = [r for r in rows if self._matches(r)]
            self.db.rows = [r for r in rows if not self._matches(r)]
            return SimpleNamespace(data=removed)
        raise AssertionError(f"unexpected op {self.op}")


class FakeSupabase:
    def __init__(self, rows=None):
        self.rows = [dict(r) for r in rows or []]
        self.calls = []
        self.fail_with = None
        self.ids = itertools.count(1)
        self._clock = itertools.count(1)

    def next_timestamp(self):
        return f"2024-06-01T10:00:{next(self._clock):02d}+00:00"

    def table(self, name):
        return FakeQuery(self, name)


def make_record(**overrides):
    record = {
        "id": "rec-1",
        "mc_number": "MC123456",
        "carrier": "Acme Freight",
        "amount": 50.0,
        "approved": False,
        "entered_by": "Alice",
        "notes": None,
        "date_entered": "2024-01-01",
        "created_at": "2024-01-01T09:00:00+00:00",
    }
    record.update(overrides)
    return record


@pytest.fixture
def fake_db():
    return FakeSupabase()


@pytest.fixture
def store(fake_db):
    return RecordStore(fake_db)


@pytest.fixture
def hook(store):
    return VerificationHook(store)
