import threading

import pytest

from conftest import FakeAPIError, make_record
from utils.supabase_client import StoreError
from utils.verifications import STATUS_ERROR, STATUS_LOADING, STATUS_READY


def test_initial_state_is_loading_and_empty(hook):
    assert hook.status == STATUS_LOADING
    assert hook.loading
    assert hook.records == []


def test_fetch_keeps_store_order(fake_db, hook):
    fake_db.rows = [
        make_record(id="t1", created_at="2024-01-01T00:00:00+00:00"),
        make_record(id="t2", created_at="2024-01-02T00:00:00+00:00"),
    ]
    hook.fetch_all()
    assert hook.status == STATUS_READY
    assert hook.error is None
    assert [r["id"] for r in hook.records] == ["t2", "t1"]


def test_fetch_failure_enters_error_with_empty_list(fake_db, hook):
    fake_db.rows = [make_record()]
    hook.fetch_all()
    fake_db.fail_with = FakeAPIError("network down")
    hook.refetch()
    assert hook.status == STATUS_ERROR
    assert hook.error == "network down"
    assert hook.records == []


def test_refetch_recovers_after_error(fake_db, hook):
    fake_db.rows = [make_record()]
    fake_db.fail_with = FakeAPIError("boom")
    hook.fetch_all()
    assert hook.status == STATUS_ERROR
    hook.refetch()
    assert hook.status == STATUS_READY
    assert len(hook.records) == 1


def test_add_refetches_the_list(fake_db, hook):
    hook.fetch_all()
    hook.add_verification({"mc_number": "MC1", "carrier": "Acme", "amount": 1.0,
                           "approved": False, "entered_by": "Al", "notes": None,
                           "date_entered": "2024-01-01"})
    assert [op for op, *_ in fake_db.calls] == ["select", "insert", "select"]
    assert [r["mc_number"] for r in hook.records] == ["MC1"]


def test_failed_mutation_propagates_and_keeps_state(fake_db, hook):
    fake_db.rows = [make_record(id="a")]
    hook.fetch_all()
    before = hook.snapshot()

    fake_db.fail_with = FakeAPIError("rejected")
    with pytest.raises(StoreError, match="rejected"):
        hook.add_verification({"mc_number": "MC2"})
    assert hook.snapshot() == before


def test_update_changes_only_given_fields(fake_db, hook):
    original = make_record(id="a", approved=False)
    fake_db.rows = [dict(original)]
    hook.fetch_all()

    hook.update_verification("a", {"approved": True})

    [updated] = hook.records
    assert updated["approved"] is True
    assert {k: v for k, v in updated.items() if k != "approved"} == \
        {k: v for k, v in original.items() if k != "approved"}


def test_delete_removes_record_and_second_delete_errors(fake_db, hook):
    fake_db.rows = [make_record(id="a"), make_record(id="b")]
    hook.fetch_all()

    hook.delete_verification("a")
    assert [r["id"] for r in hook.records] == ["b"]

    with pytest.raises(StoreError):
        hook.delete_verification("a")
    assert [r["id"] for r in hook.records] == ["b"]


def test_get_and_snapshot(fake_db, hook):
    fake_db.rows = [make_record(id="a")]
    hook.fetch_all()
    assert hook.get("a")["id"] == "a"
    assert hook.get("missing") is None
    assert hook.get(None) is None
    snapshot = hook.snapshot()
    assert snapshot["status"] == STATUS_READY
    assert snapshot["error"] is None
    assert snapshot["records"][0]["id"] == "a"


def test_fetch_and_mutations_return_their_own_snapshot(fake_db, hook):
    fake_db.rows = [make_record(id="a")]
    assert hook.fetch_all()["status"] == STATUS_READY

    snapshot = hook.delete_verification("a")
    assert snapshot == {"status": STATUS_READY, "records": [], "error": None}

    fake_db.fail_with = FakeAPIError("down")
    assert hook.refetch() == {"status": STATUS_ERROR, "records": [], "error": "down"}


def test_returned_snapshot_is_settled_while_another_fetch_is_in_flight(fake_db, hook, monkeypatch):
    fake_db.rows = [make_record(id="a")]
    list_all = hook.store.list_all
    in_flight = threading.Event()
    release = threading.Event()

    def slow_list_all():
        if threading.current_thread() is not threading.main_thread():
            in_flight.set()
            release.wait(timeout=5)
        return list_all()

    monkeypatch.setattr(hook.store, "list_all", slow_list_all)

    published = hook.fetch_all()
    worker = threading.Thread(target=hook.refetch)
    worker.start()
    try:
        assert in_flight.wait(timeout=5)
        # the shared state now reads loading; what this request fetched does not
        assert hook.snapshot()["status"] == STATUS_LOADING
        assert published["status"] == STATUS_READY
        assert [r["id"] for r in published["records"]] == ["a"]

        added = hook.add_verification({"mc_number": "MC2", "carrier": "Acme", "amount": 1.0,
                                       "approved": False, "entered_by": "Al", "notes": None,
                                       "date_entered": "2024-01-01"})
        assert added["status"] == STATUS_READY
        assert len(added["records"]) == 2
    finally:
        release.set()
        worker.join(timeout=5)

    assert hook.status == STATUS_READY
    assert len(hook.records) == 2
