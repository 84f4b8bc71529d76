from unittest.mock import MagicMock

from conftest import FakeAPIError, make_record
from utils import actions
from utils.supabase_client import StoreError
from utils.validation import AMOUNT_MESSAGE, REQUIRED_FIELDS_MESSAGE, VerificationForm
from utils.verifications import VerificationHook


def entry_form(**overrides):
    values = dict(mc_number="MC1", carrier="Acme", amount=12.5, approved=False,
                  entered_by="Alice", notes="", date_entered="2024-01-01")
    values.update(overrides)
    return VerificationForm(**values)


def test_invalid_entry_never_reaches_the_store():
    store = MagicMock()
    hook = VerificationHook(store)

    result = actions.submit_entry(hook, entry_form(mc_number="  "))
    assert not result.ok
    assert result.message == REQUIRED_FIELDS_MESSAGE

    result = actions.submit_entry(hook, entry_form(amount="-3"))
    assert result.message == AMOUNT_MESSAGE

    store.insert.assert_not_called()
    store.list_all.assert_not_called()


def test_submit_entry_creates_and_refreshes(fake_db, hook):
    hook.fetch_all()
    result = actions.submit_entry(hook, entry_form(mc_number=" MC1 "))
    assert result.ok
    assert result.message == actions.ADDED_MESSAGE
    [record] = hook.records
    assert record["mc_number"] == "MC1"
    assert record["notes"] is None
    assert record["id"] and record["created_at"]
    assert result.snapshot["status"] == "ready"
    assert result.snapshot["records"] == hook.records


def test_failed_add_reports_message_and_leaves_list(fake_db, hook):
    fake_db.rows = [make_record(id="a")]
    hook.fetch_all()
    fake_db.fail_with = FakeAPIError("permission denied for table mc_verifications")

    result = actions.submit_entry(hook, entry_form())

    assert not result.ok
    assert result.message == "permission denied for table mc_verifications"
    assert [r["id"] for r in hook.records] == ["a"]
    assert result.snapshot is None


def test_unexpected_error_is_reported_with_fallback():
    hook = MagicMock()
    hook.add_verification.side_effect = RuntimeError()
    result = actions.submit_entry(hook, entry_form())
    assert not result.ok
    assert result.message == "Failed to save"


def test_save_edit_only_sends_editable_fields(fake_db, hook):
    fake_db.rows = [make_record(id="a", approved=False)]
    hook.fetch_all()

    form = VerificationForm.from_record(hook.get("a"))
    form.approved = True
    result = actions.save_edit(hook, "a", form)

    assert result.ok
    op, _, payload, filters = fake_db.calls[-2]
    assert op == "update"
    assert filters == [("id", "a")]
    assert "id" not in payload and "created_at" not in payload
    assert hook.get("a")["approved"] is True
    assert hook.get("a")["created_at"] == make_record()["created_at"]


def test_save_edit_failure_keeps_record(fake_db, hook):
    fake_db.rows = [make_record(id="a")]
    hook.fetch_all()
    result = actions.save_edit(hook, "gone", entry_form())
    assert not result.ok
    assert "no verification with id gone" in result.message
    assert hook.get("a")["mc_number"] == "MC123456"


def test_save_edit_validates_first():
    hook = MagicMock()
    result = actions.save_edit(hook, "a", entry_form(carrier=""))
    assert result.invalid_fields == {"carrier"}
    hook.update_verification.assert_not_called()


def test_confirm_delete(fake_db, hook):
    fake_db.rows = [make_record(id="a")]
    hook.fetch_all()

    assert actions.confirm_delete(hook, "a").ok
    assert hook.records == []

    again = actions.confirm_delete(hook, "a")
    assert not again.ok
    assert again.message.startswith("Delete failed")


def test_confirm_delete_without_selection():
    hook = MagicMock()
    result = actions.confirm_delete(hook, None)
    assert not result.ok
    hook.delete_verification.assert_not_called()


def test_store_error_messages_pass_through():
    hook = MagicMock()
    hook.delete_verification.side_effect = StoreError("row is locked")
    assert actions.confirm_delete(hook, "a").message == "row is locked"
