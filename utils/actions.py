"""User actions on verifications: validate, call the hook, report the outcome.

These are kept free of Dash so the callbacks only translate component
values in and ``ActionResult`` out.
"""
import logging
from dataclasses import dataclass, field

from utils.supabase_client import (
    DELETE_FAILED,
    SAVE_FAILED,
    UPDATE_FAILED,
    StoreError,
    describe_error,
)
from utils.validation import VerificationForm
from utils.verifications import VerificationHook

logger = logging.getLogger(__name__)

ADDED_MESSAGE = "Verification added successfully."
UPDATED_MESSAGE = "Updated."
DELETED_MESSAGE = "Deleted."


@dataclass(frozen=True)
class ActionResult:
    ok: bool
    message: str
    invalid_fields: set = field(default_factory=set)
    # state the hook reached after a successful write
    snapshot: dict | None = None


def _failure(error: Exception, fallback: str) -> ActionResult:
    if not isinstance(error, StoreError):
        logger.exception(fallback)
    return ActionResult(False, describe_error(error, fallback))


def submit_entry(hook: VerificationHook, form: VerificationForm) -> ActionResult:
    """Create a verification from the entry form."""
    result = form.validate()
    if not result.ok:
        return ActionResult(False, result.message, result.invalid_fields)

    try:
        snapshot = hook.add_verification(result.payload)
    except Exception as e:
        return _failure(e, SAVE_FAILED)
    return ActionResult(True, ADDED_MESSAGE, snapshot=snapshot)


def save_edit(hook: VerificationHook, record_id: str | None, form: VerificationForm) -> ActionResult:
    """Update a verification from the modal's edit form."""
    result = form.validate()
    if not result.ok:
        return ActionResult(False, result.message, result.invalid_fields)
    if not record_id:
        return ActionResult(False, UPDATE_FAILED)

    try:
        snapshot = hook.update_verification(record_id, result.payload)
    except Exception as e:
        return _failure(e, UPDATE_FAILED)
    return ActionResult(True, UPDATED_MESSAGE, snapshot=snapshot)


def confirm_delete(hook: VerificationHook, record_id: str | None) -> ActionResult:
    """Delete a verification after the user confirmed."""
    if not record_id:
        return ActionResult(False, DELETE_FAILED)

    try:
        snapshot = hook.delete_verification(record_id)
    except Exception as e:
        return _failure(e, DELETE_FAILED)
    return ActionResult(True, DELETED_MESSAGE, snapshot=snapshot)
