"""Input validation for MC verification forms.

Validation runs before any store call. ``VerificationForm.validate`` is a pure
function of the form state and returns a ``ValidationResult`` holding either
the cleaned payload or the list of field errors, in display order.
"""
import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

REQUIRED_FIELDS_MESSAGE = "MC#, Carrier, and User are required."
AMOUNT_MESSAGE = "Amount must be a valid number."
DATE_MESSAGE = "Date must be in YYYY-MM-DD format."

# Fields a client may write; id and created_at belong to the store
EDITABLE_FIELDS = (
    'mc_number', 'carrier', 'amount', 'approved', 'entered_by', 'notes', 'date_entered',
)


class ValidationError(ValueError):
    """Raised when input validation fails."""
    pass


def today_string() -> str:
    """Today's local date as YYYY-MM-DD."""
    return date.today().isoformat()


def clean_text(text: Optional[str]) -> str:
    """Trim text input; None becomes the empty string."""
    if text is None:
        return ''
    return str(text).strip()


def clean_notes(notes: Optional[str]) -> Optional[str]:
    """Trim notes; empty notes become None."""
    return clean_text(notes) or None


def validate_amount(amount) -> float:
    """Validate and convert amount to a non-negative float.

    Args:
        amount: Amount value (string, int or float)

    Raises:
        ValidationError: If amount is not a finite number >= 0
    """
    if isinstance(amount, bool):
        raise ValidationError(AMOUNT_MESSAGE)

    try:
        amount = float(str(amount).strip()) if isinstance(amount, str) else float(amount)
    except (TypeError, ValueError):
        raise ValidationError(AMOUNT_MESSAGE)

    if not math.isfinite(amount) or amount < 0:
        raise ValidationError(AMOUNT_MESSAGE)

    return amount


def validate_date(date_str: Optional[str]) -> str:
    """Validate date string format (YYYY-MM-DD).

    Raises:
        ValidationError: If the date is missing or malformed
    """
    if not date_str:
        raise ValidationError(DATE_MESSAGE)

    date_str = str(date_str).strip()
    if not re.match(r'^\d{4}-\d{2}-\d{2}$', date_str):
        raise ValidationError(DATE_MESSAGE)

    try:
        datetime.strptime(date_str, '%Y-%m-%d')
    except ValueError:
        raise ValidationError(DATE_MESSAGE)

    return date_str


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    payload: Optional[dict] = None
    errors: list = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> Optional[str]:
        """The message to show: the first error in validation order."""
        return self.errors[0].message if self.errors else None

    @property
    def invalid_fields(self) -> set:
        return {e.field for e in self.errors}


@dataclass
class VerificationForm:
    """Raw form state as entered by the user."""
    mc_number: Optional[str] = ''
    carrier: Optional[str] = ''
    amount: object = ''
    approved: bool = False
    entered_by: Optional[str] = ''
    notes: Optional[str] = ''
    date_entered: Optional[str] = field(default_factory=today_string)

    @classmethod
    def from_record(cls, record: dict) -> 'VerificationForm':
        """Seed the form from an existing record."""
        amount = record.get('amount')
        return cls(
            mc_number=record.get('mc_number') or '',
            carrier=record.get('carrier') or '',
            amount='' if amount is None else amount,
            approved=bool(record.get('approved')),
            entered_by=record.get('entered_by') or '',
            notes=record.get('notes') or '',
            date_entered=record.get('date_entered') or today_string(),
        )

    def validate(self) -> ValidationResult:
        """Validate the form without side effects.

        Errors are ordered: required text fields, then amount, then date.
        """
        errors = []
        cleaned = {}

        for name in ('mc_number', 'carrier', 'entered_by'):
            text = clean_text(getattr(self, name))
            if not text:
                errors.append(FieldError(name, REQUIRED_FIELDS_MESSAGE))
            cleaned[name] = text

        try:
            cleaned['amount'] = validate_amount(self.amount)
        except ValidationError as e:
            errors.append(FieldError('amount', str(e)))

        try:
            cleaned['date_entered'] = validate_date(self.date_entered)
        except ValidationError as e:
            errors.append(FieldError('date_entered', str(e)))

        if errors:
            return ValidationResult(errors=errors)

        cleaned['notes'] = clean_notes(self.notes)
        cleaned['approved'] = bool(self.approved)
        return ValidationResult(payload={k: cleaned[k] for k in EDITABLE_FIELDS})
