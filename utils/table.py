"""Search and sort for the verification list.

Both operate on the list of record dicts from the hook and return new lists
holding the same dict objects; the input list is never modified.
"""
import locale

import pandas as pd

# Columns searched by the free-text filter
SEARCH_FIELDS = ('mc_number', 'carrier', 'entered_by', 'amount', 'notes')

# Sortable columns in display order, with their header labels
SORT_COLUMNS = [
    ('mc_number', 'MC#'),
    ('carrier', 'Carrier'),
    ('amount', 'Amount'),
    ('approved', 'Approved'),
    ('entered_by', 'User'),
    ('notes', 'Notes'),
    ('date_entered', 'Date entered'),
    ('created_at', 'Created'),
]
SORTABLE = {column for column, _ in SORT_COLUMNS}

NUMERIC_COLUMNS = {'amount'}
BOOLEAN_COLUMNS = {'approved'}
TIMESTAMP_COLUMNS = {'created_at'}

ASC = 'asc'
DESC = 'desc'

DEFAULT_SORT = {'column': 'created_at', 'direction': DESC}


def _search_text(value) -> str:
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        # Match how the amount is stored and typed (12, not 12.0)
        return str(int(value))
    return str(value)


def filter_records(records: list[dict], query: str | None) -> list[dict]:
    """Case-insensitive substring search over ``SEARCH_FIELDS``.

    A blank query returns the list unchanged.
    """
    needle = (query or '').strip().lower()
    if not needle or not records:
        return list(records)

    df = pd.DataFrame(
        [[_search_text(r.get(f)) for f in SEARCH_FIELDS] for r in records],
        columns=list(SEARCH_FIELDS),
    )
    mask = pd.Series(False, index=df.index)
    for column in SEARCH_FIELDS:
        mask |= df[column].str.lower().str.contains(needle, regex=False)

    return [records[i] for i in df.index[mask.to_numpy()]]


def _collate(text: str) -> str:
    """Collation key for text columns.

    Text is casefolded before the locale transform, so case never breaks a
    tie: "acme" and "Acme" compare equal and keep their list order under the
    stable sort, in both directions. Browser locale comparison would instead
    put the lowercase form first.
    """
    try:
        return locale.strxfrm(text.casefold())
    except (ValueError, OSError):
        return text.casefold()


def _sort_key(column: str):
    """Return a pandas ``key`` callable normalising one column for sorting."""
    if column in NUMERIC_COLUMNS:
        return lambda s: pd.to_numeric(s, errors='coerce')
    if column in BOOLEAN_COLUMNS:
        return lambda s: s.map(lambda v: 1 if v is True or v == 1 else 0)
    if column in TIMESTAMP_COLUMNS:
        return lambda s: pd.to_datetime(s, utc=True, errors='coerce', format='ISO8601')
    # Absent values sort as the empty string
    return lambda s: s.map(lambda v: _collate('' if v is None or v != v else str(v)))


def sort_records(records: list[dict], column: str | None, direction: str = ASC) -> list[dict]:
    """Stable single-column sort; unknown columns leave the order unchanged."""
    if not column or column not in SORTABLE or not records:
        return list(records)

    values = pd.DataFrame({column: [r.get(column) for r in records]}, dtype=object)
    ordered = values.sort_values(
        column,
        ascending=(direction != DESC),
        kind='mergesort',
        na_position='last',
        key=_sort_key(column),
    )
    return [records[i] for i in ordered.index]


def toggle_sort(sort: dict | None, column: str) -> dict:
    """Header click: same column flips direction, another column sorts ascending."""
    sort = sort or DEFAULT_SORT
    if column not in SORTABLE:
        return dict(sort)
    if sort.get('column') == column:
        direction = ASC if sort.get('direction') == DESC else DESC
        return {'column': column, 'direction': direction}
    return {'column': column, 'direction': ASC}


def apply_view(records: list[dict], query: str | None, sort: dict | None) -> list[dict]:
    """Filter then sort, as shown in the list view."""
    sort = sort or DEFAULT_SORT
    return sort_records(
        filter_records(records, query),
        sort.get('column'),
        sort.get('direction', ASC),
    )
