"""Verification form fields shared by the entry page and the edit modal."""
import dash_bootstrap_components as dbc
from dash import html

from utils.validation import VerificationForm

# Form field name -> component id suffix
FIELD_SUFFIXES = {
    'mc_number': 'mc-number',
    'carrier': 'carrier',
    'amount': 'amount',
    'entered_by': 'entered-by',
    'date_entered': 'date',
    'approved': 'approved',
    'notes': 'notes',
}

# Fields that can be flagged invalid, in the order used by callbacks
VALIDATED_FIELDS = ('mc_number', 'carrier', 'amount', 'entered_by', 'date_entered')


def field_id(prefix: str, name: str) -> str:
    return f"{prefix}-{FIELD_SUFFIXES[name]}"


def _label(text: str, target: str, required: bool = False):
    children = [text]
    if required:
        children.append(html.Span("*", className="text-danger ms-1"))
    return dbc.Label(children, html_for=target, className="small text-uppercase text-muted mb-1")


def create_verification_fields(prefix: str, form: VerificationForm | None = None, wide: bool = True):
    """Create the input rows for a verification form.

    Args:
        prefix: Component id prefix ('entry' or 'edit').
        form: Optional initial values.
        wide: Lay fields out in columns (entry page) or stacked (modal).
    """
    form = form or VerificationForm()
    md = 4 if wide else 12
    lg = 2 if wide else 12

    return html.Div([
        dbc.Row([
            dbc.Col([
                _label("MC#", field_id(prefix, 'mc_number'), required=True),
                dbc.Input(
                    type="text",
                    id=field_id(prefix, 'mc_number'),
                    value=form.mc_number,
                    placeholder="123456",
                ),
            ], md=md, lg=lg),
            dbc.Col([
                _label("Carrier", field_id(prefix, 'carrier'), required=True),
                dbc.Input(
                    type="text",
                    id=field_id(prefix, 'carrier'),
                    value=form.carrier,
                    placeholder="Carrier",
                ),
            ], md=md, lg=lg),
            dbc.Col([
                _label("Amount", field_id(prefix, 'amount'), required=True),
                dbc.Input(
                    type="number",
                    id=field_id(prefix, 'amount'),
                    value=form.amount,
                    placeholder="0.00",
                    step="0.01",
                    min=0,
                ),
            ], md=md, lg=lg),
            dbc.Col([
                _label("User", field_id(prefix, 'entered_by'), required=True),
                dbc.Input(
                    type="text",
                    id=field_id(prefix, 'entered_by'),
                    value=form.entered_by,
                    placeholder="Name",
                ),
            ], md=md, lg=lg),
            dbc.Col([
                _label("Date", field_id(prefix, 'date_entered'), required=True),
                dbc.Input(
                    type="date",
                    id=field_id(prefix, 'date_entered'),
                    value=form.date_entered,
                ),
            ], md=md, lg=lg),
            dbc.Col([
                dbc.Checkbox(
                    id=field_id(prefix, 'approved'),
                    label="Approved",
                    value=bool(form.approved),
                ),
            ], md=md, lg=lg, className="d-flex align-items-end pb-2"),
        ], className="g-2 mb-2"),
        dbc.Row([
            dbc.Col([
                _label("Notes", field_id(prefix, 'notes')),
                dbc.Textarea(
                    id=field_id(prefix, 'notes'),
                    value=form.notes or '',
                    placeholder="Optional notes",
                    rows=2 if wide else 3,
                ),
            ]),
        ], className="mb-2"),
    ])
