"""Entry detail modal: view, edit and delete-confirm states."""
import dash_bootstrap_components as dbc
from dash import html

from components.common import approved_badge
from components.form import create_verification_fields
from utils import formatting as fmt

MODE_VIEW = 'view'
MODE_EDIT = 'edit'
MODE_DELETE_CONFIRM = 'delete-confirm'
MODES = (MODE_VIEW, MODE_EDIT, MODE_DELETE_CONFIRM)

ACTION_EDIT = 'edit'
ACTION_DELETE = 'delete'
ACTION_CANCEL = 'cancel'
ACTION_CLOSE = 'close'

_TRANSITIONS = {
    (MODE_VIEW, ACTION_EDIT): MODE_EDIT,
    (MODE_VIEW, ACTION_DELETE): MODE_DELETE_CONFIRM,
    (MODE_EDIT, ACTION_CANCEL): MODE_VIEW,
    (MODE_DELETE_CONFIRM, ACTION_CANCEL): MODE_VIEW,
}

# Button id -> modal action
BUTTON_ACTIONS = {
    'btn-modal-edit': ACTION_EDIT,
    'btn-modal-delete': ACTION_DELETE,
    'btn-cancel-edit': ACTION_CANCEL,
    'btn-cancel-delete': ACTION_CANCEL,
}

HIDDEN = {'display': 'none'}
SHOWN = {}


def next_mode(mode: str | None, action: str) -> str:
    """Apply an action to the modal state.

    Closing always lands in view; unknown transitions keep the current mode.
    """
    mode = mode if mode in MODES else MODE_VIEW
    if action == ACTION_CLOSE:
        return MODE_VIEW
    return _TRANSITIONS.get((mode, action), mode)


def pane_styles(mode: str | None) -> dict:
    """Visibility of each modal section for a mode."""
    mode = mode if mode in MODES else MODE_VIEW
    return {
        'detail-view-pane': HIDDEN if mode == MODE_EDIT else SHOWN,
        'detail-edit-pane': SHOWN if mode == MODE_EDIT else HIDDEN,
        'footer-view': SHOWN if mode == MODE_VIEW else HIDDEN,
        'footer-edit': SHOWN if mode == MODE_EDIT else HIDDEN,
        'footer-delete': SHOWN if mode == MODE_DELETE_CONFIRM else HIDDEN,
    }


def modal_title(mode: str | None) -> str:
    return "Edit verification" if mode == MODE_EDIT else "Verification details"


def _detail(label: str, value, class_name: str = ''):
    return html.Div([
        html.Dt(label, className="small text-uppercase text-muted"),
        html.Dd(value, className=f"mb-2 {class_name}".strip()),
    ])


def create_detail_view(record: dict | None):
    """Read-only view of every field, including the created timestamp."""
    if not record:
        return html.P("This verification is no longer available.", className="text-muted mb-0")

    return html.Dl([
        _detail("MC#", record.get('mc_number'), "font-monospace fw-semibold"),
        _detail("Carrier", record.get('carrier')),
        _detail("Amount", fmt.format_amount(record.get('amount')), "font-monospace"),
        _detail("Approved", approved_badge(record.get('approved'))),
        _detail("User (entered by)", record.get('entered_by')),
        _detail("Notes", fmt.format_notes(record.get('notes')), "text-break"),
        _detail("Date entered", fmt.format_date(record.get('date_entered')), "font-monospace"),
        _detail("Created", fmt.format_datetime(record.get('created_at')), "font-monospace small text-muted"),
    ], className="mb-0")


def get_detail_modal():
    """Create the detail modal. All sections exist; callbacks toggle them."""
    styles = pane_styles(MODE_VIEW)
    return dbc.Modal([
        dbc.ModalHeader(dbc.ModalTitle(modal_title(MODE_VIEW), id="detail-modal-title")),
        dbc.ModalBody([
            html.Div(id="detail-view-pane", style=styles['detail-view-pane']),
            html.Div(
                dbc.Form(create_verification_fields("edit", wide=False), id="edit-form"),
                id="detail-edit-pane",
                style=styles['detail-edit-pane'],
            ),
            html.Div(id="detail-modal-message", className="mt-3"),
        ]),
        dbc.ModalFooter([
            html.Div([
                dbc.Button([
                    html.I(className="fas fa-edit me-1"),
                    "Edit"
                ], id="btn-modal-edit", color="primary", className="me-2", n_clicks=0),
                dbc.Button([
                    html.I(className="fas fa-trash me-1"),
                    "Delete"
                ], id="btn-modal-delete", color="danger", outline=True, className="me-2", n_clicks=0),
                dbc.Button("Close", id="btn-close-modal", color="secondary", outline=True, n_clicks=0),
            ], id="footer-view", style=styles['footer-view']),
            html.Div([
                dbc.Button([
                    html.I(className="fas fa-save me-1"),
                    "Save"
                ], id="btn-save-edit", color="primary", className="me-2", n_clicks=0),
                dbc.Button("Cancel", id="btn-cancel-edit", color="secondary", outline=True, n_clicks=0),
            ], id="footer-edit", style=styles['footer-edit']),
            html.Div([
                html.Span("Delete this entry?", className="me-2 text-muted"),
                dbc.Button("Yes, delete", id="btn-confirm-delete", color="danger", className="me-2", n_clicks=0),
                dbc.Button("Cancel", id="btn-cancel-delete", color="secondary", outline=True, n_clicks=0),
            ], id="footer-delete", style=styles['footer-delete']),
        ]),
    ], id="detail-modal", is_open=False, size="lg", scrollable=True)
