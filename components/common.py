"""Common UI components shared across pages."""
import dash_bootstrap_components as dbc
from dash import html

TAB_ENTER = 'enter'
TAB_LIST = 'list'

TABS = [
    (TAB_ENTER, "Enter MC Verification"),
    (TAB_LIST, "Verification List"),
]


def get_header():
    """Create the application header."""
    return dbc.Navbar(
        dbc.Container([
            html.Div([
                dbc.NavbarBrand([
                    html.I(className="fas fa-truck me-2"),
                    "MC-Check"
                ], className="fs-4 fw-bold"),
                html.Small("MC verification entries", className="d-block text-muted"),
            ]),
        ]),
        color="white",
        className="mb-4 border-bottom shadow-sm"
    )


def get_tabs(active_tab: str = TAB_ENTER):
    """Create the tab switcher."""
    return dbc.Tabs(
        [dbc.Tab(label=label, tab_id=tab_id) for tab_id, label in TABS],
        id="main-tabs",
        active_tab=active_tab,
        className="mb-4",
    )


def status_message(text: str | None, ok: bool = False):
    """Inline status message next to the control that triggered an action."""
    if not text:
        return None
    if ok:
        return dbc.Alert([
            html.I(className="fas fa-check me-2"),
            text
        ], color="success", duration=4000, className="mb-0 py-2")
    return dbc.Alert([
        html.I(className="fas fa-exclamation-circle me-2"),
        text
    ], color="danger", className="mb-0 py-2")


def approved_badge(approved):
    """Yes/No badge for the approval flag."""
    if approved:
        return dbc.Badge("Yes", color="success")
    return dbc.Badge("No", color="secondary")
