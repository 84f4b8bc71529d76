"""Layout components for the verification list."""
import dash_bootstrap_components as dbc
from dash import dcc, html

from components.common import approved_badge
from utils import formatting as fmt
from utils.table import ASC, SORT_COLUMNS

VIEW_TABLE = 'table'
VIEW_CARDS = 'cards'

MESSAGE_LOADING = "Loading verifications…"
MESSAGE_EMPTY = "No verifications yet."
MESSAGE_NO_MATCH = "No results match your search."


def sort_indicator(sort: dict | None, column: str) -> str:
    """Arrow shown next to the active sort column."""
    if not sort or sort.get('column') != column:
        return ''
    return ' ↑' if sort.get('direction') == ASC else ' ↓'


def _sort_header(column: str, label: str, view: str):
    return dbc.Button([
        label,
        html.Span(id={'type': 'sort-indicator', 'column': column, 'view': view}),
    ],
        id={'type': 'sort-header', 'column': column, 'view': view},
        color="link",
        size="sm",
        n_clicks=0,
        className="p-0 fw-semibold text-decoration-none text-body text-nowrap",
    )


def create_table_rows(records: list[dict]):
    """Rows for the wide table view."""
    return [
        html.Tr([
            html.Td(r.get('mc_number'), className="font-monospace"),
            html.Td(r.get('carrier')),
            html.Td(fmt.format_amount(r.get('amount'))),
            html.Td(approved_badge(r.get('approved'))),
            html.Td(r.get('entered_by')),
            html.Td(
                fmt.format_notes(r.get('notes')),
                className="text-truncate",
                style={'maxWidth': '200px'},
                title=r.get('notes') or '',
            ),
            html.Td(fmt.format_date(r.get('date_entered'))),
            html.Td(fmt.format_datetime(r.get('created_at')), className="text-muted small"),
        ],
            id={'type': 'verification-row', 'id': r.get('id'), 'view': VIEW_TABLE},
            n_clicks=0,
            style={'cursor': 'pointer'},
        )
        for r in records
    ]


def create_cards(records: list[dict]):
    """Condensed cards for narrow screens."""
    return [
        html.Div(
            dbc.Card(dbc.CardBody([
                html.Div([
                    html.Span(r.get('mc_number'), className="font-monospace fw-semibold"),
                    approved_badge(r.get('approved')),
                ], className="d-flex justify-content-between"),
                html.Div(r.get('carrier'), className="text-truncate"),
                html.Div([
                    html.Span(fmt.format_amount(r.get('amount')), className="font-monospace"),
                    html.Span(fmt.format_date(r.get('date_entered')), className="text-muted small"),
                ], className="d-flex justify-content-between"),
            ], className="py-2")),
            id={'type': 'verification-row', 'id': r.get('id'), 'view': VIEW_CARDS},
            n_clicks=0,
            className="mb-2",
            style={'cursor': 'pointer'},
        )
        for r in records
    ]


def layout():
    """Create the verification list with search, sort and error panel."""
    return dbc.Card([
        dbc.CardHeader([
            dbc.Row([
                dbc.Col([
                    dbc.Input(
                        id="verification-search",
                        type="search",
                        placeholder="Search MC#, Carrier, Amount, User, Notes…",
                        value="",
                    ),
                ], md=6),
                dbc.Col([
                    html.Small(id="verification-count", className="text-muted"),
                ], md=6, className="text-md-end mt-2 mt-md-0"),
            ], className="align-items-center"),
        ]),
        dbc.CardBody([
            # Load failure with manual retry
            html.Div(
                id="list-error-panel",
                style={'display': 'none'},
                children=dbc.Alert([
                    html.P(id="list-error-text", className="mb-2"),
                    dbc.Button([
                        html.I(className="fas fa-redo me-1"),
                        "Retry"
                    ], id="btn-retry", color="danger", size="sm", n_clicks=0),
                ], color="danger", className="mb-0"),
            ),
            dcc.Loading(html.Div(id="list-message", className="text-center text-muted py-4")),
            html.Div(id="verification-results", style={'display': 'none'}, children=[
                html.Div(
                    dbc.Table([
                        html.Thead(html.Tr([
                            html.Th(_sort_header(column, label, VIEW_TABLE))
                            for column, label in SORT_COLUMNS
                        ])),
                        html.Tbody(id="verification-table-body"),
                    ], hover=True, responsive=True, className="mb-0 small"),
                    className="d-none d-md-block",
                ),
                html.Div([
                    html.Div([
                        html.Span("Sort:", className="small text-muted me-2"),
                        *[
                            html.Span(_sort_header(column, label, VIEW_CARDS), className="me-3")
                            for column, label in SORT_COLUMNS
                        ],
                    ], className="d-flex flex-wrap mb-2"),
                    html.Div(id="verification-cards"),
                ], className="d-md-none"),
            ]),
        ]),
    ])
