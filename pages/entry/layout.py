"""Layout for the entry page."""
import dash_bootstrap_components as dbc
from dash import dcc, html

from components.form import create_verification_fields


def layout():
    """Create the new verification form."""
    return dbc.Card([
        dbc.CardBody([
            html.H5("Enter MC Verification", className="mb-3"),
            html.Fieldset(
                id="entry-fieldset",
                disabled=True,
                children=[
                    create_verification_fields("entry"),
                    html.Div([
                        dbc.Button([
                            html.I(className="fas fa-save me-2"),
                            "Save Verification"
                        ], id="btn-save-entry", color="primary", n_clicks=0),
                        dcc.Loading(
                            html.Div(id="entry-status", className="ms-3 flex-grow-1"),
                            type="dot",
                        ),
                    ], className="d-flex flex-wrap align-items-center mt-2"),
                ],
            ),
        ])
    ])
