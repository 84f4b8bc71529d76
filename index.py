"""MC-Check Application - Main entry point."""
import dash_bootstrap_components as dbc
from dash import dcc, html, Input, Output

from app import app, server, DEBUG, SUPABASE_URL, SUPABASE_ANON_KEY, SUPABASE_TABLE  # noqa: F401
from components.common import TAB_ENTER, TAB_LIST, get_header, get_tabs
from pages import entry, verifications
from pages.verifications.modal import MODE_VIEW
from utils.supabase_client import create_record_store
from utils.table import DEFAULT_SORT
from utils.verifications import VerificationHook


def create_layout():
    """Root layout: header, tabs, both views and the detail modal."""
    return html.Div([
        dcc.Location(id='url', refresh=False),

        # Data stores
        dcc.Store(id='store-verifications', storage_type='memory'),
        dcc.Store(id='store-sort', storage_type='memory', data=DEFAULT_SORT),
        dcc.Store(id='store-selected-id', storage_type='memory'),
        dcc.Store(id='store-modal-mode', storage_type='memory', data=MODE_VIEW),

        get_header(),

        dbc.Container([
            get_tabs(TAB_ENTER),
            html.Div(entry.layout(), id='view-enter'),
            html.Div(verifications.layout(), id='view-list', style={'display': 'none'}),
        ]),

        verifications.get_detail_modal(),
    ])


def register_callbacks(app, hook):
    """Wire every page to the data hook."""

    @app.callback(
        [Output('view-enter', 'style'),
         Output('view-list', 'style')],
        Input('main-tabs', 'active_tab')
    )
    def switch_tab(active_tab):
        """Show the selected tab's view."""
        if active_tab == TAB_LIST:
            return {'display': 'none'}, {}
        return {}, {'display': 'none'}

    entry.register_callbacks(app, hook)
    verifications.register_callbacks(app, hook)


store = create_record_store(SUPABASE_URL, SUPABASE_ANON_KEY, SUPABASE_TABLE)
hook = VerificationHook(store)

app.layout = create_layout()
register_callbacks(app, hook)


if __name__ == '__main__':
    app.run(debug=DEBUG)
