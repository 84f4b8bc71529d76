"""Callbacks for the verification list and the detail modal."""
from dash import callback_context, no_update
from dash.dependencies import ALL, Input, Output, State
from dash.exceptions import PreventUpdate

from components.common import status_message
from components.form import VALIDATED_FIELDS, field_id
from utils import actions
from utils.table import DEFAULT_SORT, apply_view, toggle_sort
from utils.validation import VerificationForm
from utils.verifications import STATUS_ERROR, STATUS_LOADING

from .layout import (
    MESSAGE_EMPTY,
    MESSAGE_LOADING,
    MESSAGE_NO_MATCH,
    create_cards,
    create_table_rows,
    sort_indicator,
)
from .modal import (
    ACTION_CLOSE,
    BUTTON_ACTIONS,
    MODE_EDIT,
    MODE_VIEW,
    create_detail_view,
    modal_title,
    next_mode,
    pane_styles,
)

HIDDEN = {'display': 'none'}
SHOWN = {}

EDIT_FIELDS = ('mc_number', 'carrier', 'amount', 'approved', 'entered_by', 'notes', 'date_entered')


def build_list_view(snapshot: dict | None, search: str | None, sort: dict | None) -> dict:
    """Work out what the list view shows for a hook snapshot.

    Returns a dict with ``error`` (message or None), ``message`` (loading or
    empty-state text or None), ``records`` (filtered and sorted) and ``count``.
    """
    snapshot = snapshot or {'status': STATUS_LOADING, 'records': [], 'error': None}
    records = snapshot.get('records') or []
    status = snapshot.get('status')

    if status == STATUS_ERROR:
        return {'error': snapshot.get('error'), 'message': None, 'records': [], 'count': ''}
    if status == STATUS_LOADING:
        return {'error': None, 'message': MESSAGE_LOADING, 'records': [], 'count': ''}

    shown = apply_view(records, search, sort or DEFAULT_SORT)
    if not records:
        message = MESSAGE_EMPTY
    elif not shown:
        message = MESSAGE_NO_MATCH
    else:
        message = None
    return {
        'error': None,
        'message': message,
        'records': shown,
        'count': f"{len(shown)} of {len(records)} verifications",
    }


def _triggered_value():
    ctx = callback_context
    if not ctx.triggered:
        return None
    return ctx.triggered[0]['value']


def register_callbacks(app, hook):
    """Register list and modal callbacks against ``hook``."""

    # =========================================================================
    # List Callbacks
    # =========================================================================

    @app.callback(
        Output('store-verifications', 'data'),
        [Input('url', 'pathname'),
         Input('btn-retry', 'n_clicks')]
    )
    def load_verifications(_pathname, _retry_clicks):
        """Fetch the list on page load and on Retry."""
        return hook.refetch()

    @app.callback(
        [Output('list-error-panel', 'style'),
         Output('list-error-text', 'children'),
         Output('list-message', 'children'),
         Output('verification-results', 'style'),
         Output('verification-table-body', 'children'),
         Output('verification-cards', 'children'),
         Output('verification-count', 'children')],
        [Input('store-verifications', 'data'),
         Input('verification-search', 'value'),
         Input('store-sort', 'data')]
    )
    def update_list(snapshot, search, sort):
        """Render the filtered and sorted list."""
        view = build_list_view(snapshot, search, sort)
        if view['error']:
            return SHOWN, view['error'], None, HIDDEN, [], [], ''

        records = view['records']
        return (
            HIDDEN,
            '',
            view['message'],
            SHOWN if records else HIDDEN,
            create_table_rows(records),
            create_cards(records),
            view['count'],
        )

    @app.callback(
        Output('store-sort', 'data'),
        Input({'type': 'sort-header', 'column': ALL, 'view': ALL}, 'n_clicks'),
        State('store-sort', 'data'),
        prevent_initial_call=True
    )
    def change_sort(_clicks, sort):
        """Header click toggles or switches the sort column."""
        trigger = callback_context.triggered_id
        if not trigger or not _triggered_value():
            raise PreventUpdate
        return toggle_sort(sort, trigger['column'])

    @app.callback(
        Output({'type': 'sort-indicator', 'column': ALL, 'view': ALL}, 'children'),
        Input('store-sort', 'data')
    )
    def update_sort_indicators(sort):
        """Arrow on the active sort column."""
        return [
            sort_indicator(sort or DEFAULT_SORT, output['id']['column'])
            for output in callback_context.outputs_list
        ]

    # =========================================================================
    # Modal Callbacks
    # =========================================================================

    @app.callback(
        [Output('store-selected-id', 'data'),
         Output('store-modal-mode', 'data'),
         Output('detail-modal', 'is_open'),
         Output('detail-modal-message', 'children')],
        Input({'type': 'verification-row', 'id': ALL, 'view': ALL}, 'n_clicks'),
        prevent_initial_call=True
    )
    def select_row(_clicks):
        """Open the detail modal for the clicked row."""
        trigger = callback_context.triggered_id
        # Rows rendered afresh report n_clicks=0
        if not trigger or not _triggered_value():
            raise PreventUpdate
        return trigger['id'], MODE_VIEW, True, None

    @app.callback(
        [Output('detail-modal-title', 'children'),
         Output('detail-view-pane', 'children')]
        + [Output(section, 'style') for section in pane_styles(MODE_VIEW)]
        + [Output(field_id('edit', name), 'value') for name in EDIT_FIELDS],
        [Input('store-selected-id', 'data'),
         Input('store-modal-mode', 'data'),
         Input('store-verifications', 'data')]
    )
    def render_modal(record_id, mode, _snapshot):
        """Show the section for the current mode; seed the edit form on entering edit."""
        record = hook.get(record_id)
        styles = pane_styles(mode)

        values = [no_update] * len(EDIT_FIELDS)
        if mode == MODE_EDIT and callback_context.triggered_id == 'store-modal-mode' and record:
            form = VerificationForm.from_record(record)
            values = [getattr(form, name) for name in EDIT_FIELDS]

        return (
            [modal_title(mode), create_detail_view(record)]
            + list(styles.values())
            + values
        )

    @app.callback(
        [Output('store-modal-mode', 'data', allow_duplicate=True),
         Output('detail-modal-message', 'children', allow_duplicate=True)]
        + [Output(field_id('edit', name), 'invalid', allow_duplicate=True) for name in VALIDATED_FIELDS],
        [Input(button_id, 'n_clicks') for button_id in BUTTON_ACTIONS],
        State('store-modal-mode', 'data'),
        prevent_initial_call=True
    )
    def change_mode(*args):
        """Edit / delete / cancel buttons."""
        mode = args[-1]
        button_id = callback_context.triggered_id
        if button_id not in BUTTON_ACTIONS or not _triggered_value():
            raise PreventUpdate
        return [next_mode(mode, BUTTON_ACTIONS[button_id]), None] + [False] * len(VALIDATED_FIELDS)

    @app.callback(
        Output('detail-modal', 'is_open', allow_duplicate=True),
        Input('btn-close-modal', 'n_clicks'),
        prevent_initial_call=True
    )
    def close_modal(n_clicks):
        if not n_clicks:
            raise PreventUpdate
        return False

    @app.callback(
        [Output('store-modal-mode', 'data', allow_duplicate=True),
         Output('detail-modal-message', 'children', allow_duplicate=True)],
        Input('detail-modal', 'is_open'),
        prevent_initial_call=True
    )
    def reset_modal(is_open):
        """Closing from any state discards unsaved edits."""
        if is_open:
            raise PreventUpdate
        return next_mode(None, ACTION_CLOSE), None

    @app.callback(
        [Output('detail-modal', 'is_open', allow_duplicate=True),
         Output('store-verifications', 'data', allow_duplicate=True),
         Output('detail-modal-message', 'children', allow_duplicate=True)]
        + [Output(field_id('edit', name), 'invalid', allow_duplicate=True) for name in VALIDATED_FIELDS],
        Input('btn-save-edit', 'n_clicks'),
        [State('store-selected-id', 'data')]
        + [State(field_id('edit', name), 'value') for name in EDIT_FIELDS],
        prevent_initial_call=True
    )
    def save_edit(n_clicks, record_id, *values):
        """Save edits; stay in edit mode on failure."""
        if not n_clicks:
            raise PreventUpdate

        form = VerificationForm(**dict(zip(EDIT_FIELDS, values)))
        result = actions.save_edit(hook, record_id, form)
        invalid = [name in result.invalid_fields for name in VALIDATED_FIELDS]

        if not result.ok:
            return [no_update, no_update, status_message(result.message)] + invalid
        return [False, result.snapshot, None] + invalid

    @app.callback(
        [Output('detail-modal', 'is_open', allow_duplicate=True),
         Output('store-verifications', 'data', allow_duplicate=True),
         Output('detail-modal-message', 'children', allow_duplicate=True)],
        Input('btn-confirm-delete', 'n_clicks'),
        State('store-selected-id', 'data'),
        prevent_initial_call=True
    )
    def delete_verification(n_clicks, record_id):
        """Delete after confirmation; stay in delete-confirm on failure."""
        if not n_clicks:
            raise PreventUpdate

        result = actions.confirm_delete(hook, record_id)
        if not result.ok:
            return no_update, no_update, status_message(result.message)
        return False, result.snapshot, None
