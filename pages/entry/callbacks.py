"""Callbacks for the entry page."""
from dash import no_update
from dash.dependencies import Input, Output, State
from dash.exceptions import PreventUpdate

from components.common import status_message
from components.form import VALIDATED_FIELDS, field_id
from utils import actions
from utils.actions import ActionResult
from utils.validation import VerificationForm, today_string
from utils.verifications import STATUS_LOADING

FORM_FIELDS = ('mc_number', 'carrier', 'amount', 'approved', 'entered_by', 'notes', 'date_entered')


def empty_form_values() -> list:
    """Values for FORM_FIELDS after a successful save."""
    blank = VerificationForm(date_entered=today_string())
    return [getattr(blank, name) for name in FORM_FIELDS]


def entry_outputs(result: ActionResult) -> list:
    """Output values for ``save_entry``: status, list snapshot, field values, invalid flags."""
    invalid = [name in result.invalid_fields for name in VALIDATED_FIELDS]

    if not result.ok:
        # Keep what the user typed
        return (
            [status_message(result.message), no_update]
            + [no_update] * len(FORM_FIELDS)
            + invalid
        )

    return (
        [status_message(result.message, ok=True), result.snapshot]
        + empty_form_values()
        + invalid
    )


def register_callbacks(app, hook):
    """Register entry page callbacks against ``hook``."""

    @app.callback(
        Output('entry-fieldset', 'disabled'),
        Input('store-verifications', 'data')
    )
    def toggle_entry_form(snapshot):
        """Disable the form while the list is loading."""
        return not snapshot or snapshot.get('status') == STATUS_LOADING

    @app.callback(
        [Output('entry-status', 'children'),
         Output('store-verifications', 'data', allow_duplicate=True)]
        + [Output(field_id('entry', name), 'value') for name in FORM_FIELDS]
        + [Output(field_id('entry', name), 'invalid') for name in VALIDATED_FIELDS],
        Input('btn-save-entry', 'n_clicks'),
        [State(field_id('entry', name), 'value') for name in FORM_FIELDS],
        prevent_initial_call=True
    )
    def save_entry(n_clicks, *values):
        """Validate and save a new verification."""
        if not n_clicks:
            raise PreventUpdate

        form = VerificationForm(**dict(zip(FORM_FIELDS, values)))
        return entry_outputs(actions.submit_entry(hook, form))
