import logging

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State, html

from backend.config import configure_logging, load_config_from_env
from backend.data_model import HouseholdError, default_household_payload, household_from_payload
from backend.engine.simulator import simulate
from backend.engine.state import ResultState
from components.form import FORM_FIELDS, build_form, payload_from_form
from components.results import build_results

logger = logging.getLogger(__name__)

config = load_config_from_env()
result_state = ResultState()

app = dash.Dash(__name__, external_stylesheets=[dbc.themes.DARKLY])


def build_layout(start_year: int, housing_type: str = "rent"):
    household = household_from_payload(default_household_payload(start_year, housing_type=housing_type))
    rows = simulate(household)
    result_state.replace(rows)
    logger.info("Rendering default household: %d year(s) from %d", len(rows), start_year)
    return dbc.Container(
        [
            html.H2("Household Cash-Flow Projection", className="my-3"),
            dbc.Row(
                [
                    dbc.Col(build_form(start_year), md=3),
                    dbc.Col(
                        [
                            html.Div(build_results(rows), id="results-container"),
                            html.P("Taxes and social insurance are approximations.", className="text-muted small"),
                        ],
                        md=9,
                    ),
                ]
            ),
        ],
        fluid=True,
    )


def run_projection(n_clicks, *values):
    """Simulate the household described by the form and show the new results."""
    payload = payload_from_form(config.start_year, *values)
    try:
        rows = simulate(household_from_payload(payload))
    except HouseholdError as exc:
        logger.warning("Rejected form input: %s", exc)
        return dbc.Alert(str(exc), color="danger")
    result_state.replace(rows)
    logger.info("Projected %d year(s) from the form (run %s)", len(rows), n_clicks)
    return build_results(rows)


app.layout = build_layout(config.start_year)
app.callback(
    Output("results-container", "children"),
    Input("run-button", "n_clicks"),
    [State(field, "value") for field in FORM_FIELDS],
    prevent_initial_call=True,
)(run_projection)

if __name__ == "__main__":
    configure_logging(config)
    app.run(host=config.host, port=config.dashboard_port, debug=config.debug)
