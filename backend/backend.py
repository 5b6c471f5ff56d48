"""REST backend for household cash-flow projections."""

from __future__ import annotations

import os
import sys

import logging
import math
from typing import Any, Dict, List

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from flask import Flask, jsonify, request

from backend.config import configure_logging, load_config_from_env
from backend.data_model import (
    RESULTS_TABLE,
    HouseholdError,
    YearRow,
    default_household_payload,
    household_from_payload,
    rows_to_frame,
)
from backend.engine.analysis import deficit_banner, first_deficit_year
from backend.engine.simulator import simulate
from backend.engine.state import ResultState

logger = logging.getLogger(__name__)

app = Flask(__name__)

config = load_config_from_env()
result_state = ResultState()


def _is_nan(value: Any) -> bool:
    try:
        return not math.isfinite(value)
    except (TypeError, ValueError):
        return False


def _sanitize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    clean_rows: List[Dict[str, Any]] = []
    for row in records:
        clean_rows.append({key: (None if _is_nan(value) else value) for key, value in row.items()})
    return clean_rows


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _rows_payload(rows: List[YearRow] | tuple) -> Dict[str, Any]:
    records = _sanitize_records(rows_to_frame(rows).to_dict(orient="records"))
    banner = deficit_banner(rows)
    return {
        "rows": records,
        "firstDeficitYear": first_deficit_year(rows),
        "banner": {"level": banner.level, "message": banner.message, "year": banner.year},
    }


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,DELETE,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/schema")
def get_schema():
    return jsonify({"results": RESULTS_TABLE.to_payload()})


@app.get("/api/defaults")
def get_defaults():
    try:
        start_year = int(request.args.get("startYear", config.start_year))
        current_age = int(request.args.get("currentAge", 32))
    except (TypeError, ValueError):
        return jsonify({"error": "startYear and currentAge must be integers."}), 400
    housing_type = str(request.args.get("housing", "rent")).lower()
    if housing_type not in {"rent", "loan"}:
        return jsonify({"error": "housing must be 'rent' or 'loan'."}), 400
    return jsonify(default_household_payload(start_year, current_age=current_age, housing_type=housing_type))


@app.post("/api/simulate")
def run_simulation():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "Request body must be a JSON household description."}), 400
    household_raw = _extract_payload_value(payload, "household", default=payload)
    try:
        household = household_from_payload(household_raw)
        rows = simulate(household)
    except HouseholdError as exc:
        logger.warning("Rejected household payload: %s", exc)
        return jsonify({"error": str(exc)}), 400

    result_state.replace(rows)
    logger.info(
        "Projected %d year(s) starting %s; first deficit year: %s",
        len(rows),
        household.settings.start_year,
        first_deficit_year(rows),
    )
    return jsonify(_rows_payload(rows))


@app.get("/api/results")
def latest_results():
    return jsonify(_rows_payload(result_state.get()))


@app.delete("/api/results")
def clear_results():
    result_state.clear()
    return jsonify({"message": "Results cleared.", "rows": []})


if __name__ == "__main__":
    configure_logging(config)
    app.run(host=config.host, port=config.port, debug=config.debug)
