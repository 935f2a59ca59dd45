# routes/dashboard_routes.py
"""
Handles the API endpoints the dashboard page reads: the current page state,
the WHO thresholds, the latest reading and a CSV export of the snapshot.
"""
from flask import Blueprint, jsonify, current_app, Response
import io
import csv
import logging

from alerter import build_mailto_link
from presentation import json_safe
from sheet_api import COLUMNS
from threshold_config import WHO_THRESHOLDS, METRICS, METRIC_KEYS
from water_quality import evaluate

logger = logging.getLogger(__name__)

dashboard_bp = Blueprint('dashboard_bp', __name__)


def _monitor():
    return current_app.config['MONITOR']


@dashboard_bp.route('/dashboard', methods=['GET'])
def get_dashboard():
    """Returns every slot's content and the live chart configurations."""
    return jsonify(_monitor().snapshot())


@dashboard_bp.route('/thresholds')
def get_thresholds():
    """Provides the WHO thresholds and display metadata to the front-end."""
    return jsonify({
        "thresholds": WHO_THRESHOLDS,
        "metrics": {key: METRICS[key] for key in METRIC_KEYS}
    })


@dashboard_bp.route('/readings/latest', methods=['GET'])
def get_latest_reading():
    """Latest reading of the current snapshot, with the status of each metric."""
    readings = _monitor().poller.latest_readings
    if not readings:
        return jsonify({"error": "No data available"}), 404

    latest = readings[-1]
    response = latest._asdict()
    response["status"] = {key: evaluate(key, getattr(latest, key)) for key in METRIC_KEYS}
    response["count"] = len(readings)
    return jsonify(json_safe(response))


@dashboard_bp.route('/readings/export', methods=['GET'])
def export_readings():
    """Downloads the current in-memory snapshot as CSV."""
    readings = _monitor().poller.latest_readings or ()
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(COLUMNS)
    for reading in readings:
        writer.writerow(reading)
    return Response(
        output.getvalue(),
        mimetype='text/csv',
        headers={'Content-Disposition': 'attachment; filename="water_quality_readings.csv"'}
    )


@dashboard_bp.route('/alert/mailto', methods=['GET'])
def get_alert_mailto():
    """The pre-filled alert e-mail link."""
    return jsonify({"href": build_mailto_link()})
