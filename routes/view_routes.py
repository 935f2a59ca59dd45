# routes/view_routes.py
from flask import render_template, Blueprint

from threshold_config import METRIC_KEYS, METRICS, LAST_UPDATED_SLOT, ALERT_SLOT

view_bp = Blueprint('view_bp', __name__)


@view_bp.route('/')
def index():
    """Serves the dashboard page: one card and one chart canvas per metric."""
    metrics = [dict(METRICS[key], key=key) for key in METRIC_KEYS]
    return render_template(
        'index.html',
        metrics=metrics,
        last_updated_slot=LAST_UPDATED_SLOT,
        alert_slot=ALERT_SLOT
    )
