# threshold_config.py

# --- WHO Drinking-Water Thresholds ---
# pH is two-sided: safe from 6.5 to 8.5 inclusive.
# TDS (mg/L), turbidity (NTU) and temperature (°C) only have an upper limit.
PH_MIN = 6.5
PH_MAX = 8.5
TDS_MAX = 600
TURBIDITY_MAX = 5
TEMP_MAX = 30

WHO_THRESHOLDS = {
    "ph": {"min": PH_MIN, "max": PH_MAX},
    "tds": {"max": TDS_MAX},
    "turbidity": {"max": TURBIDITY_MAX},
    "temp": {"max": TEMP_MAX},
}

# Metric keys in the column order of the sheet (after the time column).
METRIC_KEYS = ("ph", "tds", "turbidity", "temp")

# --- Display Metadata ---
# label: chart/axis label, color: line color, card: summary slot, canvas: chart slot
METRICS = {
    "ph": {"label": "pH", "color": "blue", "card": "ph-card", "canvas": "phChart"},
    "tds": {"label": "TDS (mg/L)", "color": "green", "card": "tds-card", "canvas": "tdsChart"},
    "turbidity": {"label": "Turbidity (NTU)", "color": "orange", "card": "turbidity-card", "canvas": "turbidityChart"},
    "temp": {"label": "Temperature (°C)", "color": "red", "card": "temp-card", "canvas": "tempChart"},
}

LAST_UPDATED_SLOT = "last-updated"
ALERT_SLOT = "alertBtn"

CARD_SLOTS = tuple(METRICS[key]["card"] for key in METRIC_KEYS)
CHART_CANVASES = tuple(METRICS[key]["canvas"] for key in METRIC_KEYS)
