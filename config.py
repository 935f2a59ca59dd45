# config.py
import os

# --- Data Source ---
# The published Google Sheet, exported as CSV. First line is a header.
SHEET_URL = os.getenv(
    "SHEET_URL",
    "https://docs.google.com/spreadsheets/d/e/2PACX-1vTOo-23u4-0MMRp5rup1gVnNnf8EAiK_wb6L07VxO3LLsbrHhGnki9sZxzJtrysy8c2KUS6Lr9ls0Iw/pub?output=csv",
)
FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", 10))

# --- Poll Loop ---
POLL_INTERVAL_SECONDS = float(os.getenv("POLL_INTERVAL_SECONDS", 1))

# --- Dashboard ---
# 'average' shows the trailing-window mean, 'alert' shows the e-mail alert
# button when any metric is unsafe, 'both' does both.
DASHBOARD_MODE = os.getenv("DASHBOARD_MODE", "average").lower()
AVERAGE_WINDOW = int(os.getenv("AVERAGE_WINDOW", 100))
CHART_FILL = os.getenv("CHART_FILL", "true").lower() == "true"

# --- Alert E-mail (mailto link) ---
ALERT_RECIPIENT = os.getenv("ALERT_RECIPIENT", "waterquality.alerts@example.com")
ALERT_SUBJECT = os.getenv("ALERT_SUBJECT", "Water Quality Alert")
ALERT_BODY = os.getenv(
    "ALERT_BODY",
    "One or more water quality readings have exceeded WHO recommended limits. "
    "Please check the monitoring dashboard.",
)

# --- Web Server ---
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 5000))
SECRET_KEY = os.getenv("SECRET_KEY", "a-very-secret-key-that-you-should-change")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
