# alerter.py
"""
Builds the pre-filled alert e-mail offered by the dashboard when a reading
is unsafe. Nothing is sent from the server; the browser's mail client opens
the composed message.
"""
from html import escape
from urllib.parse import quote

from config import ALERT_BODY, ALERT_RECIPIENT, ALERT_SUBJECT


def build_mailto_link(recipient=ALERT_RECIPIENT, subject=ALERT_SUBJECT, body=ALERT_BODY):
    """Returns a mailto: URL with the subject and body percent-encoded."""
    return f"mailto:{recipient}?subject={quote(subject, safe='')}&body={quote(body, safe='')}"


def build_alert_button_html(href=None):
    """Markup for the alert action shown while any metric is unsafe."""
    href = href or build_mailto_link()
    return f'<a class="alert-button" href="{escape(href)}">⚠️ Send Alert Email</a>'
