# main.py
import eventlet
eventlet.monkey_patch()

import logging
import sys

from config import HOST, PORT, LOG_LEVEL, SHEET_URL


def configure_logging():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
    )


# === Entry point ===
if __name__ == "__main__":
    configure_logging()
    logger = logging.getLogger("main")

    from app import create_app
    from extensions import socketio

    app = create_app()
    monitor = app.config['MONITOR']

    # Polling starts right away and is never stopped while the server is up.
    logger.info("Polling sheet at %s", SHEET_URL)
    monitor.poller.start()

    logger.info("Dashboard available on http://%s:%s", HOST, PORT)
    socketio.run(app, host=HOST, port=PORT)
