# app.py

from flask import Flask, request
from flask_socketio import join_room
import logging
import os

from config import SECRET_KEY
from extensions import socketio, broadcast
from monitor import build_monitor

# --- Import Blueprints from the 'routes' package ---
from routes.view_routes import view_bp
from routes.dashboard_routes import dashboard_bp

logger = logging.getLogger(__name__)

# Determine the absolute path to the project directory
BASE_DIR = os.path.abspath(os.path.dirname(__file__))

# Define paths for static and template folders relative to the base directory
static_folder_path = os.path.join(BASE_DIR, 'static')
template_folder_path = os.path.join(BASE_DIR, 'templates')


def create_app(monitor=None):
    """
    Creates and configures the Flask application.
    A prepared Monitor can be passed in (tests do); otherwise one is built
    that broadcasts page updates over Socket.IO. The poller is not started here.
    """
    app = Flask(
        __name__,
        static_folder=static_folder_path,
        template_folder=template_folder_path
    )
    app.config['SECRET_KEY'] = SECRET_KEY

    # Socket.IO must be ready before anything can broadcast a page update
    socketio.init_app(app)
    app.config['MONITOR'] = monitor if monitor is not None else build_monitor(emit=broadcast)

    # --- Register Blueprints ---
    # The dashboard page itself
    app.register_blueprint(view_bp, url_prefix='/')

    # JSON/CSV endpoints (e.g., /api/dashboard, /api/thresholds)
    app.register_blueprint(dashboard_bp, url_prefix='/api')

    @socketio.on('join_room')
    def handle_join_room_event(data):
        """Adds the client to a room for broadcasting."""
        logger.info("CLIENT-JOIN: A client (%s) joined the room '%s'", request.sid, data['room'])
        join_room(data['room'])

    return app
