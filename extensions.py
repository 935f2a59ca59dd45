# extensions.py
from flask_socketio import SocketIO

socketio = SocketIO()

BROADCAST_ROOM = "broadcast_room"


def broadcast(event, data):
    """Sends an event to every dashboard page that joined the broadcast room."""
    socketio.emit(event, data, to=BROADCAST_ROOM)
