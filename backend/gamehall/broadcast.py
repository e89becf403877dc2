"""Outbound side of the room engine.

The registry talks to a ``Notifier``; the Socket.IO implementation turns
that into ``system``, ``room-state`` and ``gin-private`` events.
"""

from gamehall.views import private_views, room_view

SYSTEM_EVENT = 'system'
ROOM_STATE_EVENT = 'room-state'
PRIVATE_EVENT = 'gin-private'


class Notifier:
    """Does nothing. Used when the registry runs without a transport."""

    def announce(self, room, message):
        pass

    def publish(self, room):
        pass


class SocketIONotifier(Notifier):
    def __init__(self, socketio, namespace='/ws'):
        self.socketio = socketio
        self.namespace = namespace

    def announce(self, room, message):
        self.socketio.emit(SYSTEM_EVENT, message, to=room.code, namespace=self.namespace)

    def publish(self, room):
        for sid, view in private_views(room).items():
            self.socketio.emit(PRIVATE_EVENT, view, to=sid, namespace=self.namespace)
        self.socketio.emit(ROOM_STATE_EVENT, room_view(room), to=room.code, namespace=self.namespace)
