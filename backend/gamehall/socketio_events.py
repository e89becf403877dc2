from flask import request
from flask_socketio import join_room, leave_room, emit
from gamehall import socketio, get_registry

# Inbound game actions, routed to whichever game the sender's room is playing
GAME_ACTIONS = ('guess', 'ttt-move', 'gin-draw', 'gin-discard')


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    participant = get_registry().connect(_get_sid())
    emit('connected', participant.to_dict())


def handle_disconnect(reason=None):
    get_registry().disconnect(_get_sid())


def handle_set_name(name):
    get_registry().set_name(_get_sid(), name)


def handle_join_room(code):
    registry = get_registry()
    sid = _get_sid()
    target = registry.room_code(code)
    previous = registry.current_room(sid)
    # Socket.IO rooms must match before the registry broadcasts
    if previous is not None and previous.code != target:
        leave_room(previous.code)
    join_room(target)
    registry.join(sid, target)


def handle_leave_room(code=None):
    registry = get_registry()
    room = registry.leave(_get_sid(), code)
    if room is not None:
        leave_room(room.code)


def handle_select_game(game_type):
    get_registry().select_game(_get_sid(), game_type)


def _action_handler(action_name):
    def handler(payload=None):
        get_registry().act(_get_sid(), action_name, payload)
    handler.__name__ = f"handle_{action_name.replace('-', '_')}"
    return handler


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('set-name', handle_set_name, namespace=namespace)
    socketio.on_event('join-room', handle_join_room, namespace=namespace)
    socketio.on_event('leave-room', handle_leave_room, namespace=namespace)
    socketio.on_event('select-game', handle_select_game, namespace=namespace)
    for action_name in GAME_ACTIONS:
        socketio.on_event(action_name, _action_handler(action_name), namespace=namespace)
