from flask import Blueprint, jsonify
from gamehall import get_registry
from gamehall.views import room_view

rooms = Blueprint('rooms', __name__)

@rooms.route('', methods=['GET'])
@rooms.route('/', methods=['GET'])
def list_rooms():
    """
    Lists every room with its active game and member count.
    """
    listed = sorted(get_registry().rooms(), key=lambda room: room.code)
    return jsonify([room.to_dict() for room in listed]), 200

@rooms.route('/<string:code>', methods=['GET'])
def get_room(code):
    """
    Returns the public view of a room. Private hands are never included.
    """
    room = get_registry().get(code)
    if room is None:
        return jsonify({'error': 'Room not found'}), 404
    with room.lock:
        return jsonify(room_view(room)), 200
