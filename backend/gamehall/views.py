"""Projections of authoritative room state sent to clients."""

from typing import Any, Dict


def room_view(room) -> Dict[str, Any]:
    """Public view shared by everyone in the room."""
    return {
        'room': room.code,
        'gameType': room.game_type,
        'players': [{'id': sid, 'name': room.names.get(sid, sid)} for sid in room.members],
        'state': room.game.public_view(room.state),
    }


def private_views(room) -> Dict[str, Dict[str, Any]]:
    """Per-seat views keyed by sid. Empty for games without hidden state."""
    views = {}
    for seat in room.seats():
        view = room.game.private_view(room.state, seat)
        if view is not None:
            views[seat] = view
    return views
