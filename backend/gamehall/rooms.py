"""Room registry: membership, game selection and action dispatch.

One ``RoomRegistry`` is created per Flask app and handed to the socket
handlers. Rooms are created on first join and live for the life of the
process unless removed explicitly.
"""

import logging
import threading
from typing import Dict, List, Optional

from gamehall.broadcast import Notifier
from gamehall.errors import IllegalAction, UnknownGameType
from gamehall.models import Participant, Room
from gamehall.services.games import DEFAULT_GAME, Action, game_for_action, get_game

DEFAULT_ROOM = 'lobby'
MAX_NAME_LENGTH = 32


class RoomRegistry:
    def __init__(self, notifier=None, logger=None, default_room=DEFAULT_ROOM,
                 max_name_length=MAX_NAME_LENGTH):
        self.notifier = notifier or Notifier()
        self.logger = logger or logging.getLogger(__name__)
        self.default_room = default_room
        self.max_name_length = max_name_length
        self._rooms: Dict[str, Room] = {}
        self._participants: Dict[str, Participant] = {}
        self._lock = threading.RLock()

    # ---- rooms ----

    def get(self, code) -> Optional[Room]:
        with self._lock:
            return self._rooms.get(code)

    def create(self, code) -> Room:
        game = get_game(DEFAULT_GAME)
        room = Room(code=code, game=game, state=game.init(()))
        with self._lock:
            self._rooms[code] = room
        self.logger.info(f"[room-create] room={code}")
        return room

    def remove(self, code) -> Optional[Room]:
        with self._lock:
            return self._rooms.pop(code, None)

    def ensure_room(self, code) -> Room:
        with self._lock:
            room = self._rooms.get(code)
            if room is None:
                room = self.create(code)
            return room

    def rooms(self) -> List[Room]:
        with self._lock:
            return list(self._rooms.values())

    # ---- participants ----

    def participant(self, sid) -> Optional[Participant]:
        with self._lock:
            return self._participants.get(sid)

    def connect(self, sid) -> Participant:
        with self._lock:
            participant = self._participants.get(sid)
            if participant is None:
                participant = Participant(sid=sid)
                self._participants[sid] = participant
        return participant

    def disconnect(self, sid) -> Optional[Room]:
        with self._lock:
            participant = self._participants.pop(sid, None)
        if participant is None:
            return None
        return self._leave(participant, announce=True)

    def current_room(self, sid) -> Optional[Room]:
        participant = self.participant(sid)
        if participant is None or participant.room is None:
            return None
        return self.get(participant.room)

    # ---- membership ----

    def room_code(self, code) -> str:
        return str(code or '').strip() or self.default_room

    def join(self, sid, code=None) -> Room:
        code = self.room_code(code)
        participant = self.participant(sid) or self.connect(sid)
        if participant.room and participant.room != code:
            self._leave(participant, announce=False)

        room = self.ensure_room(code)
        with room.lock:
            room.add_member(sid, participant.name)
            participant.room = code
            self._reconcile(room)
            self.logger.info(f"[room-join] room={code} sid={sid} members={len(room.members)}")
            self.notifier.announce(room, f"{participant.name} joined {code}")
            self.notifier.publish(room)
        return room

    def leave(self, sid, code=None) -> Optional[Room]:
        participant = self.participant(sid)
        if participant is None or participant.room is None:
            return None
        if code is not None and self.room_code(code) != participant.room:
            return None
        return self._leave(participant, announce=True)

    def _leave(self, participant, announce) -> Optional[Room]:
        room = self.get(participant.room) if participant.room else None
        participant.room = None
        if room is None:
            return None
        with room.lock:
            room.remove_member(participant.sid)
            self._reconcile(room)
            self.logger.info(
                f"[room-leave] room={room.code} sid={participant.sid} members={len(room.members)}"
            )
            if announce:
                self.notifier.announce(room, f"{participant.name} left")
            self.notifier.publish(room)
        return room

    def _reconcile(self, room) -> None:
        before = room.seats()
        room.state = room.game.reconcile(room.state, room.members)
        room.game.check(room.state)
        after = room.seats()
        if before != after:
            self.logger.info(f"[reseat] room={room.code} game={room.game_type} seats={after}")

    # ---- room actions ----

    def select_game(self, sid, game_type) -> bool:
        room = self.current_room(sid)
        if room is None:
            return False
        try:
            game = get_game(game_type)
        except UnknownGameType as exc:
            self.logger.debug(f"[action-rejected] room={room.code} sid={sid} reason={exc}")
            return False

        with room.lock:
            participant = self.participant(sid)
            if participant is None or sid not in room.members:
                return False
            room.game = game
            room.state = game.init(room.members)
            self._reconcile(room)
            self.logger.info(f"[game-select] room={room.code} game={game.name} sid={sid}")
            self.notifier.announce(room, f"{participant.name} set game to {game.name}")
            self.notifier.publish(room)
        return True

    def set_name(self, sid, name) -> bool:
        name = str(name if name is not None else '').strip()[:self.max_name_length]
        participant = self.participant(sid)
        if not name or participant is None:
            return False
        participant.name = name
        room = self.current_room(sid)
        if room is not None:
            with room.lock:
                # the participant may have switched rooms since the lookup
                if sid in room.members:
                    room.names[sid] = name
                    self.notifier.publish(room)
        return True

    def act(self, sid, action_name, payload=None) -> bool:
        """Apply a game action from ``sid``. Returns True if state changed."""
        room = self.current_room(sid)
        game = game_for_action(action_name)
        if room is None or game is None or room.game is not game:
            return False

        with room.lock:
            # re-check under the lock: select-game or disconnect may have run
            participant = self.participant(sid)
            if participant is None or sid not in room.members or room.game is not game:
                return False
            self._reconcile(room)
            winner = game.winner(room.state)
            try:
                room.state = game.apply_action(room.state, participant, Action(action_name, payload))
            except IllegalAction as exc:
                self.logger.debug(
                    f"[action-rejected] room={room.code} sid={sid} action={action_name} reason={exc}"
                )
                if exc.notice:
                    self.notifier.announce(room, exc.notice)
                return False
            game.check(room.state)

            new_winner = game.winner(room.state)
            if new_winner is not None and new_winner != winner:
                notice = game.victory_notice(room.state, room.names)
                if notice:
                    self.logger.info(f"[game-won] room={room.code} game={game.name} winner={new_winner}")
                    self.notifier.announce(room, notice)
            self.notifier.publish(room)
        return True
