import random
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from gamehall.services.games import Game


def generate_display_name():
    """Placeholder name for a fresh connection."""
    return f"Player-{random.randint(0, 9999)}"


@dataclass
class Participant:
    sid: str
    name: str = field(default_factory=generate_display_name)
    room: Optional[str] = None

    def to_dict(self):
        return {'id': self.sid, 'name': self.name}


@dataclass(eq=False)
class Room:
    code: str
    game: Game
    state: Any
    members: List[str] = field(default_factory=list)
    names: Dict[str, str] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @property
    def game_type(self) -> str:
        return self.game.name

    def add_member(self, sid, name):
        if sid not in self.members:
            self.members.append(sid)
        self.names[sid] = name

    def remove_member(self, sid):
        if sid in self.members:
            self.members.remove(sid)
        self.names.pop(sid, None)

    def seats(self) -> List[str]:
        return self.game.seats(self.state)

    def to_dict(self):
        return {
            'code': self.code,
            'game_type': self.game_type,
            'members': len(self.members),
            'seats': self.seats(),
        }
