from collections import namedtuple
from typing import Any, Dict, List, Optional, Sequence

from gamehall.errors import IllegalAction

Action = namedtuple("Action", ["name", "payload"])


def as_index(value) -> int:
    """Coerce an index payload (int or numeric string) or raise IllegalAction."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise IllegalAction(f"bad index {value!r}")
    try:
        return int(value)
    except ValueError:
        raise IllegalAction(f"bad index {value!r}")


class Game:
    """Capability interface shared by every game type.

    A room holds one ``Game`` and the state it produced. The state machines
    live in the game modules; subclasses only route to them.
    """

    name: str = ""
    actions: Sequence[str] = ()

    def init(self, seats: Sequence[str]) -> Any:
        raise NotImplementedError

    def apply_action(self, state: Any, actor, action: Action) -> Any:
        """Apply ``action`` by ``actor`` (a participant) or raise IllegalAction."""
        raise NotImplementedError

    def public_view(self, state: Any) -> Dict[str, Any]:
        return state.to_dict()

    def private_view(self, state: Any, seat: str) -> Optional[Dict[str, Any]]:
        return None

    def seats(self, state: Any) -> List[str]:
        return []

    def reconcile(self, state: Any, members: Sequence[str]) -> Any:
        """Bring seating in line with room membership. Default: no seating."""
        return state

    def winner(self, state: Any) -> Optional[str]:
        return None

    def victory_notice(self, state: Any, names: Dict[str, str]) -> Optional[str]:
        return None

    def check(self, state: Any) -> None:
        """Raise InvariantViolation if ``state`` is inconsistent."""

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"
