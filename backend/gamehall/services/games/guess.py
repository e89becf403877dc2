"""Letter guessing: everyone in the room races to guess a hidden letter."""

import random
import string
from dataclasses import asdict, dataclass, field
from typing import List, Optional

from gamehall.errors import IllegalAction
from .base import Action, Game

HIT = "hit"
MISS = "miss"


@dataclass
class GuessEntry:
    name: str
    guess: str
    result: str


@dataclass
class GuessState:
    secret: str
    history: List[GuessEntry] = field(default_factory=list)
    winner: Optional[str] = None

    def to_dict(self):
        return asdict(self)


def _pick_secret(exclude=None, rng=None):
    letters = [c for c in string.ascii_lowercase if c != exclude]
    return (rng or random).choice(letters)


def init(rng=None) -> GuessState:
    return GuessState(secret=_pick_secret(rng=rng))


def apply_guess(state: GuessState, actor_name: str, raw, rng=None) -> GuessState:
    guess = str(raw if raw is not None else "").strip().lower()[:1]
    if not guess:
        raise IllegalAction("empty guess")

    result = MISS
    if guess == state.secret:
        result = HIT
        state.winner = actor_name
        state.secret = _pick_secret(exclude=guess, rng=rng)
    state.history.append(GuessEntry(actor_name, guess, result))
    return state


class GuessGame(Game):
    name = "guess"
    actions = ("guess",)

    def init(self, seats=()):
        return init()

    def apply_action(self, state, actor, action: Action):
        if action.name != "guess":
            raise IllegalAction(f"{action.name} is not a guess action")
        return apply_guess(state, actor.name, action.payload)

    def winner(self, state):
        return state.winner
