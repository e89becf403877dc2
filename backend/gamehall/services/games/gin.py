"""Two-player gin rummy.

Turn cycle: ``wait -> draw -> discard -> draw -> ... -> over``. A game with
fewer than two seats sits in ``wait``; ``over`` is terminal until the room
re-selects the game or seating forces a fresh deal.
"""

from collections import Counter
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence

from gamehall.errors import IllegalAction, InvariantViolation
from .base import Action, Game, as_index
from .cards import DECK_SIZE, GIN_HAND_SIZE, build_deck, is_gin
from .seating import SEAT_COUNT, assign_seats, seat_changes

WAIT = "wait"
DRAW = "draw"
DISCARD = "discard"
OVER = "over"

STOCK = "stock"
DISCARD_PILE = "discard"

WAITING_NOTICE = "Waiting for a second player…"


@dataclass
class GinState:
    phase: str
    current: Optional[str]
    seats: List[str]
    hands: Dict[str, List[str]]
    stock: List[str]
    discard: List[str]
    waiting_for_players: bool
    winner: Optional[str] = None

    @property
    def full(self) -> bool:
        return len(self.seats) == SEAT_COUNT

    def to_dict(self):
        return asdict(self)


def init(seats: Sequence[str] = (), rng=None) -> GinState:
    """Shuffle a fresh deck and deal ten cards to each seat, one to discard."""
    deck = build_deck(rng)
    seats = assign_seats(seats)
    hands = {}
    for seat in seats:
        hands[seat] = deck[:GIN_HAND_SIZE]
        del deck[:GIN_HAND_SIZE]
    discard = [deck.pop(0)]
    full = len(seats) == SEAT_COUNT
    return GinState(
        phase=DRAW if full else WAIT,
        current=seats[0] if full else None,
        seats=seats,
        hands=hands,
        stock=deck,
        discard=discard,
        waiting_for_players=not full,
    )


def _check_turn(state: GinState, actor_id: str, phase: str) -> None:
    if not state.full:
        raise IllegalAction("game is not fully seated", notice=WAITING_NOTICE)
    if state.phase == OVER:
        raise IllegalAction("game is over")
    if state.phase != phase or state.current != actor_id:
        raise IllegalAction(f"not {actor_id}'s turn to {phase}")


def apply_draw(state: GinState, actor_id: str, source) -> GinState:
    _check_turn(state, actor_id, DRAW)
    if source == STOCK:
        pile = state.stock
    elif source == DISCARD_PILE:
        pile = state.discard
    else:
        raise IllegalAction(f"unknown draw source {source!r}")
    if not pile:
        raise IllegalAction(f"{source} pile is empty")

    state.hands[actor_id].append(pile.pop())
    state.phase = DISCARD
    return state


def apply_discard(state: GinState, actor_id: str, hand_index) -> GinState:
    _check_turn(state, actor_id, DISCARD)
    hand = state.hands[actor_id]
    index = as_index(hand_index)
    if not 0 <= index < len(hand):
        raise IllegalAction(f"no card at index {index}")

    state.discard.append(hand.pop(index))
    if is_gin(hand):
        state.phase = OVER
        state.winner = actor_id
        return state

    position = state.seats.index(actor_id)
    state.current = state.seats[(position + 1) % len(state.seats)]
    state.phase = DRAW
    return state


def reconcile_seating(state: GinState, members: Sequence[str], rng=None) -> GinState:
    """Re-derive seats from room membership.

    A single newcomer joining a one-seat game is dealt in from the stock.
    Any other change, including a seat leaving, re-deals from a fresh deck,
    so a departed seat's hand is never left out of the 52 cards.
    """
    desired = assign_seats(members)
    if desired != state.seats:
        added, removed = seat_changes(state.seats, desired)
        deal_in = (
            len(added) == 1
            and not removed
            and len(state.seats) == 1
            and len(desired) == SEAT_COUNT
            and len(state.stock) >= GIN_HAND_SIZE
        )
        if deal_in:
            existing = state.seats[0]
            newcomer = added[0]
            state.hands[newcomer] = state.stock[-GIN_HAND_SIZE:]
            del state.stock[-GIN_HAND_SIZE:]
            state.seats = desired
            state.waiting_for_players = False
            state.phase = DRAW
            if state.current not in state.seats:
                state.current = existing
        else:
            state = init(desired, rng=rng)

    if not state.full:
        state.phase = WAIT
        state.current = None
        state.waiting_for_players = True
    return state


def check_integrity(state: GinState) -> None:
    cards = list(state.stock) + list(state.discard)
    for seat in state.seats:
        cards.extend(state.hands.get(seat, ()))
    if len(cards) != DECK_SIZE:
        raise InvariantViolation(f"gin state holds {len(cards)} cards, expected {DECK_SIZE}")
    duplicates = [card for card, count in Counter(cards).items() if count > 1]
    if duplicates:
        raise InvariantViolation(f"duplicate cards in gin state: {duplicates}")
    if set(state.hands) != set(state.seats):
        raise InvariantViolation("gin hands do not match seats")


def public_view(state: GinState) -> dict:
    """Shared view of the table. Never includes hand contents."""
    return {
        "type": "gin",
        "phase": state.phase,
        "current": state.current,
        "players": list(state.seats),
        "waitingForPlayers": state.waiting_for_players,
        "stockCount": len(state.stock),
        "discardTop": state.discard[-1] if state.discard else None,
        "handCounts": {seat: len(hand) for seat, hand in state.hands.items()},
        "winner": state.winner,
    }


class GinGame(Game):
    name = "gin"
    actions = ("gin-draw", "gin-discard")

    def init(self, seats=()):
        return init(seats)

    def apply_action(self, state, actor, action: Action):
        if action.name == "gin-draw":
            state = apply_draw(state, actor.sid, action.payload)
        elif action.name == "gin-discard":
            state = apply_discard(state, actor.sid, action.payload)
        else:
            raise IllegalAction(f"{action.name} is not a gin action")
        return state

    def public_view(self, state):
        return public_view(state)

    def private_view(self, state, seat):
        if seat not in state.seats:
            return None
        return {"hand": list(state.hands.get(seat, ()))}

    def seats(self, state):
        return list(state.seats)

    def reconcile(self, state, members):
        return reconcile_seating(state, members)

    def winner(self, state):
        return state.winner

    def victory_notice(self, state, names):
        if state.winner is None:
            return None
        return f"{names.get(state.winner, 'Player')} went GIN!"

    def check(self, state):
        check_integrity(state)
