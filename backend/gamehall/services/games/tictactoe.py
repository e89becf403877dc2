"""Two-player tic-tac-toe. Seats take X and O in join order."""

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Sequence

from gamehall.errors import IllegalAction
from .base import Action, Game, as_index
from .seating import assign_seats

X = "X"
O = "O"
CELLS = 9
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


@dataclass
class TicTacToeState:
    board: List[Optional[str]] = field(default_factory=lambda: [None] * CELLS)
    turn: str = X
    marks: Dict[str, str] = field(default_factory=dict)
    winner: Optional[str] = None
    draw: bool = False

    def to_dict(self):
        return asdict(self)


def check_winner(board: Sequence[Optional[str]]) -> Optional[str]:
    for a, b, c in WINNING_LINES:
        if board[a] and board[a] == board[b] == board[c]:
            return board[a]
    return None


def init(seats: Sequence[str] = ()) -> TicTacToeState:
    marks = dict(zip(assign_seats(seats), (X, O)))
    return TicTacToeState(marks=marks)


def apply_move(state: TicTacToeState, actor_id: str, cell) -> TicTacToeState:
    if state.winner or state.draw:
        raise IllegalAction("game is finished")
    mark = state.marks.get(actor_id)
    if mark is None or mark != state.turn:
        raise IllegalAction("not your turn")
    index = as_index(cell)
    if not 0 <= index < CELLS:
        raise IllegalAction(f"cell {index} out of range")
    if state.board[index]:
        raise IllegalAction(f"cell {index} is taken")

    state.board[index] = mark
    winner = check_winner(state.board)
    if winner:
        state.winner = winner
    elif all(state.board):
        state.draw = True
    else:
        state.turn = O if state.turn == X else X
    return state


class TicTacToeGame(Game):
    name = "tictactoe"
    actions = ("ttt-move",)

    def init(self, seats=()):
        return init(seats)

    def apply_action(self, state, actor, action: Action):
        if action.name != "ttt-move":
            raise IllegalAction(f"{action.name} is not a tic-tac-toe action")
        return apply_move(state, actor.sid, action.payload)

    def seats(self, state):
        return list(state.marks)

    def winner(self, state):
        return state.winner
