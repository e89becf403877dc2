"""Game domain services: card model, game state machines and seating.

Nothing here touches the transport; the room registry and socket handlers
import these modules, never the other way round.
"""

from gamehall.errors import UnknownGameType
from .base import Action, Game
from .gin import GinGame
from .guess import GuessGame
from .tictactoe import TicTacToeGame

GAMES = {game.name: game for game in (GuessGame(), TicTacToeGame(), GinGame())}
DEFAULT_GAME = GuessGame.name


def get_game(game_type) -> Game:
    try:
        return GAMES[game_type]
    except (KeyError, TypeError):
        raise UnknownGameType(game_type)


def game_for_action(action_name):
    """The game type that accepts ``action_name``, or None."""
    for game in GAMES.values():
        if action_name in game.actions:
            return game
    return None


__all__ = ["Action", "Game", "GAMES", "DEFAULT_GAME", "get_game", "game_for_action"]
