class GamehallError(Exception):
    """Base class for gamehall errors."""


class InvalidCardToken(GamehallError, ValueError):
    def __init__(self, token):
        super().__init__(f"invalid card token: {token!r}")
        self.token = token


class IllegalAction(GamehallError):
    """An action that is malformed or not allowed in the current state.

    Raised by the game state machines before any mutation, so the state is
    left untouched. ``notice`` is an optional message for the whole room.
    """

    def __init__(self, message, notice=None):
        super().__init__(message)
        self.notice = notice


class UnknownGameType(GamehallError):
    def __init__(self, game_type):
        super().__init__(f"unknown game type: {game_type!r}")
        self.game_type = game_type


class InvariantViolation(GamehallError, AssertionError):
    """Authoritative state is inconsistent. Never caught per request."""
