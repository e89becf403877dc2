import os
import sys
import pytest

# Ensure the backend root (containing the `gamehall` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from gamehall import create_app, socketio
from gamehall.broadcast import Notifier
from gamehall.rooms import RoomRegistry
from gamehall.services.games.cards import RANKS, SUITS
from gamehall.services.games.gin import DISCARD, GinState
from gamehall.views import private_views, room_view


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SOCKETIO_NAMESPACE = '/ws'
    DEFAULT_ROOM = 'lobby'
    MAX_NAME_LENGTH = 12
    CORS_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'DEBUG'


class RecordingNotifier(Notifier):
    """Keeps every notice and published view instead of sending them."""

    def __init__(self):
        self.notices = []
        self.published = []

    def announce(self, room, message):
        self.notices.append((room.code, message))

    def publish(self, room):
        self.published.append((room.code, room_view(room), private_views(room)))

    def messages(self, code):
        return [message for room_code, message in self.notices if room_code == code]


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def registry(notifier):
    return RoomRegistry(notifier=notifier, max_name_length=12)


@pytest.fixture()
def make_gin_state():
    """Build a consistent two-seat gin state around a chosen hand for ``a``."""
    def _make(hand, seats=('a', 'b'), phase=DISCARD, current='a'):
        deck = [f"{rank}{suit}" for suit in SUITS for rank in RANKS]
        rest = [card for card in deck if card not in hand]
        other = rest[:10]
        rest = rest[10:]
        return GinState(
            phase=phase,
            current=current,
            seats=list(seats),
            hands={seats[0]: list(hand), seats[1]: other},
            stock=rest[1:],
            discard=rest[:1],
            waiting_for_players=False,
        )
    return _make
