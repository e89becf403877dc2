from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One registry per app so each app (and each test) starts with no rooms
    from gamehall.broadcast import SocketIONotifier
    from gamehall.rooms import RoomRegistry
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/ws')
    flask_app.extensions['gamehall'] = RoomRegistry(
        notifier=SocketIONotifier(socketio, namespace=namespace),
        logger=flask_app.logger,
        default_room=flask_app.config.get('DEFAULT_ROOM', 'lobby'),
        max_name_length=flask_app.config.get('MAX_NAME_LENGTH', 32),
    )

    from gamehall.main import main
    flask_app.register_blueprint(main)

    from gamehall.api.rooms import rooms
    flask_app.register_blueprint(rooms, url_prefix='/api/rooms')

    # Register Socket.IO event handlers
    from gamehall.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    @click.command('rooms')
    def rooms_command():
        """Lists the rooms held by this process."""
        registry = flask_app.extensions['gamehall']
        listed = registry.rooms()
        if not listed:
            click.echo('No rooms.')
        for room in listed:
            click.echo(f"{room.code}: game={room.game_type} members={len(room.members)} seats={room.seats()}")

    flask_app.cli.add_command(rooms_command)

    return flask_app


def get_registry(flask_app=None):
    """Room registry of ``flask_app`` (default: the current app)."""
    if flask_app is None:
        from flask import current_app
        flask_app = current_app
    return flask_app.extensions['gamehall']
