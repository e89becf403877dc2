import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Socket.IO namespace the game events are served on
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/ws')
    # Room a connection lands in when join-room carries no code
    DEFAULT_ROOM = os.environ.get('DEFAULT_ROOM', 'lobby')
    MAX_NAME_LENGTH = int(os.environ.get('MAX_NAME_LENGTH', '32'))
    # Comma separated list of origins allowed for CORS and Socket.IO
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,http://127.0.0.1:3000',
        ).split(',')
        if origin.strip()
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
