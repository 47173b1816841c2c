import os


def _split_origins(raw):
    return [o.strip() for o in raw.split(',') if o.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    PORT = int(os.environ.get('PORT', '4000'))
    # Origins allowed for HTTP and Socket.IO (comma separated)
    CORS_ORIGINS = _split_origins(
        os.environ.get('CORS_ORIGINS', 'http://127.0.0.1:5500,http://localhost:5500')
    )
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/ws')
    SOCKETIO_PING_TIMEOUT = int(os.environ.get('SOCKETIO_PING_TIMEOUT', '60'))
    # Cost factor for hashing court secrets
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', '12'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
