import os
import sys
import pytest

# Ensure the backend root (containing the `courtside` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from courtside import create_app, courts, socketio

NAMESPACE = '/ws'


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = ['http://localhost:5500']
    SOCKETIO_NAMESPACE = NAMESPACE
    SOCKETIO_PING_TIMEOUT = 60
    # Minimum cost keeps secret hashing fast in tests
    BCRYPT_LOG_ROUNDS = 4
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def service(flask_app):
    return courts


@pytest.fixture()
def court(service):
    return service.create_court('C1', '7421', ['r1', 'r2', 'r3'])


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


def _connect(flask_app):
    return socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace=NAMESPACE
    )


@pytest.fixture()
def sio_client(flask_app):
    test_client = _connect(flask_app)
    yield test_client
    try:
        test_client.disconnect(namespace=NAMESPACE)
    except Exception:
        pass


@pytest.fixture()
def sio_factory(flask_app):
    """Open extra Socket.IO clients; all are disconnected on teardown."""
    opened = []

    def _open():
        c = _connect(flask_app)
        opened.append(c)
        return c

    yield _open
    for c in opened:
        try:
            c.disconnect(namespace=NAMESPACE)
        except Exception:
            pass
