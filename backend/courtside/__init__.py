from flask import Flask
from flask_bcrypt import Bcrypt
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config
from courtside.services.courts import CourtService

bcrypt = Bcrypt()
socketio = SocketIO()
courts = CourtService()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = list(flask_app.config.get('CORS_ORIGINS', []))
    bcrypt.init_app(flask_app)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(
        flask_app,
        cors_allowed_origins=allowed_origins,
        async_mode='threading',
        ping_timeout=flask_app.config.get('SOCKETIO_PING_TIMEOUT', 60),
    )
    courts.init_app(flask_app, socketio, bcrypt)

    from courtside.main import main
    flask_app.register_blueprint(main)

    from courtside.api.courts import courts_api
    flask_app.register_blueprint(courts_api, url_prefix='/api')

    # Importing here binds the handlers to the initialized socketio instance
    from courtside.socketio_events import register_socketio_handlers
    register_socketio_handlers(flask_app.config.get('SOCKETIO_NAMESPACE', '/ws'))

    return flask_app
