from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def _allowed_origins(flask_app):
    origins = flask_app.config.get('CORS_ORIGINS') or ['*']
    if '*' in origins:
        return '*'
    return list(origins)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    origins = _allowed_origins(flask_app)
    CORS(flask_app, origins=origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    from scoreproof.main import main
    flask_app.register_blueprint(main)

    from scoreproof.api.leaderboard import leaderboard
    flask_app.register_blueprint(leaderboard)

    from scoreproof.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    from scoreproof.services.proofs.leaderboard import init_db, reset_db

    if flask_app.config.get('AUTO_INIT_DB'):
        with flask_app.app_context():
            init_db()
            flask_app.logger.info(f"[db-init] database={flask_app.config['SQLALCHEMY_DATABASE_URI']}")

    @click.command('init-db')
    def init_db_command():
        """Creates missing tables and seeds the score ladder if empty."""
        with flask_app.app_context():
            init_db()
            print('Database initialized.')

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        with flask_app.app_context():
            reset_db()
            print('Database has been reset and seeded!')

    flask_app.cli.add_command(init_db_command)
    flask_app.cli.add_command(db_reset_command)

    return flask_app
