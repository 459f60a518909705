from flask import Flask
from .config import Config
from .errors import register_error_handlers
from .logging_setup import setup_logging
from .repositories import SqlDeviceRepository
from app.utils.db import db


def create_app(config_class=Config, repository=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    setup_logging(app.config['LOG_LEVEL'])

    db.init_app(app)

    # Handlers look the repository up here instead of a module global
    app.extensions['device_repository'] = repository or SqlDeviceRepository()

    register_error_handlers(app)

    from .routes.device_routes import device_bp
    from .routes.health_routes import health_bp
    app.register_blueprint(device_bp)
    app.register_blueprint(health_bp, url_prefix='/health')

    return app
