# game_backend/__init__.py

import logging
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from .config import Config
from .errors import ConfigurationError

db = SQLAlchemy()


def create_app(config_class=Config):
    # Fail at startup, not per request, when the database settings are absent.
    missing = config_class.missing_settings()
    if missing:
        raise ConfigurationError(missing)

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Configure logging
    level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO'), logging.INFO)
    app.logger.setLevel(level)
    handler = logging.StreamHandler()
    handler.setLevel(level)
    formatter = logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s')
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)

    db.init_app(app)

    # The Unity client and WebGL builds call from any origin without cookies.
    CORS(app, origins='*', send_wildcard=True, supports_credentials=False)

    # --- REGISTER BLUEPRINTS ---
    from .api.auth import bp as auth_bp
    from .api.content import bp as content_bp
    from .api.user import bp as user_bp
    from .api.health import bp as health_bp

    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(content_bp)
    app.register_blueprint(user_bp, url_prefix='/user')
    app.register_blueprint(health_bp)

    from .utils import register_error_handlers
    register_error_handlers(app)

    with app.app_context():
        from . import models  # noqa: F401

    return app
