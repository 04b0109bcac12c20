# survey_backend/__init__.py

import logging
from types import SimpleNamespace

import click
from flask import Flask
from flask_jwt_extended import JWTManager
from flask_sqlalchemy import SQLAlchemy
from werkzeug.middleware.proxy_fix import ProxyFix

from survey_backend.config import AppConfig

# Extensions are bound to an app inside create_app(); no app exists at import time
db = SQLAlchemy()
jwt = JWTManager()


def create_app(config: AppConfig = None) -> Flask:
    """Build the Flask app from an explicit configuration.

    Without an argument the configuration is read from the environment, which
    fails fast when JWT_SECRET_KEY is not set.
    """
    if config is None:
        config = AppConfig.from_env()

    level = getattr(logging, config.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    app = Flask(__name__)
    app.config.update(config.flask_settings())
    app.logger.setLevel(level)

    if config.trust_proxy:
        # Honour X-Forwarded-* headers set by a reverse proxy
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)

    db.init_app(app)
    jwt.init_app(app)

    # Import models so SQLAlchemy metadata is populated before create_all()
    from survey_backend.database import models  # noqa: F401
    from survey_backend.authentication.auth_service import AuthService
    from survey_backend.database.store import CredentialStore, ResponseStore
    from survey_backend.encryption.password_hashing import PasswordHashingService
    from survey_backend.routes import auth_bp, health_bp, register_error_handlers, survey_bp
    from survey_backend.security.input_validator import InputValidator
    from survey_backend.security.token_manager import TokenManager
    from survey_backend.survey_service import SurveyService

    validator = InputValidator()
    password_service = PasswordHashingService(
        time_cost=config.password_time_cost,
        memory_cost=config.password_memory_cost,
        parallelism=config.password_parallelism,
    )
    token_manager = TokenManager(app, expires_in=config.token_ttl)
    auth_service = AuthService(CredentialStore(db), password_service, token_manager, validator)
    survey_service = SurveyService(auth_service, ResponseStore(db), validator)
    app.extensions['survey'] = SimpleNamespace(
        config=config,
        db=db,
        auth=auth_service,
        survey=survey_service,
        tokens=token_manager,
    )

    app.register_blueprint(auth_bp)
    app.register_blueprint(survey_bp)
    app.register_blueprint(health_bp)
    register_error_handlers(app)

    @app.cli.command('init-db')
    def init_db_command():
        """Create the users and survey_responses tables."""
        db.create_all()
        click.echo('Initialized the database.')

    if config.create_tables:
        with app.app_context():
            db.create_all()

    return app
