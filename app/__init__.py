import logging
import os
import re
from flask import Flask
from config import Config

CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
CORS_HEADERS = ['Content-Type', 'Authorization', 'Cache-Control']


def _allowed_origins(app):
    origins = [
        re.compile(r'^https?://localhost(:\d+)?$'),
        re.compile(r'^https://[\w.-]+\.onrender\.com$'),
    ]
    if app.config.get('FRONTEND_URL'):
        origins.append(app.config['FRONTEND_URL'].rstrip('/'))
    return origins


def _ensure_sqlite_dir(db_uri):
    prefix = 'sqlite:///'
    if db_uri.startswith(prefix) and ':memory:' not in db_uri:
        directory = os.path.dirname(db_uri[len(prefix):])
        if directory:
            os.makedirs(directory, exist_ok=True)


def create_app(config_class=None):
    app = Flask(__name__)
    app.config.from_object(config_class or Config)

    # Fix Render/Heroku style DATABASE_URL (postgres:// -> postgresql://)
    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = db_uri.replace('postgres://', 'postgresql://', 1)
    _ensure_sqlite_dir(app.config['SQLALCHEMY_DATABASE_URI'])

    # Logging
    logging.basicConfig(
        level=getattr(logging, app.config.get('LOG_LEVEL', 'INFO')),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )

    # Extensions
    from app.extensions import db, migrate, cors
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        origins=_allowed_origins(app),
        supports_credentials=True,
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    # Table is created once at startup; create_all is a no-op when it exists
    from app.models import WeatherQuery  # noqa: F401
    with app.app_context():
        db.create_all()

    # Services are built once and handed to handlers through app.extensions
    from app.services import Services
    app.extensions['weather_services'] = Services(app.config, db)

    from app.errors import register_error_handlers
    register_error_handlers(app)

    from app.routes import register_blueprints
    register_blueprints(app)

    return app
