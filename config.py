import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _optional_float(name):
    value = os.getenv(name)
    return float(value) if value else None


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-change-me')
    SQLALCHEMY_DATABASE_URI = os.getenv(
        'DATABASE_URL',
        'sqlite:///' + os.path.join(BASE_DIR, 'db', 'database.sqlite'),
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}

    # Server
    PORT = int(os.getenv('PORT', '10000'))
    BACKEND_URL = os.getenv('BACKEND_URL') or f"http://localhost:{PORT}"
    FRONTEND_URL = os.getenv('FRONTEND_URL')

    # Upstream providers
    OPENWEATHER_API_KEY = os.getenv('OPENWEATHER_API_KEY')
    YOUTUBE_API_KEY = os.getenv('YOUTUBE_API_KEY')
    GOOGLE_MAPS_API_KEY = os.getenv('GOOGLE_MAPS_API_KEY')
    UPSTREAM_TIMEOUT = _optional_float('UPSTREAM_TIMEOUT')  # None = wait indefinitely

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    FRONTEND_URL = 'https://weather.example.com'
    OPENWEATHER_API_KEY = 'test-owm-key'
    YOUTUBE_API_KEY = 'test-youtube-key'
    GOOGLE_MAPS_API_KEY = 'test-maps-key'
    UPSTREAM_TIMEOUT = 5.0
