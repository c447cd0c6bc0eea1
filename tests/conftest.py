import copy
import pytest
import requests
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

from app import create_app
from app.extensions import db as _db
from app.integrations import openweather
from app.models.weather_query import WeatherQuery
from config import TestConfig


def make_response(payload, status=200):
    """Fake ``requests.Response`` good enough for UpstreamClient."""
    resp = MagicMock()
    resp.status_code = status
    resp.json.side_effect = lambda: copy.deepcopy(payload)
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f'{status} Error', response=resp)
    else:
        resp.raise_for_status.return_value = None
    return resp


class FakeUpstream:
    """Stands in for ``requests.get``; answers by exact URL and records every call."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, url, payload=None, status=200, error=None):
        self.routes[url] = (payload, status, error)

    def calls_to(self, url):
        return [params for called, params in self.calls if called == url]

    def __call__(self, url, params=None, **kwargs):
        self.calls.append((url, dict(params or {})))
        if url not in self.routes:
            raise requests.ConnectionError(f'No fake route for {url}')
        payload, status, error = self.routes[url]
        if error is not None:
            raise error
        return make_response(payload, status)


@pytest.fixture(scope='session')
def app():
    """Create app with test config."""
    app = create_app(TestConfig)
    return app


@pytest.fixture(autouse=True)
def setup_db(app):
    """Create tables before each test, drop after."""
    with app.app_context():
        _db.create_all()
        yield
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    with app.app_context():
        yield _db.session


@pytest.fixture
def services(app):
    return app.extensions['weather_services']


@pytest.fixture
def upstream():
    fake = FakeUpstream()
    with patch('app.integrations.upstream.requests.get', side_effect=fake):
        yield fake


@pytest.fixture
def current_payload():
    return {
        'coord': {'lon': 2.3488, 'lat': 48.8534},
        'weather': [{'id': 803, 'main': 'Clouds', 'description': 'broken clouds', 'icon': '04d'}],
        'main': {'temp': 14.2, 'feels_like': 13.6, 'humidity': 72},
        'wind': {'speed': 4.1},
        'timezone': 7200,
        'name': 'Paris',
        'cod': 200,
    }


@pytest.fixture
def forecast_payload():
    return {
        'cod': '200',
        'cnt': 2,
        'list': [
            {'dt': 1760799600, 'main': {'temp': 13.1}, 'weather': [{'main': 'Rain'}]},
            {'dt': 1760810400, 'main': {'temp': 12.4}, 'weather': [{'main': 'Clouds'}]},
        ],
        'city': {'name': 'Paris', 'country': 'FR', 'timezone': 7200},
    }


@pytest.fixture
def geocode_payload():
    return [{
        'name': 'Paris',
        'lat': 48.8588897,
        'lon': 2.3200410217200766,
        'country': 'FR',
        'state': 'Ile-de-France',
    }]


@pytest.fixture
def weather_ok(upstream, current_payload, forecast_payload, geocode_payload):
    """Every OpenWeather endpoint answers successfully."""
    upstream.add(openweather.CURRENT_URL, current_payload)
    upstream.add(openweather.FORECAST_URL, forecast_payload)
    upstream.add(openweather.GEOCODE_DIRECT_URL, geocode_payload)
    upstream.add(openweather.GEOCODE_REVERSE_URL, geocode_payload)
    return upstream


@pytest.fixture
def sample_queries(db_session):
    """Three saved queries with distinct creation times, oldest first."""
    queries = []
    for i, (city, temp, label) in enumerate([
        ('London', 9.5, 'Rain'),
        ('Paris, FR', 14.2, 'Clouds'),
        ('Tokyo', 21.0, 'Clear'),
    ]):
        query = WeatherQuery(
            location=city,
            date_from='2025-01-01' if i == 1 else None,
            date_to='2025-01-05' if i == 1 else None,
            created_at=datetime(2025, 1, 10 + i, 12, 0, tzinfo=timezone.utc),
        )
        query.record = {
            'current': {'main': {'temp': temp}, 'weather': [{'main': label}], 'name': city},
            'forecast': {'list': []},
            'searchedLocation': city,
        }
        db_session.add(query)
        queries.append(query)
    db_session.commit()
    return queries
