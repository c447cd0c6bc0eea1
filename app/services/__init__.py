from flask import current_app
from app.integrations.maps import MapsService
from app.integrations.openweather import OpenWeatherClient
from app.integrations.upstream import UpstreamClient
from app.integrations.youtube import VideoSearchService
from app.services.location_resolver import LocationResolver
from app.services.query_store import QueryStore
from app.services.weather_aggregator import WeatherAggregator


class Services:
    """Everything the handlers need, built once per app from its config."""

    def __init__(self, config, db):
        upstream = UpstreamClient(timeout=config.get('UPSTREAM_TIMEOUT'))
        weather_client = OpenWeatherClient(upstream, config.get('OPENWEATHER_API_KEY'))

        self.resolver = LocationResolver(weather_client)
        self.aggregator = WeatherAggregator(weather_client, self.resolver)
        self.store = QueryStore(db)
        self.videos = VideoSearchService(upstream, config.get('YOUTUBE_API_KEY'))
        self.maps = MapsService(upstream, config.get('GOOGLE_MAPS_API_KEY'))


def get_services():
    return current_app.extensions['weather_services']
