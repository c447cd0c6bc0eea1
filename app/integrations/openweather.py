OPENWEATHER_BASE = 'https://api.openweathermap.org'
CURRENT_URL = f'{OPENWEATHER_BASE}/data/2.5/weather'
FORECAST_URL = f'{OPENWEATHER_BASE}/data/2.5/forecast'
GEOCODE_DIRECT_URL = f'{OPENWEATHER_BASE}/geo/1.0/direct'
GEOCODE_REVERSE_URL = f'{OPENWEATHER_BASE}/geo/1.0/reverse'

UNITS = 'metric'


def build_location_params(location=None, lat=None, lon=None, query_type=None):
    """Pick the query shape: coordinates win, then zip, then free-text name."""
    if lat is not None and lon is not None:
        return {'lat': lat, 'lon': lon}
    if query_type == 'zip':
        return {'zip': location}
    return {'q': location}


class OpenWeatherClient:
    """Current conditions, 5-day forecast and geocoding from OpenWeatherMap."""

    def __init__(self, upstream, api_key):
        self.upstream = upstream
        self.api_key = api_key

    def _weather_params(self, location_params):
        return {**location_params, 'appid': self.api_key, 'units': UNITS}

    def fetch_current(self, location_params):
        return self.upstream.get(CURRENT_URL, params=self._weather_params(location_params))

    def fetch_forecast(self, location_params):
        return self.upstream.get(FORECAST_URL, params=self._weather_params(location_params))

    def geocode(self, location):
        """Forward geocode; returns the provider's list of places (at most one)."""
        return self.upstream.get(GEOCODE_DIRECT_URL, params={
            'q': location,
            'limit': 1,
            'appid': self.api_key,
        })

    def reverse_geocode(self, lat, lon):
        return self.upstream.get(GEOCODE_REVERSE_URL, params={
            'lat': lat,
            'lon': lon,
            'limit': 1,
            'appid': self.api_key,
        })
