import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from datetime import date, datetime, timezone
from app.errors import UpstreamError, ValidationError
from app.integrations.openweather import build_location_params

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = 'Failed to fetch weather data.'
CALLS_PER_REQUEST = 3  # current, forecast, enrichment


def _parse_date(value):
    """Parse an ISO-8601 date or datetime; naive values are taken as UTC."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_date_range(date_from, date_to, now=None):
    """Raise ValidationError unless date_from <= date_to <= now.

    The range is descriptive metadata for the stored row; it does not change
    what is fetched upstream.
    """
    if not date_from or not date_to:
        raise ValidationError('Both dates are required')
    try:
        start = _parse_date(date_from)
        end = _parse_date(date_to)
    except (TypeError, ValueError):
        raise ValidationError('Invalid date format')

    now = now or datetime.now(timezone.utc)
    if start > end:
        raise ValidationError('Start date must be before end date')
    if end > now:
        raise ValidationError('End date cannot be in the future')


def validate_optional_range(date_from, date_to, now=None):
    """Validate only when the caller sent at least one bound."""
    if date_from or date_to:
        validate_date_range(date_from, date_to, now=now)


class WeatherAggregator:
    """Fetches current conditions and forecast together and merges them into one record."""

    def __init__(self, weather_client, resolver):
        self.weather_client = weather_client
        self.resolver = resolver

    def fetch_weather(self, location=None, lat=None, lon=None, query_type=None):
        has_coords = lat is not None and lon is not None
        if not location and not has_coords:
            raise ValidationError('Location or coordinates required.')

        params = build_location_params(location, lat, lon, query_type)

        # Pool is per request; shutdown never waits on outstanding calls.
        executor = ThreadPoolExecutor(max_workers=CALLS_PER_REQUEST, thread_name_prefix='upstream')
        try:
            enrichment = self._submit_enrichment(executor, location, lat, lon)
            current, forecast = self._fetch_pair(executor, params)
            lookup = enrichment.result() if enrichment else None
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        record = {
            'current': current,
            'forecast': forecast,
            'searchedLocation': location or f'{lat},{lon}',
        }
        _augment_current(record['current'], lookup)

        logger.info(f"Fetched weather for {record['searchedLocation']!r}")
        return record

    def refresh_weather(self, location):
        """Re-fetch by free-text location for an update. No enrichment, no searchedLocation."""
        if not location:
            raise ValidationError('Location is required')
        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix='upstream')
        try:
            current, forecast = self._fetch_pair(executor, build_location_params(location))
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
        return {'current': current, 'forecast': forecast}

    def _submit_enrichment(self, executor, location, lat, lon):
        has_lat = lat is not None
        has_lon = lon is not None
        if location and not has_lat and not has_lon:
            return executor.submit(self.resolver.resolve_forward, location)
        if has_lat and has_lon and not location:
            return executor.submit(self.resolver.resolve_reverse, lat, lon)
        return None

    def _fetch_pair(self, executor, params):
        current_future = executor.submit(self.weather_client.fetch_current, params)
        forecast_future = executor.submit(self.weather_client.fetch_forecast, params)

        # Fail as soon as either call fails instead of waiting on the slower one.
        done, _ = wait([current_future, forecast_future], return_when=FIRST_EXCEPTION)
        for future in (current_future, forecast_future):
            if future in done and future.exception() is not None:
                error = future.exception()
                if isinstance(error, UpstreamError) and error.provider_status is not None:
                    raise error
                raise UpstreamError(FETCH_FAILED_MESSAGE) from error

        return current_future.result(), forecast_future.result()


def _augment_current(current, lookup):
    if not isinstance(current, dict):
        return
    coord = current.get('coord')
    if coord:
        current['coordinates'] = {'lat': coord.get('lat'), 'lon': coord.get('lon')}
    if lookup is not None and lookup.found:
        info = lookup.location.to_dict()
        current['enhancedLocation'] = info
        current['displayName'] = info['fullName']
    if current.get('timezone') is not None:
        current['timezoneOffset'] = current['timezone']
