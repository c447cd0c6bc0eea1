"""Best-effort location enrichment via OpenWeather geocoding.

Lookups never raise. They return a ``LookupResult`` so callers can tell a
place the provider does not know (``not_found``) from a call that broke
(``failed``).
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Optional

from app.errors import UpstreamError

logger = logging.getLogger(__name__)

FOUND = 'found'
NOT_FOUND = 'not_found'
FAILED = 'failed'


@dataclass(frozen=True)
class LocationInfo:
    lat: float
    lon: float
    name: str
    country: str
    state: Optional[str]
    full_name: str

    def to_dict(self):
        data = asdict(self)
        data['fullName'] = data.pop('full_name')
        return data


@dataclass(frozen=True)
class LookupResult:
    status: str
    location: Optional[LocationInfo] = None
    reason: Optional[str] = None

    @property
    def found(self):
        return self.status == FOUND


def format_full_name(name, state, country):
    """``name[, state], country``"""
    if state:
        return f'{name}, {state}, {country}'
    return f'{name}, {country}'


class LocationResolver:
    def __init__(self, weather_client):
        self.weather_client = weather_client

    def resolve_forward(self, location):
        try:
            places = self.weather_client.geocode(location)
            if not places:
                return LookupResult(NOT_FOUND, reason=f'No match for {location!r}')
            place = places[0]
            info = _place_to_info(place, place['lat'], place['lon'])
        except (UpstreamError, KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"Forward geocode failed for {location!r}: {e}")
            return LookupResult(FAILED, reason=str(e))
        return LookupResult(FOUND, location=info)

    def resolve_reverse(self, lat, lon):
        try:
            places = self.weather_client.reverse_geocode(lat, lon)
            if not places:
                return LookupResult(NOT_FOUND, reason=f'No place at {lat},{lon}')
            # Echo the caller's coordinates rather than the provider's.
            info = _place_to_info(places[0], float(lat), float(lon))
        except (UpstreamError, KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"Reverse geocode failed for {lat},{lon}: {e}")
            return LookupResult(FAILED, reason=str(e))
        return LookupResult(FOUND, location=info)


def _place_to_info(place, lat, lon):
    name = place['name']
    country = place['country']
    state = place.get('state') or None
    return LocationInfo(
        lat=lat,
        lon=lon,
        name=name,
        country=country,
        state=state,
        full_name=format_full_name(name, state, country),
    )
