import logging
from app.errors import UpstreamError

logger = logging.getLogger(__name__)

GEOCODE_URL = 'https://maps.googleapis.com/maps/api/geocode/json'
EMBED_URL = 'https://www.google.com/maps/embed/v1/place?key={key}&q={lat},{lng}&zoom={zoom}'
EMBED_ZOOM = 12


class MapsService:
    def __init__(self, upstream, api_key):
        self.upstream = upstream
        self.api_key = api_key

    def lookup(self, location):
        """Geocode a location and build an embeddable map. Never raises."""
        if not self.api_key:
            return {'map': None, 'message': 'Google Maps API key not configured'}

        try:
            data = self.upstream.get(GEOCODE_URL, params={
                'address': location,
                'key': self.api_key,
            })
            results = data['results']
            if not results:
                return {'map': None, 'error': 'Location not found'}

            top = results[0]
            point = top['geometry']['location']
            lat, lng = point['lat'], point['lng']
            address = top.get('formatted_address')
        except (UpstreamError, KeyError, IndexError, TypeError) as e:
            logger.warning(f"Map lookup failed for {location!r}: {e}")
            return {'map': None, 'error': 'Failed to fetch map data'}

        return {
            'map': {
                'embedUrl': EMBED_URL.format(key=self.api_key, lat=lat, lng=lng, zoom=EMBED_ZOOM),
                'lat': lat,
                'lng': lng,
                'address': address,
            }
        }
