import logging
from flask import Blueprint, jsonify, request
from app.errors import PersistenceError
from app.services import get_services
from app.services.weather_aggregator import validate_optional_range

logger = logging.getLogger(__name__)

weather_bp = Blueprint('weather', __name__)


@weather_bp.route('/weather', methods=['POST'])
def fetch_weather():
    """Current weather + 5-day forecast by name, zip or coordinates; saved as a query."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    location = data.get('location')
    lat = data.get('lat')
    lon = data.get('lon')
    date_from = data.get('dateFrom')
    date_to = data.get('dateTo')

    services = get_services()
    if not location and (lat is None or lon is None):
        return jsonify({'error': 'Location or coordinates required.'}), 400
    validate_optional_range(date_from, date_to)

    record = services.aggregator.fetch_weather(
        location=location,
        lat=lat,
        lon=lon,
        query_type=data.get('type'),
    )

    # Best effort: the caller still gets the record if the row can't be written.
    try:
        query_id = services.store.insert(
            location or f'{lat},{lon}',
            record,
            date_from=date_from,
            date_to=date_to,
        )
        logger.info(f"Saved weather query {query_id}")
    except PersistenceError as e:
        logger.error(f"Weather fetched but not saved: {e.message}")

    return jsonify(record)
