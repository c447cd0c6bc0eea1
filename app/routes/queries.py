from flask import Blueprint, jsonify, request
from app.errors import NotFoundError, UpstreamError
from app.services import get_services
from app.services.weather_aggregator import validate_optional_range

queries_bp = Blueprint('queries', __name__)


def _parse_id(raw_id):
    """Ids that could never exist (non-numeric, negative) are simply not found."""
    if not (raw_id.isascii() and raw_id.isdigit()) or len(raw_id) > 18:
        raise NotFoundError('Query not found')
    return int(raw_id)


@queries_bp.route('')
def list_queries():
    """All saved queries, newest first."""
    queries = get_services().store.list()
    return jsonify([q.to_dict() for q in queries])


@queries_bp.route('/<query_id>')
def get_query(query_id):
    query_id = _parse_id(query_id)
    query = get_services().store.get_by_id(query_id)
    return jsonify(query.to_dict())


@queries_bp.route('/<query_id>', methods=['PUT'])
def update_query(query_id):
    """Re-fetch weather for a new location and overwrite the saved query."""
    query_id = _parse_id(query_id)
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    location = data.get('location')
    date_from = data.get('dateFrom')
    date_to = data.get('dateTo')

    if not location:
        return jsonify({'error': 'Location is required'}), 400
    validate_optional_range(date_from, date_to)

    services = get_services()
    if not services.store.exists(query_id):
        return jsonify({'error': 'Query not found'}), 404

    try:
        record = services.aggregator.refresh_weather(location)
    except UpstreamError as e:
        raise UpstreamError('Failed to update weather data') from e

    services.store.update(query_id, location, record, date_from=date_from, date_to=date_to)
    return jsonify({'message': 'Query updated successfully', 'weatherData': record})


@queries_bp.route('/<query_id>', methods=['DELETE'])
def delete_query(query_id):
    query_id = _parse_id(query_id)
    get_services().store.delete(query_id)
    return jsonify({'message': 'Query deleted successfully'})
