from flask import Blueprint, Response
from app.services import get_services
from app.services import export_service

export_bp = Blueprint('export', __name__)


def _attachment(body, mimetype, filename):
    return Response(
        body,
        mimetype=mimetype,
        headers={'Content-Disposition': f'attachment; filename={filename}'},
    )


@export_bp.route('/csv')
def export_csv():
    queries = get_services().store.list()
    return _attachment(export_service.to_csv(queries), 'text/csv', 'weather_queries.csv')


@export_bp.route('/json')
def export_json():
    queries = get_services().store.list()
    return _attachment(export_service.to_json(queries), 'application/json', 'weather_queries.json')
