import logging
from sqlalchemy.exc import SQLAlchemyError
from app.errors import NotFoundError, PersistenceError
from app.models.weather_query import WeatherQuery

logger = logging.getLogger(__name__)

FAILURE_MESSAGES = {
    'insert': 'Failed to save query',
    'list': 'Failed to fetch queries',
    'get': 'Failed to fetch query',
    'update': 'Failed to update query',
    'delete': 'Failed to delete query',
}


class QueryStore:
    """CRUD over the weather_queries table. ``weather_data`` is always replaced whole."""

    def __init__(self, db):
        self.db = db

    def insert(self, location, record, date_from=None, date_to=None):
        query = WeatherQuery(
            location=location,
            date_from=date_from or None,
            date_to=date_to or None,
        )
        query.record = record
        self.db.session.add(query)
        self._commit('insert')
        return query.id

    def list(self):
        try:
            return WeatherQuery.query.order_by(
                WeatherQuery.created_at.desc(), WeatherQuery.id.desc()
            ).all()
        except SQLAlchemyError as e:
            raise self._fail('list', e)

    def get_by_id(self, query_id):
        try:
            query = self.db.session.get(WeatherQuery, query_id)
        except SQLAlchemyError as e:
            raise self._fail('get', e)
        if query is None:
            raise NotFoundError('Query not found')
        return query

    def exists(self, query_id):
        try:
            return self.db.session.get(WeatherQuery, query_id) is not None
        except SQLAlchemyError as e:
            raise self._fail('get', e)

    def update(self, query_id, location, record, date_from=None, date_to=None):
        query = self.get_by_id(query_id)
        query.location = location
        query.date_from = date_from or None
        query.date_to = date_to or None
        query.record = record
        self._commit('update')
        logger.info(f"Updated weather query {query_id}")
        return query

    def delete(self, query_id):
        query = self.get_by_id(query_id)
        self.db.session.delete(query)
        self._commit('delete')
        logger.info(f"Deleted weather query {query_id}")

    def _commit(self, operation):
        try:
            self.db.session.commit()
        except SQLAlchemyError as e:
            raise self._fail(operation, e)

    def _fail(self, operation, error):
        self.db.session.rollback()
        logger.error(f"Weather query {operation} failed: {error}")
        return PersistenceError(FAILURE_MESSAGES[operation])
