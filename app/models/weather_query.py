import json
from app.extensions import db
from sqlalchemy import func


class WeatherQuery(db.Model):
    __tablename__ = 'weather_queries'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    location = db.Column(db.Text, nullable=False)
    date_from = db.Column(db.Text, nullable=True)
    date_to = db.Column(db.Text, nullable=True)
    weather_data = db.Column(db.Text, nullable=True)  # serialized WeatherRecord
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        db.Index('ix_weather_queries_created_at', 'created_at'),
    )

    @property
    def record(self):
        return json.loads(self.weather_data) if self.weather_data else None

    @record.setter
    def record(self, value):
        self.weather_data = json.dumps(value)

    def to_dict(self):
        return {
            'id': self.id,
            'location': self.location,
            'date_from': self.date_from,
            'date_to': self.date_to,
            'weather_data': self.record,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
