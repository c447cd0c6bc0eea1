from app.models.weather_query import WeatherQuery

__all__ = ['WeatherQuery']
