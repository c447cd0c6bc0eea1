"""Blueprint registration. The JSON API is all that is served; there is no Swagger UI at /api-docs."""

def register_blueprints(app):
    from app.routes.health import health_bp
    from app.routes.weather import weather_bp
    from app.routes.queries import queries_bp
    from app.routes.export import export_bp
    from app.routes.media import media_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(weather_bp, url_prefix='/api')
    app.register_blueprint(queries_bp, url_prefix='/api/queries')
    app.register_blueprint(export_bp, url_prefix='/api/export')
    app.register_blueprint(media_bp, url_prefix='/api')
