#!/usr/bin/env python3
"""WSGI entry point and local development server."""
from app import create_app

app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=app.config['PORT'], debug=False)
