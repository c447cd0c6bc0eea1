#!/usr/bin/env python3
"""Create the weather_queries table. Idempotent."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from app.extensions import db

if __name__ == '__main__':
    app = create_app()
    with app.app_context():
        db.create_all()
        print(f"Database ready at {app.config['SQLALCHEMY_DATABASE_URI']}")
