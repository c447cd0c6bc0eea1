#!/usr/bin/env python3
"""Dump saved weather queries to a CSV or JSON file.

Usage: export_queries.py csv|json [output_path]
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from app.services import get_services
from app.services import export_service

FORMATS = {
    'csv': export_service.to_csv,
    'json': export_service.to_json,
}

if __name__ == '__main__':
    if len(sys.argv) < 2 or sys.argv[1] not in FORMATS:
        print(__doc__.strip())
        sys.exit(1)

    fmt = sys.argv[1]
    output = sys.argv[2] if len(sys.argv) > 2 else f'weather_queries.{fmt}'

    app = create_app()
    with app.app_context():
        queries = get_services().store.list()
        with open(output, 'w', encoding='utf-8', newline='') as f:
            f.write(FORMATS[fmt](queries))
    print(f"Exported {len(queries)} queries to {output}")
