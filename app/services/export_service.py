import csv
import io
import json

CSV_HEADER = ['ID', 'Location', 'Date From', 'Date To', 'Temperature(°C)', 'Weather', 'Created At']


def _current_conditions(record):
    """Pull (temperature, weather label) out of a stored record; blanks when missing."""
    current = (record or {}).get('current') or {}
    temp = (current.get('main') or {}).get('temp')
    conditions = current.get('weather') or []
    label = conditions[0].get('main') if conditions and isinstance(conditions[0], dict) else None
    return ('' if temp is None else temp), (label or '')


def to_csv(queries):
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\n')
    writer.writerow(CSV_HEADER)
    for query in queries:
        row = query.to_dict()
        temp, label = _current_conditions(row['weather_data'])
        writer.writerow([
            row['id'],
            row['location'],
            row['date_from'] or '',
            row['date_to'] or '',
            temp,
            label,
            row['created_at'] or '',
        ])
    return buf.getvalue()


def to_json(queries):
    return json.dumps([q.to_dict() for q in queries], ensure_ascii=False, indent=2)
