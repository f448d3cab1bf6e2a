import csv
import io
import re
from datetime import date, datetime

from django.utils import timezone


def _cell(family, application, field):
    value = getattr(application, field, None)
    if field == 'status' and not value:
        return family.initial_status
    if value is None:
        return ''
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.strftime('%Y-%m-%d')
    if isinstance(value, date):
        return value.strftime('%Y-%m-%d')
    return str(value)


def write_csv(family, applications, stream):
    """Header row from the family's columns, then one row per application in input order"""
    writer = csv.writer(stream, quoting=csv.QUOTE_ALL)
    writer.writerow([label for label, _ in family.csv_columns])
    for application in applications:
        writer.writerow([_cell(family, application, field) for _, field in family.csv_columns])


def export_csv(family, applications):
    buffer = io.StringIO()
    write_csv(family, applications, buffer)
    return buffer.getvalue()


def export_filename(title):
    return re.sub(r'[^a-z0-9]', '_', (title or '').lower()) + '_applications.csv'
