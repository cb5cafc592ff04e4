"""
Booking export as CSV (Excel-friendly, UTF-8 BOM) or JSON.
"""

import csv
import datetime
import json

from django.core.serializers.json import DjangoJSONEncoder
from django.http import HttpResponse

from ..exceptions import InvalidExportFormatError
from .booking_lifecycle import list_bookings

EXPORT_COLUMNS = [
    ('booking_date', 'Booking Date'),
    ('user.username', 'User'),
    ('mobile_model', 'Mobile Model'),
    ('booking_price', 'Booking Price'),
    ('selling_price', 'Selling Price'),
    ('platform', 'Platform'),
    ('booking_account', 'Booking Account'),
    ('card', 'Card'),
    ('booking_id', 'Booking ID'),
    ('status', 'Status'),
    ('dealer', 'Dealer'),
    ('dealer_batch.batch_id', 'Batch'),
    ('dealer_amount', 'Dealer Amount'),
    ('dealer_payment_received', 'Dealer Paid'),
    ('user_payment_given', 'User Paid'),
    ('notes', 'Notes'),
]


def _resolve(obj, path):
    """Follow a dotted attribute path; any missing link yields None."""
    value = obj
    for part in path.split('.'):
        value = getattr(value, part, None)
        if value is None:
            return None
    return value


def _rows(bookings):
    for booking in bookings:
        yield {key: _resolve(booking, key) for key, _ in EXPORT_COLUMNS}


def export_bookings(*, user, date_from=None, date_to=None, export_format='csv'):
    """
    Build a download response with the caller's visible bookings in range.

    Returns:
        HttpResponse: ``text/csv`` or ``application/json`` with a
        ``Content-Disposition: attachment`` header.
    """
    if export_format not in ('csv', 'json'):
        raise InvalidExportFormatError()

    bookings = list_bookings(
        user=user,
        filters={'date_from': date_from, 'date_to': date_to},
    ).order_by('booking_date', 'created_at')

    timestamp = datetime.datetime.now().strftime('%Y-%m-%d_%H-%M')
    filename = f"bookings_{timestamp}.{export_format}"

    if export_format == 'json':
        response = HttpResponse(
            json.dumps(list(_rows(bookings)), cls=DjangoJSONEncoder),
            content_type='application/json',
        )
    else:
        response = HttpResponse(content_type='text/csv')
        # BOM so Excel opens the file as UTF-8
        response.write('\ufeff'.encode('utf8'))
        writer = csv.writer(response)
        writer.writerow([header for _, header in EXPORT_COLUMNS])
        for row in _rows(bookings):
            writer.writerow(['' if value is None else str(value) for value in row.values()])

    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response
