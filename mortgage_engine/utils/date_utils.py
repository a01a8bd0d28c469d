"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import List


def days_between_payments(payments_per_year: int) -> int:
    """Whole days between consecutive payments (365 // payments per year)"""
    return 365 // payments_per_year


def generate_payment_dates(start: date, count: int, interval_days: int) -> List[date]:
    """Generate ``count`` dates starting at ``start``, ``interval_days`` apart"""
    return [start + timedelta(days=i * interval_days) for i in range(count)]
