"""Date manipulation utilities"""

from datetime import date


def full_years_between(start: date, end: date) -> int:
    """Number of complete years from start to end (negative if end precedes start)"""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
