"""
The pricing module determines the fee for a bike rented for a certain time.
Bikes are billed by the hour, at the hourly rate of the bike, and partial
hours are billed proportionally.
"""

from datetime import datetime

SECONDS_PER_HOUR = 60 * 60


def get_hours(start_date: datetime, end_date: datetime) -> float:
    """The (fractional) number of hours between two times, regardless of their order."""
    return abs((end_date - start_date).total_seconds()) / SECONDS_PER_HOUR


def get_price(start_date: datetime, end_date: datetime, rate: float) -> float:
    """
    Given the start and end of a rental, returns the price for the ride.

    :param rate: The hourly rate of the bike.
    :return: The price, not rounded.
    """
    return get_hours(start_date, end_date) * rate
