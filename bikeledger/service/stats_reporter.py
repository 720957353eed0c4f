from collections import defaultdict
from datetime import date
from typing import Dict, List

from bikeledger.service.registry import Registry, RentalEvent


class StatisticsReporter:
    """Keeps daily tallies of the rentals on a registry, dated by the registry's clock."""

    def __init__(self, registry: Registry):
        self._registry = registry

        self._registry.hub.subscribe(RentalEvent.rental_started, self._rental_started)
        self._registry.hub.subscribe(RentalEvent.rental_ended, self._rental_ended)

        self._rentals_started: Dict[date, int] = defaultdict(int)
        self._rentals_ended: Dict[date, int] = defaultdict(int)
        self._distance_travelled: Dict[date, float] = defaultdict(float)
        self._revenue: Dict[date, float] = defaultdict(float)

    def _rental_started(self, user, bike, location, time):
        self._rentals_started[time.date()] += 1

    def _rental_ended(self, user, bike, location, price, distance, time):
        day = time.date()
        self._rentals_ended[day] += 1
        self._revenue[day] += price
        self._distance_travelled[day] += distance

    def _dates(self):
        return sorted(set(self._rentals_started) | set(self._rentals_ended))

    def daily_report(self, year: int = None, month: int = None, day_nr: int = None) -> List[Dict]:
        dates = (x for x in self._dates())

        if year is not None:
            dates = (x for x in dates if x.year == int(year))

        if month is not None:
            dates = (x for x in dates if x.month == int(month))

        if day_nr is not None:
            dates = (x for x in dates if x.day == int(day_nr))

        today = self._registry.now().date()
        data_days = []

        for day in dates:
            data_days.append({
                "date": day,
                "incomplete": day == today,
                "rentals_started": self._rentals_started[day],
                "rentals_ended": self._rentals_ended[day],
                "distance_travelled": self._distance_travelled[day],
                "revenue": self._revenue[day]
            })

        return data_days

    def monthly_report(self, year: int = None, month: int = None) -> List[Dict]:
        dates = (x for x in self._dates())

        if year is not None:
            dates = (x for x in dates if x.year == int(year))

        if month is not None:
            dates = (x for x in dates if x.month == int(month))

        return self._aggregate(dates, lambda day: day.replace(day=1))

    def annual_report(self, year: int = None) -> List[Dict]:
        dates = (x for x in self._dates())

        if year is not None:
            dates = (x for x in dates if x.year == int(year))

        return self._aggregate(dates, lambda day: day.replace(month=1, day=1))

    def _aggregate(self, dates, period_start) -> List[Dict]:
        """Sums the daily tallies into the period each day falls into."""
        data = {}

        for day in dates:
            period = period_start(day)
            if period not in data:
                data[period] = {
                    "date": period, "rentals_started": 0, "rentals_ended": 0,
                    "distance_travelled": 0, "revenue": 0
                }

            data[period]["rentals_started"] += self._rentals_started[day]
            data[period]["rentals_ended"] += self._rentals_ended[day]
            data[period]["distance_travelled"] += self._distance_travelled[day]
            data[period]["revenue"] += self._revenue[day]

        return list(data.values())
