import logging
from datetime import date
from functools import cmp_to_key
from typing import Dict, List, Sequence

import pandas as pd

from lodging_pricing.comparison.price_comparator import compare_price, total_price
from lodging_pricing.domain.hotel import Hotel
from lodging_pricing.domain.monetary.money import Money

logger = logging.getLogger(__name__)


class PriceComparisonReport:
    """
    Usage:
        Build it from the catalog and the parsed request, then call:

        PriceComparisonReport(hotels, is_rewards_client, dates).print_report()

        or

        df = PriceComparisonReport(hotels, is_rewards_client, dates).to_dataframe()
        # one row per night, one Decimal column per hotel

    Parameters:
        hotels: Sequence[Hotel]
            hotels to compare; column order follows this sequence
        is_rewards_client: bool
            selects the rewards schedules instead of the regular ones
        dates: Sequence[date]
            nights to price, in request order (duplicates allowed)
        custom_logger: logging.Logger
            custom logger for printing the report
    """

    def __init__(self, hotels: Sequence[Hotel], is_rewards_client: bool, dates: Sequence[date], custom_logger: logging.Logger = None):
        self.custom_logger = custom_logger
        if not hotels:
            raise ValueError("Cannot init `PriceComparisonReport` because $hotels is empty")
        if not dates:
            raise ValueError("Cannot init `PriceComparisonReport` because $dates is empty")
        names = [h.name for h in hotels]
        if len(set(names)) != len(names):
            raise ValueError(f"Cannot init `PriceComparisonReport` because hotel names are not unique: {names}")
        self.hotels = list(hotels)
        self.is_rewards_client = is_rewards_client
        self.dates = list(dates)

    def _schedule(self, hotel: Hotel):
        return hotel.rewards_schedule if self.is_rewards_client else hotel.regular_schedule

    def to_dataframe(self) -> pd.DataFrame:
        """Per-night price breakdown: columns 'date', 'weekday', then one column per hotel (Decimal major units)."""
        rows = []
        for d in self.dates:
            row = {"date": d, "weekday": d.strftime("%a")}
            for h in self.hotels:
                row[h.name] = self._schedule(h).price_on(d).amount
            rows.append(row)
        return pd.DataFrame(rows, columns=["date", "weekday"] + [h.name for h in self.hotels])

    def totals(self) -> Dict[str, Money]:
        return {h.name: total_price(h, self.is_rewards_client, self.dates) for h in self.hotels}

    def ranked_hotels(self) -> List[Hotel]:
        """Hotels from cheapest to most expensive; equal prices ordered by descending rank."""
        return sorted(self.hotels, key=cmp_to_key(lambda a, b: compare_price(a, b, self.is_rewards_client, self.dates)))

    def create_report(self) -> List[str]:
        self.log().debug("start calculating report")
        client = "Rewards" if self.is_rewards_client else "Regular"
        report = [f"Client  : {client}     Nights : {len(self.dates)}"]
        totals = self.totals()
        ranked = self.ranked_hotels()
        for h in ranked:
            report.append(f"{h.name:<12} rank {h.rank}   total {totals[h.name]}")
        report.append(f"Cheapest: {ranked[0].name}")
        self.log().debug("end calculating report")
        return report

    def print_report(self):
        r = self.create_report()
        self.log().info("+-------------- Report start ---------------")
        for l in r:
            self.log().info(f"| {l}")
        self.log().info("+-------------- Report end -----------------")

    def log(self) -> logging.Logger:
        if self.custom_logger is not None:
            return self.custom_logger
        else:
            return logger
