from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from subscription_auditor.core.config import Settings, settings
from subscription_auditor.core.exceptions import ValidationError
from subscription_auditor.utils.projector import TimeValueProjector


@dataclass
class RealityCheck:
    """Spend measured against income and everyday prices."""

    annual_salary: float
    hourly_rate: float
    work_hours_per_month: float
    income_percent: float
    freedom_number: float
    lifetime_years: int
    lifetime_cost: float
    grocery_weeks_per_year: int
    flights_per_year: int
    price_forecast: Dict[int, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class RealityCheckCalculator:
    """
    Relates total subscription spend to an annual salary.

    All results degrade to zero when spend or salary is zero; nothing here
    divides by an unguarded denominator.
    """

    def __init__(
        self,
        projector: Optional[TimeValueProjector] = None,
        config: Optional[Settings] = None,
    ) -> None:
        self._config = config or settings
        self._projector = projector or TimeValueProjector(config=self._config)

    @property
    def annual_return_rate(self) -> float:
        return self._projector.annual_return_rate

    @staticmethod
    def _check_salary(annual_salary: float) -> float:
        if annual_salary is None or annual_salary < 0 or math.isnan(annual_salary):
            raise ValidationError(f"annual salary must be >= 0, got {annual_salary!r}", field="annual_salary")
        return annual_salary

    def hourly_rate(self, annual_salary: float) -> float:
        return self._check_salary(annual_salary) / self._config.WORK_HOURS_PER_YEAR

    def work_hours_per_month(self, total_monthly: float, annual_salary: float) -> float:
        rate = self.hourly_rate(annual_salary)
        return total_monthly / rate if rate > 0 else 0.0

    def income_percent(self, total_yearly: float, annual_salary: float) -> float:
        salary = self._check_salary(annual_salary)
        return (total_yearly / salary) * 100 if salary > 0 else 0.0

    def freedom_number(self, total_yearly: float) -> float:
        """Capital whose yield at the configured return covers the yearly spend."""
        if total_yearly <= 0 or self.annual_return_rate <= 0:
            return 0.0
        return total_yearly / self.annual_return_rate

    def lifetime_cost(self, total_monthly: float, horizon: Optional[int] = None) -> float:
        years = self._config.LIFETIME_YEARS if horizon is None else horizon
        return self._projector.future_value(total_monthly, years)

    def grocery_weeks_per_year(self, total_yearly: float) -> int:
        return math.floor(total_yearly / self._config.GROCERY_WEEK_COST)

    def flights_per_year(self, total_yearly: float) -> int:
        return math.floor(total_yearly / self._config.DOMESTIC_FLIGHT_COST)

    def evaluate(
        self,
        total_monthly: float,
        total_yearly: float,
        annual_salary: float,
        lifetime_years: Optional[int] = None,
    ) -> RealityCheck:
        years = self._config.LIFETIME_YEARS if lifetime_years is None else lifetime_years
        return RealityCheck(
            annual_salary=self._check_salary(annual_salary),
            hourly_rate=self.hourly_rate(annual_salary),
            work_hours_per_month=self.work_hours_per_month(total_monthly, annual_salary),
            income_percent=self.income_percent(total_yearly, annual_salary),
            freedom_number=self.freedom_number(total_yearly),
            lifetime_years=years,
            lifetime_cost=self.lifetime_cost(total_monthly, years),
            grocery_weeks_per_year=self.grocery_weeks_per_year(total_yearly),
            flights_per_year=self.flights_per_year(total_yearly),
            price_forecast=self._projector.price_hike_forecast(total_monthly),
        )
