"""
Time-value projections for recurring monthly spend.

The opportunity cost of a subscription is modeled as the future value of an
ordinary annuity: the same monthly payment invested at month end and
compounded monthly at a fixed annual return.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from subscription_auditor.core.config import Settings, settings
from subscription_auditor.core.exceptions import ValidationError
from subscription_auditor.models.projection import OpportunityCost, ProjectionPoint
from subscription_auditor.models.subscription import Subscription


def _check_years(years: int) -> int:
    if isinstance(years, bool) or not isinstance(years, int) or years < 0:
        raise ValidationError(f"years must be a non-negative integer, got {years!r}", field="years")
    return years


def future_value(monthly_payment: float, years: int, annual_return_rate: float) -> float:
    """
    Future value of a level monthly payment.

    ``P * ((1 + r)^n - 1) / r`` with ``r = annual_return_rate / 12`` and
    ``n = years * 12``. A zero rate falls back to ``P * n``.
    """
    periods = years * 12
    if annual_return_rate == 0:
        return monthly_payment * periods
    rate = annual_return_rate / 12
    return monthly_payment * (((1 + rate) ** periods - 1) / rate)


def build_projection_series(
    monthly_payment: float,
    horizon_years: int,
    annual_return_rate: float,
) -> List[ProjectionPoint]:
    _check_years(horizon_years)
    return [
        ProjectionPoint(
            year=year,
            total_paid_no_growth=monthly_payment * 12 * year,
            total_with_compound_return=future_value(monthly_payment, year, annual_return_rate),
        )
        for year in range(horizon_years + 1)
    ]


def price_after_inflation(monthly_payment: float, years: float, annual_inflation_rate: float) -> float:
    return monthly_payment * (1 + annual_inflation_rate) ** years


class TimeValueProjector:
    """Binds the configured return and price-hike rates to the projection helpers."""

    def __init__(
        self,
        annual_return_rate: Optional[float] = None,
        price_hike_rate: Optional[float] = None,
        config: Optional[Settings] = None,
    ) -> None:
        self._config = config or settings
        self.annual_return_rate = (
            self._config.ANNUAL_RETURN_RATE if annual_return_rate is None else annual_return_rate
        )
        self.price_hike_rate = self._config.PRICE_HIKE_RATE if price_hike_rate is None else price_hike_rate

    def future_value(self, monthly_payment: float, years: int) -> float:
        return future_value(monthly_payment, _check_years(years), self.annual_return_rate)

    def series(self, monthly_payment: float, horizon_years: int) -> List[ProjectionPoint]:
        return build_projection_series(monthly_payment, horizon_years, self.annual_return_rate)

    def opportunity_cost(self, monthly_payment: float, years: int) -> OpportunityCost:
        return OpportunityCost(
            years=years,
            total_paid=monthly_payment * 12 * years,
            total_with_compound_return=self.future_value(monthly_payment, years),
        )

    def price_after_inflation(self, monthly_payment: float, years: float) -> float:
        return price_after_inflation(monthly_payment, years, self.price_hike_rate)

    def price_hike_forecast(
        self,
        monthly_payment: float,
        horizons: Optional[Iterable[int]] = None,
    ) -> Dict[int, float]:
        """Monthly price after each horizon, e.g. ``{3: ..., 5: ...}``."""
        years = self._config.PRICE_HIKE_HORIZONS if horizons is None else horizons
        return {y: self.price_after_inflation(monthly_payment, y) for y in years}

    def subscription_rows(
        self,
        subscriptions: Sequence[Subscription],
        years: int,
    ) -> Dict[str, Any]:
        """Per-subscription cost table over ``years`` with a totals row."""
        rows = []
        for sub in subscriptions:
            cost = self.opportunity_cost(sub.price, years)
            rows.append(
                {
                    "id": sub.id,
                    "name": sub.name,
                    "monthly": sub.price,
                    "yearly": sub.price * 12,
                    "paid": cost.total_paid,
                    "opportunity": cost.total_with_compound_return,
                    "lost": cost.lost_returns,
                }
            )

        total_monthly = sum(sub.price for sub in subscriptions)
        total = self.opportunity_cost(total_monthly, years)
        return {
            "years": years,
            "rows": rows,
            "totals": {
                "monthly": total_monthly,
                "yearly": total_monthly * 12,
                "paid": total.total_paid,
                "opportunity": total.total_with_compound_return,
                "lost": total.lost_returns,
            },
        }
