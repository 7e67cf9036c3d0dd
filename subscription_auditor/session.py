"""
Caller-facing boundary of the auditor.

``SubscriptionAuditor`` owns one ledger plus the two user parameters
(projection horizon and annual salary) and exposes every derived value on
demand. Invalid input arriving here is dropped as a no-op, the way the UI
ignores an empty custom-entry form.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Sequence, Union

from subscription_auditor.core.config import Settings, settings as default_settings
from subscription_auditor.core.exceptions import ValidationError
from subscription_auditor.db.ledger import SubscriptionLedger
from subscription_auditor.db.presets import filter_presets, load_presets
from subscription_auditor.models.category import OTHER
from subscription_auditor.models.events import ParameterEvent, ParameterObserver
from subscription_auditor.models.projection import ProjectionPoint
from subscription_auditor.models.subscription import Preset, Subscription
from subscription_auditor.utils.analyzer import SubscriptionAnalyzer
from subscription_auditor.utils.formatting import format_hours, format_percent, format_price
from subscription_auditor.utils.projector import TimeValueProjector
from subscription_auditor.utils.reality_check import RealityCheck, RealityCheckCalculator

logger = logging.getLogger(__name__)


class SubscriptionAuditor:
    def __init__(
        self,
        config: Optional[Settings] = None,
        presets: Optional[Sequence[Preset]] = None,
        ledger: Optional[SubscriptionLedger] = None,
    ) -> None:
        self.config = config or default_settings
        self.ledger = ledger or SubscriptionLedger()
        self.presets: List[Preset] = (
            list(presets) if presets is not None else load_presets(self.config.PRESETS_JSON)
        )
        self.projector = TimeValueProjector(
            annual_return_rate=self.config.ANNUAL_RETURN_RATE,
            price_hike_rate=self.config.PRICE_HIKE_RATE,
            config=self.config,
        )
        self.analyzer = SubscriptionAnalyzer(self.projector, config=self.config)
        self.reality = RealityCheckCalculator(self.projector, config=self.config)
        self.horizon_years: int = self.config.DEFAULT_PROJECTION_YEARS
        self.annual_salary: float = self.config.DEFAULT_ANNUAL_SALARY
        self._parameter_observers: List[ParameterObserver] = []

    # Mutations

    def add_preset(self, preset: Union[Preset, Dict[str, Any]]) -> Optional[Subscription]:
        try:
            if not isinstance(preset, Preset):
                preset = Preset.model_validate(preset)
            return self.ledger.add(preset.to_create(), from_preset=True)
        except ValueError as e:
            logger.debug(f"Rejected preset: {e}")
            return None

    def add_custom(
        self,
        name: Optional[str],
        price: Union[str, float, None],
        category: Optional[str] = OTHER,
        alternative: Optional[str] = None,
    ) -> Optional[Subscription]:
        if not isinstance(name, str) or not name.strip() or price is None or price == "":
            logger.debug("Rejected custom subscription with missing name or price")
            return None
        try:
            parsed = float(price)
        except (TypeError, ValueError):
            logger.debug(f"Rejected custom subscription {name!r}: price {price!r} is not a number")
            return None

        record = {"name": name, "price": parsed, "category": category, "alternative": alternative}
        try:
            return self.ledger.add(record)
        except ValidationError as e:
            logger.debug(f"Rejected custom subscription {name!r}: {e}")
            return None

    def remove(self, subscription_id: str) -> Optional[Subscription]:
        return self.ledger.remove(subscription_id)

    def subscriptions(self) -> Sequence[Subscription]:
        return self.ledger.all()

    # Parameters

    def set_horizon_years(self, years: int) -> bool:
        if isinstance(years, bool) or not isinstance(years, int) or years <= 0:
            logger.debug(f"Ignoring projection horizon {years!r}")
            return False
        self.horizon_years = years
        self._emit(ParameterEvent("horizon_years", years))
        return True

    def set_annual_salary(self, value: Union[str, float, None]) -> float:
        try:
            salary = float(value) if value not in (None, "") else 0.0
        except (TypeError, ValueError):
            salary = 0.0
        if math.isnan(salary) or salary < 0:
            salary = 0.0
        self.annual_salary = salary
        self._emit(ParameterEvent("annual_salary", salary))
        return salary

    def on_parameter_change(self, observer: ParameterObserver) -> None:
        if observer not in self._parameter_observers:
            self._parameter_observers.append(observer)

    def _emit(self, event: ParameterEvent) -> None:
        for observer in list(self._parameter_observers):
            try:
                observer(event)
            except Exception:
                logger.exception(f"Parameter observer failed on {event.name} change")

    # Read accessors

    def available_presets(self, query: str = "") -> List[Preset]:
        return filter_presets(self.presets, query, exclude_names=self.ledger.names())

    def total_monthly(self) -> float:
        return self.analyzer.total_monthly(self.ledger.all())

    def total_yearly(self) -> float:
        return self.analyzer.total_yearly(self.ledger.all())

    def aggregates(self) -> Dict[str, Any]:
        return self.analyzer.summarize(self.ledger.all())

    def projection_series(self) -> List[ProjectionPoint]:
        return self.projector.series(self.total_monthly(), self.horizon_years)

    def projection(self) -> Dict[str, Any]:
        subs = self.ledger.all()
        monthly = self.analyzer.total_monthly(subs)
        cost = self.projector.opportunity_cost(monthly, self.horizon_years)
        return {
            "horizon_years": self.horizon_years,
            "annual_return_rate": self.projector.annual_return_rate,
            "series": [point.to_dict() for point in self.projection_series()],
            "opportunity_cost": cost.to_dict(),
            "table": self.projector.subscription_rows(subs, self.horizon_years),
        }

    def reality_check(self) -> RealityCheck:
        subs = self.ledger.all()
        return self.reality.evaluate(
            self.analyzer.total_monthly(subs),
            self.analyzer.total_yearly(subs),
            self.annual_salary,
            lifetime_years=self.config.LIFETIME_YEARS,
        )

    def audit_summary(self) -> Dict[str, Any]:
        return {
            "total_monthly": self.total_monthly(),
            "total_yearly": self.total_yearly(),
            "subscription_count": len(self.ledger),
        }

    def ticker_items(self) -> List[Dict[str, str]]:
        subs = self.ledger.all()
        if not subs:
            return []
        check = self.reality_check()
        most = self.analyzer.most_expensive(subs)
        return [
            {"label": "Monthly Drain", "value": f"${self.analyzer.total_monthly(subs):.2f}"},
            {"label": "Active Subs", "value": str(len(subs))},
            {"label": "Daily Cost", "value": f"${self.analyzer.daily_cost(subs):.2f}"},
            {"label": "Most Expensive", "value": f"{most.name} (${format_price(most.price)})"},
            {"label": "Work Hours/Mo", "value": format_hours(check.work_hours_per_month)},
            {"label": "Income Used", "value": format_percent(check.income_percent)},
        ]

    def dashboard(self) -> Dict[str, Any]:
        opportunity = self.projector.opportunity_cost(self.total_monthly(), self.horizon_years)
        return {
            "aggregates": self.aggregates(),
            "opportunity_cost": opportunity.to_dict(),
            "reality_check": self.reality_check().to_dict(),
            "ticker": self.ticker_items(),
        }
