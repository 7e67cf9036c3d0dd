from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence

from subscription_auditor.core.config import Settings, settings
from subscription_auditor.models.category import aggregation_bucket, category_meta
from subscription_auditor.models.subscription import Subscription
from subscription_auditor.utils.projector import TimeValueProjector


@dataclass
class CategoryInsight:
    """Represents calculated insights for a single subscription category."""

    category: str
    yearly_total: float
    subscription_count: int
    share_percent: float
    color: str
    icon: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class DrainRow:
    """One row of the top-drains ranking."""

    subscription: Subscription
    rank: int
    share_percent: float
    bar_percent: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "id": self.subscription.id,
            "name": self.subscription.name,
            "price": self.subscription.price,
            "category": self.subscription.category,
            "share_percent": self.share_percent,
            "bar_percent": self.bar_percent,
        }


class SubscriptionAnalyzer:
    """
    Aggregate statistics over a snapshot of subscriptions.

    Every method is a pure function of the sequence it is given, so the same
    analyzer can be shared by any number of ledgers. Unrecognized categories
    are grouped under ``Other``; the records themselves are never modified.
    """

    def __init__(
        self,
        projector: Optional[TimeValueProjector] = None,
        config: Optional[Settings] = None,
    ) -> None:
        self._config = config or settings
        self._projector = projector or TimeValueProjector(config=self._config)

    def total_monthly(self, subs: Sequence[Subscription]) -> float:
        return sum(sub.price for sub in subs)

    def total_yearly(self, subs: Sequence[Subscription]) -> float:
        return self.total_monthly(subs) * 12

    def daily_cost(self, subs: Sequence[Subscription]) -> float:
        return self.total_monthly(subs) / self._config.DAYS_PER_MONTH

    def weekly_cost(self, subs: Sequence[Subscription]) -> float:
        # Derived from the yearly total, not from the 30-day month used above.
        return self.total_yearly(subs) / self._config.WEEKS_PER_YEAR

    def average_per_subscription(self, subs: Sequence[Subscription]) -> float:
        if not subs:
            return 0.0
        return self.total_monthly(subs) / len(subs)

    def coffee_equivalent(self, subs: Sequence[Subscription]) -> int:
        return math.floor(self.total_monthly(subs) / self._config.COFFEE_PRICE)

    def per_category_yearly(self, subs: Sequence[Subscription]) -> Dict[str, float]:
        totals: Dict[str, float] = defaultdict(float)
        for sub in subs:
            totals[aggregation_bucket(sub.category)] += sub.price * 12
        ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
        return dict(ordered)

    def category_counts(self, subs: Sequence[Subscription]) -> Dict[str, int]:
        counts: Dict[str, int] = defaultdict(int)
        for sub in subs:
            counts[aggregation_bucket(sub.category)] += 1
        return dict(counts)

    def category_breakdown(self, subs: Sequence[Subscription]) -> List[CategoryInsight]:
        yearly = self.total_yearly(subs)
        counts = self.category_counts(subs)
        insights = []
        for category, value in self.per_category_yearly(subs).items():
            meta = category_meta(category)
            insights.append(
                CategoryInsight(
                    category=category,
                    yearly_total=value,
                    subscription_count=counts[category],
                    share_percent=(value / yearly) * 100 if yearly > 0 else 0.0,
                    color=meta.color,
                    icon=meta.icon,
                )
            )
        return insights

    def ranked(self, subs: Sequence[Subscription]) -> List[Subscription]:
        # sorted() is stable, so equal prices keep ledger order.
        return sorted(subs, key=lambda sub: -sub.price)

    def top_n(self, subs: Sequence[Subscription], n: int) -> List[Subscription]:
        if n <= 0:
            return []
        return self.ranked(subs)[:n]

    def most_expensive(self, subs: Sequence[Subscription]) -> Optional[Subscription]:
        return max(subs, key=lambda sub: sub.price) if subs else None

    def cheapest(self, subs: Sequence[Subscription]) -> Optional[Subscription]:
        return min(subs, key=lambda sub: sub.price) if subs else None

    def price_spread(self, subs: Sequence[Subscription]) -> Optional[float]:
        """How many times pricier the costliest subscription is than the cheapest."""
        high, low = self.most_expensive(subs), self.cheapest(subs)
        if high is None or low is None or low.price <= 0:
            return None
        return high.price / low.price

    def top_savings(self, subs: Sequence[Subscription], n: Optional[int] = None) -> Dict[str, Any]:
        """What cancelling the ``n`` priciest subscriptions would recover."""
        count = self._config.TOP_SAVINGS_COUNT if n is None else n
        top = self.top_n(subs, count)
        monthly = sum(sub.price for sub in top)
        horizon = self._config.SAVINGS_HORIZON_YEARS
        return {
            "subscriptions": [sub.name for sub in top],
            "monthly": monthly,
            "yearly": monthly * 12,
            "horizon_years": horizon,
            "opportunity": self._projector.future_value(monthly, horizon),
        }

    def top_drains(self, subs: Sequence[Subscription], n: Optional[int] = None) -> List[DrainRow]:
        count = self._config.TOP_DRAINS_COUNT if n is None else n
        top = self.top_n(subs, count)
        if not top:
            return []
        monthly = self.total_monthly(subs)
        max_price = top[0].price or 1
        return [
            DrainRow(
                subscription=sub,
                rank=rank,
                share_percent=(sub.price / monthly) * 100 if monthly > 0 else 0.0,
                bar_percent=(sub.price / max_price) * 100,
            )
            for rank, sub in enumerate(top, start=1)
        ]

    def summarize(self, subs: Sequence[Subscription]) -> Dict[str, Any]:
        if not subs:
            return {
                "subscription_count": 0,
                "total_monthly": 0.0,
                "total_yearly": 0.0,
                "daily_cost": 0.0,
                "weekly_cost": 0.0,
                "average_per_subscription": 0.0,
                "coffee_equivalent": 0,
                "per_category_yearly": {},
                "category_counts": {},
                "category_breakdown": [],
                "most_expensive": None,
                "cheapest": None,
                "price_spread": None,
                "top_savings": self.top_savings(subs),
                "top_drains": [],
            }

        most, least = self.most_expensive(subs), self.cheapest(subs)
        return {
            "subscription_count": len(subs),
            "total_monthly": self.total_monthly(subs),
            "total_yearly": self.total_yearly(subs),
            "daily_cost": self.daily_cost(subs),
            "weekly_cost": self.weekly_cost(subs),
            "average_per_subscription": self.average_per_subscription(subs),
            "coffee_equivalent": self.coffee_equivalent(subs),
            "per_category_yearly": self.per_category_yearly(subs),
            "category_counts": self.category_counts(subs),
            "category_breakdown": [insight.to_dict() for insight in self.category_breakdown(subs)],
            "most_expensive": most.model_dump() if most else None,
            "cheapest": least.model_dump() if least else None,
            "price_spread": self.price_spread(subs),
            "top_savings": self.top_savings(subs),
            "top_drains": [row.to_dict() for row in self.top_drains(subs)],
        }
