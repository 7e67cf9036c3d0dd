"""
subscription_auditor
~~~~~~~~~~~~~~~~~~~~

Calculation engine for the Subscription Auditor. A session-scoped ledger of
recurring subscriptions feeds pure calculators for totals, category
breakdowns, compound-growth projections and income reality checks, so any
front end can render the same numbers without reimplementing the math.
"""

from .core.exceptions import AuditorError, ValidationError
from .core.logging import setup_logging
from .db.ledger import SubscriptionLedger
from .db.presets import filter_presets, load_presets
from .models.events import LedgerEvent, ParameterEvent
from .models.projection import OpportunityCost, ProjectionPoint
from .models.subscription import Preset, Subscription, SubscriptionCreate
from .session import SubscriptionAuditor
from .utils.analyzer import CategoryInsight, SubscriptionAnalyzer
from .utils.projector import (
    TimeValueProjector,
    build_projection_series,
    future_value,
    price_after_inflation,
)
from .utils.reality_check import RealityCheck, RealityCheckCalculator

__all__ = [
    "AuditorError",
    "CategoryInsight",
    "LedgerEvent",
    "OpportunityCost",
    "ParameterEvent",
    "Preset",
    "ProjectionPoint",
    "RealityCheck",
    "RealityCheckCalculator",
    "Subscription",
    "SubscriptionAnalyzer",
    "SubscriptionAuditor",
    "SubscriptionCreate",
    "SubscriptionLedger",
    "TimeValueProjector",
    "ValidationError",
    "build_projection_series",
    "filter_presets",
    "future_value",
    "load_presets",
    "price_after_inflation",
    "setup_logging",
]

__version__ = "0.1.0"
