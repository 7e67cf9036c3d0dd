from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Literal, Union

from subscription_auditor.models.subscription import Subscription


@dataclass(frozen=True)
class LedgerEvent:
    """Describes one completed ledger mutation for an external observer."""

    action: Literal["add", "remove"]
    subscription_id: str
    name: str
    price: float
    category: str
    is_preset: bool

    @classmethod
    def from_subscription(cls, action: Literal["add", "remove"], sub: Subscription) -> "LedgerEvent":
        return cls(
            action=action,
            subscription_id=sub.id,
            name=sub.name,
            price=sub.price,
            category=sub.category,
            is_preset=sub.is_preset,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ParameterEvent:
    """Emitted after the projection horizon or the salary changes."""

    name: Literal["horizon_years", "annual_salary"]
    value: Union[int, float]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


LedgerObserver = Callable[[LedgerEvent], None]
ParameterObserver = Callable[[ParameterEvent], None]
