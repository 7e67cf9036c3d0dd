from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ProjectionPoint:
    """Cumulative cost at one year of the projection timeline."""

    year: int
    total_paid_no_growth: float
    total_with_compound_return: float

    @property
    def lost_returns(self) -> float:
        return self.total_with_compound_return - self.total_paid_no_growth

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class OpportunityCost:
    """What a monthly spend costs over a horizon, with and without growth."""

    years: int
    total_paid: float
    total_with_compound_return: float

    @property
    def lost_returns(self) -> float:
        return self.total_with_compound_return - self.total_paid

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["lost_returns"] = self.lost_returns
        return data
