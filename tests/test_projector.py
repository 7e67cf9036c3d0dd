import pytest

from subscription_auditor.core.exceptions import ValidationError
from subscription_auditor.utils.projector import (
    TimeValueProjector,
    build_projection_series,
    future_value,
    price_after_inflation,
)
from subscription_auditor.models.subscription import Subscription


def test_future_value_table_checks():
    assert future_value(100, 0, 0.07) == 0
    assert future_value(100, 1, 0) == 1200
    assert future_value(100, 10, 0.07) == pytest.approx(17308.48, abs=0.05)


def test_future_value_strictly_increasing():
    values = [future_value(50, years, 0.07) for years in range(0, 41)]
    assert all(later > earlier for earlier, later in zip(values, values[1:]))


def test_series_shape_and_growth():
    series = build_projection_series(29.98, 10, 0.07)
    assert len(series) == 11
    assert [p.year for p in series] == list(range(11))
    assert series[0].total_paid_no_growth == 0
    assert series[0].total_with_compound_return == 0
    for point in series[1:]:
        assert point.total_with_compound_return > point.total_paid_no_growth


def test_series_zero_horizon():
    series = build_projection_series(10, 0, 0.07)
    assert len(series) == 1


def test_series_rejects_negative_horizon():
    with pytest.raises(ValidationError):
        build_projection_series(10, -1, 0.07)


def test_end_to_end_scenario():
    projector = TimeValueProjector(annual_return_rate=0.07)
    monthly = 17.99 + 11.99
    cost = projector.opportunity_cost(monthly, 10)
    assert monthly == pytest.approx(29.98)
    assert monthly * 12 == pytest.approx(359.76)
    assert cost.total_paid == pytest.approx(3597.60)
    assert cost.total_with_compound_return == pytest.approx(monthly * future_value(1, 10, 0.07))
    assert cost.total_with_compound_return == pytest.approx(5189.08, abs=0.05)
    assert cost.lost_returns == pytest.approx(1591.48, abs=0.05)


def test_price_hike_forecast():
    projector = TimeValueProjector(price_hike_rate=0.08)
    forecast = projector.price_hike_forecast(100)
    assert forecast[3] == pytest.approx(125.9712)
    assert forecast[5] == pytest.approx(100 * 1.08 ** 5)
    assert price_after_inflation(100, 0, 0.08) == 100


def test_subscription_rows_totals():
    projector = TimeValueProjector(annual_return_rate=0.07)
    subs = [Subscription(name="Netflix", price=17.99), Subscription(name="Spotify", price=11.99)]
    table = projector.subscription_rows(subs, 10)
    assert [row["name"] for row in table["rows"]] == ["Netflix", "Spotify"]
    assert table["totals"]["paid"] == pytest.approx(sum(row["paid"] for row in table["rows"]))
    assert table["totals"]["opportunity"] == pytest.approx(sum(row["opportunity"] for row in table["rows"]))
