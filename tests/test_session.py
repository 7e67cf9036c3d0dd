import pytest

from subscription_auditor.core.config import Settings
from subscription_auditor.models.subscription import Preset
from subscription_auditor.session import SubscriptionAuditor

presets = [
    Preset(name="Netflix", price=17.99, category="Entertainment", alternative="Tubi (Free with ads)"),
    Preset(name="Spotify", price=11.99, category="Music", alternative="Free Spotify tier"),
    Preset(name="Slack Pro", price=8.75, category="SaaS"),
]


@pytest.fixture
def auditor():
    return SubscriptionAuditor(presets=presets)


def test_add_preset_marks_origin(auditor):
    events = []
    auditor.ledger.subscribe(events.append)
    sub = auditor.add_preset(presets[0])

    assert sub.is_preset is True
    assert sub.alternative == "Tubi (Free with ads)"
    assert events[0].is_preset is True
    assert events[0].name == "Netflix"


def test_add_preset_from_mapping(auditor):
    sub = auditor.add_preset({"name": "Audible", "price": 14.95, "category": "Entertainment", "alt": "Libby"})
    assert sub.alternative == "Libby"


def test_add_custom_parses_and_strips(auditor):
    sub = auditor.add_custom("  Gym  ", "49.99", "Fitness")
    assert sub.name == "Gym"
    assert sub.price == 49.99
    assert sub.is_preset is False


@pytest.mark.parametrize(
    "name, price",
    [("", "5"), ("   ", "5"), (None, "5"), (123, "5"), ("Gym", ""), ("Gym", None), ("Gym", "abc"), ("Gym", "-3")],
)
def test_invalid_custom_input_is_a_no_op(auditor, name, price):
    assert auditor.add_custom(name, price) is None
    assert len(auditor.ledger) == 0


def test_available_presets_hides_added_and_filters(auditor):
    auditor.add_preset(presets[0])
    assert [p.name for p in auditor.available_presets()] == ["Spotify", "Slack Pro"]
    assert [p.name for p in auditor.available_presets("SPOT")] == ["Spotify"]
    assert auditor.available_presets("zzz") == []


def test_end_to_end_dashboard(auditor):
    auditor.add_preset(presets[0])
    auditor.add_preset(presets[1])

    assert auditor.total_monthly() == pytest.approx(29.98)
    assert auditor.total_yearly() == pytest.approx(359.76)

    projection = auditor.projection()
    assert projection["horizon_years"] == 10
    assert len(projection["series"]) == 11
    assert projection["opportunity_cost"]["total_paid"] == pytest.approx(3597.60)
    assert projection["opportunity_cost"]["total_with_compound_return"] == pytest.approx(5189.08, abs=0.05)
    assert projection["series"][-1]["total_with_compound_return"] == pytest.approx(
        projection["opportunity_cost"]["total_with_compound_return"]
    )

    dashboard = auditor.dashboard()
    assert dashboard["aggregates"]["subscription_count"] == 2
    assert dashboard["reality_check"]["annual_salary"] == 60000


def test_horizon_changes(auditor):
    events = []
    auditor.on_parameter_change(events.append)
    auditor.add_custom("Netflix", 17.99)

    assert auditor.set_horizon_years(20) is True
    assert len(auditor.projection_series()) == 21
    assert auditor.set_horizon_years(0) is False
    assert auditor.set_horizon_years(2.5) is False
    assert auditor.horizon_years == 20
    assert [e.to_dict() for e in events] == [{"name": "horizon_years", "value": 20}]


def test_salary_is_clamped(auditor):
    auditor.add_custom("Netflix", 17.99)
    assert auditor.set_annual_salary(-500) == 0
    check = auditor.reality_check()
    assert check.income_percent == 0
    assert check.work_hours_per_month == 0
    assert auditor.set_annual_salary("abc") == 0
    assert auditor.set_annual_salary("52000") == 52000


def test_ticker_items(auditor):
    assert auditor.ticker_items() == []
    auditor.add_preset(presets[0])
    items = {item["label"]: item["value"] for item in auditor.ticker_items()}
    assert items["Monthly Drain"] == "$17.99"
    assert items["Active Subs"] == "1"
    assert items["Most Expensive"] == "Netflix ($17.99)"
    assert items["Work Hours/Mo"] == "0.6h"
    assert items["Income Used"] == "0.4%"


def test_audit_summary(auditor):
    auditor.add_preset(presets[2])
    assert auditor.audit_summary() == {
        "total_monthly": 8.75,
        "total_yearly": 105.0,
        "subscription_count": 1,
    }


def test_custom_config_changes_assumptions():
    config = Settings(ANNUAL_RETURN_RATE=0.0, DAYS_PER_MONTH=31)
    auditor = SubscriptionAuditor(config=config, presets=[])
    auditor.add_custom("Gym", 31)

    assert auditor.aggregates()["daily_cost"] == 1
    cost = auditor.projection()["opportunity_cost"]
    assert cost["total_with_compound_return"] == cost["total_paid"]
    assert auditor.reality_check().freedom_number == 0


def test_bundled_presets_loaded_by_default():
    auditor = SubscriptionAuditor()
    assert len(auditor.presets) == 30


def test_ticker_prints_large_prices_in_full(auditor):
    auditor.add_custom("Private Jet Club", 1234567)
    items = {item["label"]: item["value"] for item in auditor.ticker_items()}
    assert items["Most Expensive"] == "Private Jet Club ($1234567)"
