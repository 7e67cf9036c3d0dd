import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from subscription_auditor.db.presets import filter_presets, load_presets
from subscription_auditor.models.category import CATEGORIES


def test_bundled_catalog():
    presets = load_presets()
    assert len(presets) == 30
    netflix = presets[0]
    assert netflix.name == "Netflix"
    assert netflix.price == 17.99
    assert netflix.alternative
    assert all(p.category in CATEGORIES for p in presets)


def test_load_from_path_accepts_alt_key(tmp_path):
    catalog = tmp_path / "presets.json"
    catalog.write_text(json.dumps([{"name": "Kagi", "price": 10, "category": "SaaS", "alt": "DuckDuckGo"}]))
    presets = load_presets(catalog)
    assert presets[0].alternative == "DuckDuckGo"


def test_missing_path_gives_empty_catalog(tmp_path):
    assert load_presets(tmp_path / "nope.json") == []


def test_filter_presets():
    presets = load_presets()
    found = filter_presets(presets, "music")
    assert [p.name for p in found] == ["Apple Music"]
    assert filter_presets(presets, "netflix", exclude_names={"Netflix"}) == []


@pytest.mark.parametrize("bad_price", [float("nan"), float("inf")])
def test_non_finite_price_rejected_on_load(tmp_path, bad_price):
    catalog = tmp_path / "presets.json"
    catalog.write_text(json.dumps([{"name": "Broken", "price": bad_price, "category": "SaaS"}]))
    with pytest.raises(PydanticValidationError):
        load_presets(catalog)
