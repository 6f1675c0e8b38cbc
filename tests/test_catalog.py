# tests/test_catalog.py
from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from core.catalog import FRAME_COLUMNS, MealCatalog, default_catalog, load_catalog, summarize
from core.models import SLOTS

BUNDLED = default_catalog()


def test_bundled_catalog_covers_every_slot_and_diet():
    df = BUNDLED.frame()
    assert set(df["slot"]) == set(SLOTS)
    assert set(df["diet_type"]) == {"vegan", "vegetarian", "non-vegetarian"}
    for region in ("North", "South", "East", "West"):
        assert df["cuisine"].str.contains(region).any()


def test_bundled_ids_are_unique_and_separator_free():
    ids = BUNDLED.ids()
    assert len(ids) == len(set(ids)) == len(BUNDLED)
    assert not any("_" in i for i in ids)


def test_frame_follows_catalog_order(lunch_catalog):
    df = lunch_catalog.frame()
    assert list(df.columns) == FRAME_COLUMNS
    assert list(df["id"]) == ["a", "b", "c", "d", "e", "f"]
    assert list(df["position"]) == list(range(6))
    # allergens are stored lower-cased for matching
    assert df.loc[df["id"] == "b", "allergens"].iloc[0] == frozenset({"dairy"})


def test_lookup(lunch_catalog):
    assert lunch_catalog.get("c").diet_type == "non-vegetarian"
    assert "c" in lunch_catalog
    with pytest.raises(KeyError):
        lunch_catalog.get("zz")


def test_duplicate_ids_rejected(make_template):
    with pytest.raises(ValueError):
        MealCatalog([make_template("x"), make_template("x", slot="dinner")])


def test_template_id_must_not_contain_underscore(make_template):
    with pytest.raises(ValidationError):
        make_template("bad_id")


def test_templates_are_immutable(make_template):
    t = make_template("x")
    with pytest.raises(ValidationError):
        t.base_calories = 900


def test_load_catalog_roundtrip(tmp_path, make_template):
    path = tmp_path / "meals.json"
    path.write_text(json.dumps([make_template("x").model_dump(mode="json")]))
    catalog = load_catalog(path)
    assert catalog.ids() == ["x"]
    assert catalog.get("x") == make_template("x")


def test_load_catalog_rejects_non_list(tmp_path):
    path = tmp_path / "meals.json"
    path.write_text(json.dumps({"id": "x"}))
    with pytest.raises(ValueError):
        load_catalog(path)


def test_summarize(lunch_catalog):
    summary = summarize(lunch_catalog)
    assert summary["slot"] == {"breakfast": 1, "lunch": 5}
    assert summary["diet_type"] == {"non-vegetarian": 1, "vegan": 3, "vegetarian": 2}
    assert sum(summary["cuisine"].values()) == len(lunch_catalog)
