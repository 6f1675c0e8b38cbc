# tests/test_meal_filter.py
from __future__ import annotations

import pytest

from core.catalog import MealCatalog
from core.meal_filter import filter_meals


def _ids(catalog, slot, profile, excluded=()):
    return [t.id for t in filter_meals(catalog, slot, profile, excluded)]


# ── slot / diet ─────────────────────────────────────────────────────
def test_slot_only_keeps_catalog_order(lunch_catalog, make_profile):
    p = make_profile(dietary_preference="non-vegetarian")
    assert _ids(lunch_catalog, "lunch", p) == ["a", "b", "c", "e", "f"]
    assert _ids(lunch_catalog, "breakfast", p) == ["d"]


def test_unset_diet_is_unrestricted(lunch_catalog, make_profile):
    assert _ids(lunch_catalog, "lunch", make_profile()) == ["a", "b", "c", "e", "f"]


def test_vegan_keeps_only_vegan(lunch_catalog, make_profile):
    assert _ids(lunch_catalog, "lunch", make_profile(dietary_preference="vegan")) == ["a", "f"]


def test_vegetarian_allows_vegan(lunch_catalog, make_profile):
    p = make_profile(dietary_preference="vegetarian")
    assert _ids(lunch_catalog, "lunch", p) == ["a", "b", "e", "f"]


# ── cuisine ─────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "pref, expected",
    [
        ("north-indian", ["a", "c"]),
        ("South-Indian", ["b"]),
        ("all-indian", ["a", "b", "c", "e", "f"]),
        (None, ["a", "b", "c", "e", "f"]),
    ],
)
def test_cuisine_region(lunch_catalog, make_profile, pref, expected):
    assert _ids(lunch_catalog, "lunch", make_profile(cuisine_preference=pref)) == expected


# ── allergens ───────────────────────────────────────────────────────
def test_allergens_are_case_insensitive(lunch_catalog, make_profile):
    p = make_profile(food_allergies=("DAIRY", "Fish"))
    assert _ids(lunch_catalog, "lunch", p) == ["a", "e", "f"]


# ── health conditions ───────────────────────────────────────────────
def test_diabetes_restricts_pool_to_low_gi(lunch_catalog, make_profile):
    assert _ids(lunch_catalog, "lunch", make_profile("Diabetes")) == ["a"]


def test_diabetes_without_low_gi_in_pool_passes_through(lunch_catalog, make_profile):
    # the west-indian pool has no low-GI entry, so nothing is removed
    p = make_profile("diabetes", cuisine_preference="west-indian")
    assert _ids(lunch_catalog, "lunch", p) == ["e"]


@pytest.mark.parametrize("name", ["hypertension", "High Blood Pressure"])
def test_hypertension_prefers_low_sodium(lunch_catalog, make_profile, name):
    assert _ids(lunch_catalog, "lunch", make_profile(name)) == ["a"]


def test_hypertension_without_low_sodium_passes_through(lunch_catalog, make_profile):
    p = make_profile("hypertension", dietary_preference="vegetarian", cuisine_preference="south-indian")
    assert _ids(lunch_catalog, "lunch", p) == ["b"]


@pytest.mark.parametrize("name", ["digestive", "IBS", "acidity"])
def test_digestive_requires_easy_digest_or_light(lunch_catalog, make_profile, name):
    assert _ids(lunch_catalog, "lunch", make_profile(name)) == ["e", "f"]


def test_unknown_condition_has_no_effect(lunch_catalog, make_profile):
    assert _ids(lunch_catalog, "lunch", make_profile("migraine")) == ["a", "b", "c", "e", "f"]


def test_conditions_narrow_in_sequence_without_relaxing(lunch_catalog, make_profile):
    # diabetes leaves only "a", which is neither easy-digest nor light
    assert _ids(lunch_catalog, "lunch", make_profile("diabetes", "ibs")) == []


def test_hypertension_looks_only_at_what_diabetes_left(make_template, make_profile):
    # the only low-sodium entry is high GI; once diabetes drops it, the
    # hypertension rule finds no low-sodium option and keeps the rest
    catalog = MealCatalog([
        make_template("lowgi", glycemic_index="low"),
        make_template("salty", glycemic_index="medium"),
        make_template("lowna", glycemic_index="high", health_tags=frozenset({"low-sodium"})),
    ])
    p = make_profile("diabetes", "hypertension")
    assert _ids(catalog, "lunch", p) == ["lowgi"]
    assert _ids(catalog, "lunch", make_profile("hypertension")) == ["lowna"]


# ── exclusions / determinism ────────────────────────────────────────
def test_exclusions_are_dropped(lunch_catalog, make_profile):
    assert _ids(lunch_catalog, "lunch", make_profile(), ["a", "c", "zz"]) == ["b", "e", "f"]


def test_everything_excluded_yields_empty(lunch_catalog, make_profile):
    assert _ids(lunch_catalog, "lunch", make_profile(), lunch_catalog.ids()) == []


def test_filtering_is_deterministic_and_leaves_catalog_alone(lunch_catalog, make_profile):
    p = make_profile("hypertension", dietary_preference="vegetarian", food_allergies=("dairy",))
    before = lunch_catalog.frame().copy()
    first = filter_meals(lunch_catalog, "lunch", p, ["f"])
    second = filter_meals(lunch_catalog, "lunch", p, ["f"])
    assert first == second
    assert lunch_catalog.frame().equals(before)
