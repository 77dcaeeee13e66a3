from __future__ import annotations

import pytest
from pydantic import ValidationError

from models import AddOn, Doneness, SteakCut, SteakOrder, UserPreferences, Wine, WineRecommendation
from seed_data import EXAMPLE_WINES, load_catalog


def test_defaults():
    order = SteakOrder()
    assert order.cut is SteakCut.RIBEYE
    assert order.doneness is Doneness.MEDIUM_RARE
    assert order.add_ons == set()

    prefs = UserPreferences()
    assert (prefs.tannin_tolerance, prefs.oak_tolerance, prefs.spice_tolerance, prefs.funk_tolerance) == (5, 5, 5, 5)
    assert (prefs.budget_min, prefs.budget_max) == (0, 200)


def test_enums_accept_display_names():
    order = SteakOrder(cut="Skirt Steak", doneness="Well-Done", add_ons=["Demi-glace"])
    assert order.cut is SteakCut.SKIRT
    assert order.doneness is Doneness.WELL_DONE
    assert order.add_ons == {AddOn.DEMI_GLACE}


def test_budget_min_above_max_rejected():
    with pytest.raises(ValidationError):
        UserPreferences(budget_min=150, budget_max=100)


def test_budget_checked_on_assignment():
    prefs = UserPreferences()
    with pytest.raises(ValidationError):
        prefs.budget_min = 500
    assert (prefs.budget_min, prefs.budget_max) == (0, 200)

    with pytest.raises(ValidationError):
        prefs.budget_max = -1
    prefs.budget_min = 20
    with pytest.raises(ValidationError):
        prefs.budget_max = 10
    assert (prefs.budget_min, prefs.budget_max) == (20, 200)


def test_equal_budget_bounds_allowed():
    prefs = UserPreferences(budget_min=65, budget_max=65)
    prefs.budget_max = 65
    assert prefs.budget_min == prefs.budget_max == 65


@pytest.mark.parametrize("field", ["tannin_tolerance", "oak_tolerance", "spice_tolerance", "funk_tolerance"])
@pytest.mark.parametrize("value", [0, 11])
def test_tolerance_out_of_range_rejected(field, value):
    with pytest.raises(ValidationError):
        UserPreferences(**{field: value})


def test_wine_attribute_out_of_range_rejected():
    data = dict(EXAMPLE_WINES[0], tannin=11)
    with pytest.raises(ValidationError):
        Wine(**data)


def test_wine_negative_price_rejected():
    data = dict(EXAMPLE_WINES[0], price=-1)
    with pytest.raises(ValidationError):
        Wine(**data)


def test_wine_is_frozen():
    wine = load_catalog()[0]
    with pytest.raises(ValidationError):
        wine.price = 1


def test_wine_gets_id_when_missing():
    data = {k: v for k, v in EXAMPLE_WINES[1].items() if k != "id"}
    a, b = Wine(**data), Wine(**data)
    assert a.id and b.id and a.id != b.id


def test_catalog_has_six_distinct_wines():
    catalog = load_catalog()
    assert len(catalog) == 6
    assert len({w.id for w in catalog}) == 6
    assert load_catalog() is not catalog


def test_recommendation_display_fields():
    rec = WineRecommendation(wine=load_catalog()[0], score=84.55, explanation="x")
    assert rec.score_formatted == "85% Match"
    assert rec.star_rating == pytest.approx(4.2275)
    assert rec.is_swap_suggestion is False
    dumped = rec.model_dump()
    assert dumped["score_formatted"] == "85% Match"


def test_add_ons_serialised_in_menu_order():
    order = SteakOrder(add_ons=["Shrimp Oscar", "Au Poivre", "Blue Cheese"])
    assert order.model_dump(mode="json")["add_ons"] == ["Au Poivre", "Blue Cheese", "Shrimp Oscar"]
    assert '"add_ons":["Au Poivre","Blue Cheese","Shrimp Oscar"]' in order.model_dump_json()


@pytest.mark.parametrize("score", [-0.1, 100.1])
def test_recommendation_score_out_of_range_rejected(score):
    with pytest.raises(ValidationError):
        WineRecommendation(wine=load_catalog()[0], score=score, explanation="x")
