# engine.py
from __future__ import annotations
from typing import List
import logging

from models import (
    ADDON_TABLE, CUT_TABLE, DONENESS_TABLE,
    AddOn, FoodProfile, ScoreBreakdown, SteakOrder, UserPreferences, Wine,
)

log = logging.getLogger(__name__)

# ---- 1) Food profile uit de steak-bestelling ----
BASE_SPICE = 0
BASE_FUNK = 0
BASE_RICHNESS = 5

def derive_food_profile(order: SteakOrder) -> FoodProfile:
    fattiness, intensity = CUT_TABLE[order.cut]
    tannin_boost, char_level = DONENESS_TABLE[order.doneness]

    spice, funk, rich = BASE_SPICE, BASE_FUNK, BASE_RICHNESS
    for add_on in order.add_ons:
        ds, df, dr = ADDON_TABLE[add_on]
        spice += ds; funk += df; rich += dr

    profile = FoodProfile(
        fattiness=fattiness,
        intensity=intensity,
        char_level=char_level,
        tannin_need=intensity * tannin_boost,
        spice_level=spice,
        funk_level=funk,
        richness=rich,
    )
    log.debug("food profile voor %s/%s: %s", order.cut.value, order.doneness.value, profile)
    return profile

# ---- 2) Scoring ----
# punten per component: (gewicht, max)
TANNIN_WEIGHT, BODY_WEIGHT = 2.0, 2.0          # structuur, 2x20
SPICE_WEIGHT, FUNK_WEIGHT = 1.5, 1.5           # smaak, 2x15
TOLERANCE_WEIGHT = 5.0                         # voorkeur, 4x5
VALUE_POINTS = 10.0

STRUCTURAL_MAX = 10 * TANNIN_WEIGHT + 10 * BODY_WEIGHT
FLAVOR_MAX = 10 * SPICE_WEIGHT + 10 * FUNK_WEIGHT
PREFERENCE_MAX = 4 * TOLERANCE_WEIGHT

def closeness(level: float, target: float) -> float:
    """0..10: hoe dicht een wijn-kenmerk bij het doel van het gerecht ligt."""
    return max(0.0, 10 - abs(level - target))

def tolerance_fit(level: int, tolerance: int) -> float:
    if level <= tolerance:
        return 1.0
    return max(0.0, 1.0 - (level - tolerance) / 10.0)

def value_bonus(price: float, prefs: UserPreferences) -> float:
    # niet geclampt: boven budget_max negatief, onder budget_min > 10
    budget_range = prefs.budget_max - prefs.budget_min
    return (prefs.budget_max - price) / budget_range * VALUE_POINTS

def score_breakdown(wine: Wine, food: FoodProfile, prefs: UserPreferences) -> ScoreBreakdown:
    structural = (closeness(wine.tannin, food.tannin_need) * TANNIN_WEIGHT
                  + closeness(wine.body, food.fattiness) * BODY_WEIGHT)
    flavor = (closeness(wine.spice, food.spice_level) * SPICE_WEIGHT
              + closeness(wine.funk, food.funk_level) * FUNK_WEIGHT)
    preference = TOLERANCE_WEIGHT * (
        tolerance_fit(wine.tannin, prefs.tannin_tolerance)
        + tolerance_fit(wine.oak, prefs.oak_tolerance)
        + tolerance_fit(wine.spice, prefs.spice_tolerance)
        + tolerance_fit(wine.funk, prefs.funk_tolerance)
    )
    max_points = STRUCTURAL_MAX + FLAVOR_MAX + PREFERENCE_MAX

    # zonder budgetbereik telt de prijsbonus nergens mee, ook niet in het maximum
    value = 0.0
    if prefs.budget_max - prefs.budget_min > 0:
        value = value_bonus(wine.price, prefs)
        max_points += VALUE_POINTS

    return ScoreBreakdown(
        structural=structural, flavor=flavor, preference=preference,
        value=value, max_points=max_points,
    )

def clamp_score(v: float) -> float:
    return max(0.0, min(100.0, v))

def score_wine(wine: Wine, food: FoodProfile, prefs: UserPreferences) -> float:
    b = score_breakdown(wine, food, prefs)
    return clamp_score(b.total / b.max_points * 100)

# ---- 3) Uitleg ----
FANTASTIC_SCORE = 85
GOOD_SCORE = 70
MAX_SENTENCES = 3

def style_descriptor(wine: Wine) -> str:
    if wine.body >= 8 and wine.tannin >= 7:
        return "bold, powerful flavors"
    if wine.oak >= 7:
        return "rich, toasty oak notes"
    if wine.acidity >= 7:
        return "bright freshness"
    if wine.funk >= 6:
        return "earthy, complex character"
    return "smooth, approachable fruit"

def explain_match(wine: Wine, order: SteakOrder, score: float) -> str:
    parts: List[str] = []

    if score >= FANTASTIC_SCORE:
        parts.append("This is a fantastic match!")
    elif score >= GOOD_SCORE:
        parts.append("This pairs really well!")
    else:
        parts.append("This is a solid choice.")

    if wine.tannin >= 7:
        parts.append(f"The grippy tannins complement the richness of your {order.cut.value}.")
    elif wine.tannin <= 4:
        parts.append("Soft tannins won't overpower your steak.")

    if AddOn.AU_POIVRE in order.add_ons and wine.spice >= 6:
        parts.append("The peppery notes echo your au poivre sauce beautifully.")
    if AddOn.BLUE_CHEESE in order.add_ons and wine.funk >= 5:
        parts.append("Its earthy character plays nicely with the blue cheese.")
    if AddOn.SHRIMP_OSCAR in order.add_ons:
        parts.append("Fresh enough to handle the shrimp oscar topping.")

    parts.append(f"This {wine.region} {wine.grape} brings {style_descriptor(wine)}.")

    # kort houden: alleen de eerste drie zinnen
    return " ".join(parts[:MAX_SENTENCES])

def explain_swap(wine: Wine, order: SteakOrder) -> str:
    return (f"If you want to mix it up, try this {wine.grape} – "
            f"it's a different style but still pairs beautifully with your {order.cut.value}.")
