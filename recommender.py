# recommender.py
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import logging
import numpy as np

from engine import derive_food_profile, explain_match, explain_swap, score_wine
from models import (
    FoodProfile, Recommendation, SteakOrder, UserPreferences, Wine, WineRecommendation,
)

log = logging.getLogger(__name__)

TOP_N = 3
SWAP_MIN_SCORE = 65.0

def affordable(catalog: Sequence[Wine], prefs: UserPreferences) -> List[Wine]:
    return [w for w in catalog if prefs.budget_min <= w.price <= prefs.budget_max]

def rank(scores: Sequence[float]) -> List[int]:
    """Indices op score aflopend; gelijke scores houden de catalogusvolgorde."""
    arr = np.asarray(scores, dtype=float)
    return [int(i) for i in np.argsort(-arr, kind="stable")]

def pick_swap(ranked: List[Tuple[Wine, float]], top: List[Tuple[Wine, float]],
              order: SteakOrder) -> Optional[WineRecommendation]:
    top_grapes = {w.grape for w, _ in top}
    for wine, score in ranked:
        if score >= SWAP_MIN_SCORE and wine.grape not in top_grapes:
            return WineRecommendation(
                wine=wine,
                score=score,
                explanation=explain_swap(wine, order),
                is_swap_suggestion=True,
            )
    return None

def recommend_with_profile(catalog: Sequence[Wine], order: SteakOrder,
                           prefs: UserPreferences) -> Tuple[FoodProfile, Recommendation]:
    food = derive_food_profile(order)

    # 1) budgetfilter
    wines = affordable(catalog, prefs)
    if not wines:
        log.info("geen wijnen binnen budget %.2f-%.2f (catalogus: %d)",
                 prefs.budget_min, prefs.budget_max, len(catalog))
        return food, Recommendation()

    # 2) map: score + uitleg per wijn
    scores = [score_wine(w, food, prefs) for w in wines]
    explanations = [explain_match(w, order, s) for w, s in zip(wines, scores)]

    # 3) reduce: stabiel sorteren, top N
    order_idx = rank(scores)
    ranked = [(wines[i], scores[i]) for i in order_idx]
    top = ranked[:TOP_N]

    picks = [
        WineRecommendation(wine=wines[i], score=scores[i], explanation=explanations[i])
        for i in order_idx[:TOP_N]
    ]
    swap = pick_swap(ranked, top, order)
    log.debug("%d wijnen gescoord, top=%s, swap=%s",
              len(wines), [p.wine.name for p in picks], swap.wine.name if swap else None)
    return food, Recommendation(recommendations=picks, swap_suggestion=swap)

def recommend(catalog: Sequence[Wine], order: SteakOrder, prefs: UserPreferences) -> Recommendation:
    _, result = recommend_with_profile(catalog, order, prefs)
    return result
