# app.py
from __future__ import annotations
from typing import Any, Dict, List
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from logging_config import configure_logging
from models import (
    ADDON_TABLE, CUT_TABLE, DONENESS_TABLE,
    FoodProfile, MatchRequest, MatchResult, SteakOrder, UserPreferences, Wine,
)
from engine import derive_food_profile
from recommender import recommend_with_profile
from seed_data import load_catalog

settings = get_settings()
configure_logging(settings.log_level)
log = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins, allow_credentials=False,
    allow_methods=["*"], allow_headers=["*"],
)

# vaste voorbeeldcatalogus; wordt expliciet aan de engine meegegeven
CATALOG: List[Wine] = load_catalog()

@app.get("/health")
def health():
    return {"status": "ok"}

# ---------- Keuzes voor de UI ----------
@app.get("/api/options")
def get_options() -> Dict[str, Any]:
    return {
        "cuts": [
            {"id": cut.value, "fattiness": fat, "intensity": inten}
            for cut, (fat, inten) in CUT_TABLE.items()
        ],
        "doneness": [
            {"id": d.value, "tannin_boost": boost, "char_level": char}
            for d, (boost, char) in DONENESS_TABLE.items()
        ],
        "add_ons": [
            {"id": a.value, "spice": s, "funk": f, "richness": r}
            for a, (s, f, r) in ADDON_TABLE.items()
        ],
    }

@app.get("/api/wines", response_model=List[Wine])
def list_wines():
    return CATALOG

@app.get("/api/defaults", response_model=MatchRequest)
def get_defaults():
    # reset-stand van de UI
    return MatchRequest(order=SteakOrder(), preferences=UserPreferences())

# ---------- Profiel & matchen ----------
@app.post("/api/profile", response_model=FoodProfile)
def food_profile(order: SteakOrder):
    return derive_food_profile(order)

@app.post("/api/match", response_model=MatchResult)
def match(payload: MatchRequest):
    """
    Verwacht: {"order": {"cut": "Ribeye", "doneness": "Medium-Rare", "add_ons": []},
               "preferences": {"tannin_tolerance": 5, ..., "budget_min": 0, "budget_max": 200}}
    Geen betaalbare wijnen is geen fout: lege lijst, geen swap.
    """
    food, result = recommend_with_profile(CATALOG, payload.order, payload.preferences)
    log.info("match %s/%s add_ons=%d -> %d picks",
             payload.order.cut.value, payload.order.doneness.value,
             len(payload.order.add_ons), len(result.recommendations))
    return MatchResult(
        food_profile=food,
        recommendations=result.recommendations,
        swap_suggestion=result.swap_suggestion,
    )
