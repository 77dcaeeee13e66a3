# session.py
from __future__ import annotations
from typing import List, Optional, Sequence
import logging

from models import FoodProfile, SteakOrder, UserPreferences, Wine, WineRecommendation
from recommender import recommend_with_profile

log = logging.getLogger(__name__)

class PairingSession:
    """
    Houdt de keuzes van één gebruiker vast (bestelling, voorkeuren) en het laatst
    berekende resultaat. De engine zelf blijft stateless; hier wordt het resultaat
    in één keer vervangen zodat nooit een half resultaat zichtbaar is.
    """

    def __init__(self, catalog: Sequence[Wine]):
        self.catalog: List[Wine] = list(catalog)
        self.order = SteakOrder()
        self.preferences = UserPreferences()
        self.food_profile: Optional[FoodProfile] = None
        self.recommendations: List[WineRecommendation] = []
        self.swap_suggestion: Optional[WineRecommendation] = None

    def calculate(self) -> List[WineRecommendation]:
        food, result = recommend_with_profile(self.catalog, self.order, self.preferences)
        self.food_profile = food
        self.recommendations, self.swap_suggestion = list(result.recommendations), result.swap_suggestion
        return self.recommendations

    def reset(self) -> None:
        log.debug("sessie reset")
        self.order = SteakOrder()
        self.preferences = UserPreferences()
        self.food_profile = None
        self.recommendations = []
        self.swap_suggestion = None
