# models.py
from __future__ import annotations
from enum import Enum
from typing import Annotated, Dict, List, Optional, Set, Tuple
from uuid import uuid4
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, computed_field, field_serializer, field_validator

# Schaal 1..10 voor alle wijn-attributen en toleranties
Level = Annotated[int, Field(ge=1, le=10)]

def _new_id() -> str:
    return uuid4().hex

# ---- Wijn ----
class Wine(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    name: str
    grape: str      # "Cabernet Sauvignon"
    style: str      # "Full-bodied red"
    region: str     # "Napa Valley, CA"
    price: float = Field(ge=0)
    vintage: Optional[int] = None

    # interne kenmerken voor scoring
    tannin: Level
    oak: Level
    spice: Level
    funk: Level     # aardsheid/brett
    body: Level
    acidity: Level

# ---- Steak ----
class SteakCut(str, Enum):
    RIBEYE = "Ribeye"
    FILET_MIGNON = "Filet Mignon"
    NY_STRIP = "NY Strip"
    PORTERHOUSE = "Porterhouse"
    T_BONE = "T-Bone"
    SIRLOIN = "Sirloin"
    FLAT_IRON = "Flat Iron"
    SKIRT = "Skirt Steak"

class Doneness(str, Enum):
    RARE = "Rare"
    MEDIUM_RARE = "Medium-Rare"
    MEDIUM = "Medium"
    MEDIUM_WELL = "Medium-Well"
    WELL_DONE = "Well-Done"

class AddOn(str, Enum):
    AU_POIVRE = "Au Poivre"
    BORDELAISE = "Bordelaise"
    BLUE_CHEESE = "Blue Cheese"
    DEMI_GLACE = "Demi-glace"
    BOURBON_GLAZE = "Bourbon Glaze"
    SHRIMP_OSCAR = "Shrimp Oscar"

# (fattiness, intensity)
CUT_TABLE: Dict[SteakCut, Tuple[int, int]] = {
    SteakCut.RIBEYE:       (9, 9),
    SteakCut.FILET_MIGNON: (4, 5),
    SteakCut.NY_STRIP:     (7, 8),
    SteakCut.PORTERHOUSE:  (8, 8),
    SteakCut.T_BONE:       (8, 8),
    SteakCut.SIRLOIN:      (5, 6),
    SteakCut.FLAT_IRON:    (6, 7),
    SteakCut.SKIRT:        (6, 8),
}

# (tannin boost, char level)
DONENESS_TABLE: Dict[Doneness, Tuple[float, int]] = {
    Doneness.RARE:        (0.7, 2),
    Doneness.MEDIUM_RARE: (0.85, 4),
    Doneness.MEDIUM:      (1.0, 6),
    Doneness.MEDIUM_WELL: (1.15, 8),
    Doneness.WELL_DONE:   (1.3, 10),
}

# (spice, funk, richness) correcties
ADDON_TABLE: Dict[AddOn, Tuple[int, int, int]] = {
    AddOn.AU_POIVRE:     (3, 1, 1),
    AddOn.BORDELAISE:    (1, 2, 1),
    AddOn.BLUE_CHEESE:   (0, 4, 2),
    AddOn.DEMI_GLACE:    (0, 1, 2),
    AddOn.BOURBON_GLAZE: (1, 0, 2),
    AddOn.SHRIMP_OSCAR:  (0, -2, 2),
}

class SteakOrder(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    cut: SteakCut = SteakCut.RIBEYE
    doneness: Doneness = Doneness.MEDIUM_RARE
    add_ons: Set[AddOn] = Field(default_factory=set)  # dubbele add-ons vallen samen

    @field_serializer("add_ons")
    def _add_ons_in_menu_order(self, add_ons: Set[AddOn]) -> List[AddOn]:
        # vaste volgorde in JSON, onafhankelijk van set-hashing
        return sorted(add_ons, key=list(AddOn).index)

# ---- Gebruiker ----
class UserPreferences(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    tannin_tolerance: int = Field(5, ge=1, le=10)
    oak_tolerance: int = Field(5, ge=1, le=10)
    spice_tolerance: int = Field(5, ge=1, le=10)
    funk_tolerance: int = Field(5, ge=1, le=10)
    budget_min: float = Field(0, ge=0)
    budget_max: float = Field(200, ge=0)

    # budget_min <= budget_max, ook bij toewijzing
    @field_validator("budget_min")
    @classmethod
    def check_budget_min(cls, v: float, info: ValidationInfo) -> float:
        budget_max = info.data.get("budget_max")
        if budget_max is not None and v > budget_max:
            raise ValueError(f"budget_min ({v}) is groter dan budget_max ({budget_max})")
        return v

    @field_validator("budget_max")
    @classmethod
    def check_budget_max(cls, v: float, info: ValidationInfo) -> float:
        budget_min = info.data.get("budget_min")
        if budget_min is not None and budget_min > v:
            raise ValueError(f"budget_min ({budget_min}) is groter dan budget_max ({v})")
        return v

# ---- Afgeleid profiel van het gerecht ----
class FoodProfile(BaseModel):
    fattiness: int = 5
    intensity: int = 5
    char_level: int = 5
    tannin_need: float = 5.0
    spice_level: int = 0      # niet geclampt: add-ons stapelen
    funk_level: int = 0
    richness: int = 5

class ScoreBreakdown(BaseModel):
    structural: float   # tannine + body, max 40
    flavor: float       # spice + funk, max 30
    preference: float   # toleranties, max 20
    value: float        # prijsbonus, max 10 (alleen bij budgetbereik > 0)
    max_points: float

    @property
    def total(self) -> float:
        return self.structural + self.flavor + self.preference + self.value

# ---- Output ----
class WineRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    wine: Wine
    score: float = Field(ge=0, le=100)
    explanation: str
    is_swap_suggestion: bool = False

    @computed_field
    @property
    def score_formatted(self) -> str:
        return f"{self.score:.0f}% Match"

    @computed_field
    @property
    def star_rating(self) -> float:
        return self.score / 20.0  # 0..5 sterren

class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    recommendations: List[WineRecommendation] = Field(default_factory=list)
    swap_suggestion: Optional[WineRecommendation] = None

# ---- API ----
class MatchRequest(BaseModel):
    order: SteakOrder = Field(default_factory=SteakOrder)
    preferences: UserPreferences = Field(default_factory=UserPreferences)

class MatchResult(Recommendation):
    food_profile: FoodProfile
