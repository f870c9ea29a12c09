from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Tone = Literal["green", "amber", "red"]


class Category(str, Enum):
    # declaration order is the canonical category order
    WATER = "water"
    FOOD = "food"
    MEDICAL = "medical"
    TOOLS = "tools"
    SHELTER = "shelter"


class Hazard(str, Enum):
    WILDFIRE = "wildfire"
    HURRICANE = "hurricane"
    EARTHQUAKE = "earthquake"
    TORNADO = "tornado"
    FLOOD = "flood"
    WINTER = "winter"
    GENERAL = "general"


class InventoryItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    # free text: anything outside Category is carried but never scored
    category: str
    quantity: float = Field(default=0, ge=0, allow_inf_nan=False)
    unit: str = ""
    days_supply: float = Field(ge=0, allow_inf_nan=False)
    expiry_date: Optional[date] = None

    id: Optional[str] = None
    name: Optional[str] = None


class HouseholdProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    household_size: int = Field(ge=0)
    hazard_profile: str = Hazard.GENERAL.value
    has_emergency_plan: bool = False

    # onboarding details, not used by scoring
    adults_count: Optional[int] = Field(default=None, ge=0)
    children_count: Optional[int] = Field(default=None, ge=0)
    pets_count: Optional[int] = Field(default=None, ge=0)
    zip_code: Optional[str] = None


class CategoryBreakdown(BaseModel):
    days_supply: float = Field(ge=0, allow_inf_nan=False)
    target_days: float = Field(gt=0)
    score: float = Field(ge=0, le=100)
    shortfall: float = Field(ge=0, allow_inf_nan=False)


class SupplyGap(BaseModel):
    category: str
    shortfall: float = Field(ge=0, allow_inf_nan=False)
    priority: float = Field(default=0.0, ge=0)


class ReadinessResult(BaseModel):
    overall_score: int = Field(ge=0, le=100)
    days_of_survival: float = Field(ge=0, allow_inf_nan=False)
    category_breakdown: Dict[str, CategoryBreakdown]
    top_gaps: List[SupplyGap] = Field(default_factory=list, max_length=5)


class ExpiringItem(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    category: str
    expiry_date: date
    days_until_expiry: int
    expired: bool


class ReadinessBand(BaseModel):
    label: str
    description: str
    tone: Tone


class HouseholdReport(BaseModel):
    overall_score: int
    band: ReadinessBand
    status: str
    days_of_survival: float
    household_size: int
    category_scores: Dict[str, int]
    priority_gaps: List[str]
    recommended_actions: List[str]
    biggest_gap: Optional[str] = None
    expiring_items: List[ExpiringItem] = Field(default_factory=list)
