# supply_inputs.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from core.readiness.models import Category, ExpiringItem, HouseholdProfile, Hazard, InventoryItem


DEFAULT_DAYS_PER_UNIT = 1.0


@dataclass(frozen=True)
class PresetItem:
    name: str
    unit: str
    days_per_unit: float


PRESET_ITEMS: Dict[Category, List[PresetItem]] = {
    Category.WATER: [
        PresetItem("Drinking Water", "gallons", 1),
        PresetItem("Water Bottles", "bottles", 0.125),
        PresetItem("Water Purification Tablets", "tablets", 0.1),
    ],
    Category.FOOD: [
        PresetItem("Canned Food", "cans", 0.33),
        PresetItem("Dry Rice", "pounds", 2),
        PresetItem("Pasta", "pounds", 2),
        PresetItem("Peanut Butter", "jars", 3),
        PresetItem("Energy Bars", "bars", 0.25),
    ],
    Category.MEDICAL: [
        PresetItem("First Aid Kit", "kits", 30),
        PresetItem("Prescription Medications", "days", 1),
        PresetItem("Pain Relievers", "bottles", 30),
    ],
    Category.TOOLS: [
        PresetItem("Flashlight", "flashlights", 365),
        PresetItem("Batteries", "sets", 7),
        PresetItem("Radio", "radios", 365),
    ],
    Category.SHELTER: [
        PresetItem("Blankets", "blankets", 365),
        PresetItem("Tarps", "tarps", 365),
        PresetItem("Duct Tape", "rolls", 30),
    ],
}


def _first(raw: Dict[str, Any], *keys: str) -> Any:
    for k in keys:
        if raw.get(k) is not None:
            return raw[k]
    return None


def _parse_date(d: Any) -> Optional[date]:
    if not d:
        return None
    if isinstance(d, datetime):
        return d.date()
    if isinstance(d, date):
        return d
    s = str(d).strip()
    for fmt in ("%Y-%m-%d", "%m/%d/%Y"):
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def find_preset(category: str, name: Optional[str]) -> Optional[PresetItem]:
    try:
        presets = PRESET_ITEMS[Category(category)]
    except ValueError:
        return None
    for preset in presets:
        if preset.name == name:
            return preset
    return None


def estimate_days_supply(category: str, name: Optional[str], quantity: float) -> float:
    preset = find_preset(category, name)
    days_per_unit = preset.days_per_unit if preset else DEFAULT_DAYS_PER_UNIT
    return float(quantity) * days_per_unit


def build_inventory_item(raw: Dict[str, Any]) -> InventoryItem:
    """
    Accepts a stored inventory record (camelCase, as the app persists it) or
    its snake_case form. A missing daysSupply is estimated from the catalog.
    """
    category = str(raw.get("category") or "")
    name = raw.get("name")
    quantity = float(raw.get("quantity") or 0)

    days_supply = _first(raw, "daysSupply", "days_supply")
    if days_supply is None:
        days_supply = estimate_days_supply(category, name, quantity)

    item_id = raw.get("id")
    return InventoryItem(
        id=str(item_id) if item_id is not None else None,
        name=str(name) if name is not None else None,
        category=category,
        quantity=quantity,
        unit=str(raw.get("unit") or ""),
        days_supply=float(days_supply),
        expiry_date=_parse_date(_first(raw, "expiryDate", "expiry_date")),
    )


def build_household_profile(raw: Dict[str, Any]) -> HouseholdProfile:
    adults = _first(raw, "adultsCount", "adults_count")
    children = _first(raw, "childrenCount", "children_count")

    # the onboarding form keeps householdSize in sync; only derive it when absent
    size = _first(raw, "householdSize", "household_size")
    if size is None:
        size = int(adults or 0) + int(children or 0)

    pets = _first(raw, "petsCount", "pets_count")
    zip_code = _first(raw, "zipCode", "zip_code")
    return HouseholdProfile(
        household_size=int(size),
        hazard_profile=str(_first(raw, "hazardProfile", "hazard_profile") or Hazard.GENERAL.value),
        has_emergency_plan=bool(_first(raw, "hasEmergencyPlan", "has_emergency_plan")),
        adults_count=int(adults) if adults is not None else None,
        children_count=int(children) if children is not None else None,
        pets_count=int(pets) if pets is not None else None,
        zip_code=str(zip_code) if zip_code else None,
    )


def find_expiring_items(
    inventory: Iterable[InventoryItem],
    *,
    as_of: date,
    window_days: int = 30,
) -> List[ExpiringItem]:
    cutoff = as_of + timedelta(days=window_days)

    out: List[ExpiringItem] = []
    for item in inventory:
        if item.expiry_date is None or item.expiry_date > cutoff:
            continue
        days_left = (item.expiry_date - as_of).days
        out.append(ExpiringItem(
            id=item.id,
            name=item.name,
            category=item.category,
            expiry_date=item.expiry_date,
            days_until_expiry=days_left,
            expired=days_left < 0,
        ))

    out.sort(key=lambda e: e.expiry_date)
    return out
