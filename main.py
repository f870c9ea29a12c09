import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError, field_validator

from config import settings
from core.readiness.adapters import InvalidHouseholdSize
from core.readiness.bridge import ReadinessReport, build_readiness_report
from core.readiness.models import SupplyGap
from recommendation_rules import Recommendation, build_recommendations
from supply_inputs import PRESET_ITEMS, build_household_profile, build_inventory_item

# -------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("readyscore")

logger.info("Household size policy: %s", settings.HOUSEHOLD_SIZE_POLICY)
logger.info("Expiry warning window: %s days", settings.EXPIRY_WARNING_DAYS)

# -------------------------------------------------------------------
# FastAPI App
# -------------------------------------------------------------------

app = FastAPI(
    title="ReadyScore API",
    version="1.0.0",
    description="ReadyScore: household emergency preparedness scoring.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -------------------------------------------------------------------
# Models
# -------------------------------------------------------------------

class HouseholdPayload(BaseModel):
    householdSize: Optional[int] = Field(default=None, ge=0)
    adultsCount: Optional[int] = Field(default=None, ge=0)
    childrenCount: Optional[int] = Field(default=None, ge=0)
    petsCount: Optional[int] = Field(default=None, ge=0)
    zipCode: Optional[str] = None
    hazardProfile: str = "general"
    hasEmergencyPlan: bool = False


class InventoryItemPayload(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    category: str
    quantity: float = Field(default=0, ge=0, allow_inf_nan=False)
    unit: str = ""
    expiryDate: Optional[str] = None
    daysSupply: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("category")
    @classmethod
    def normalize_category(cls, v: str) -> str:
        return (v or "").strip()


class ReadinessRequest(BaseModel):
    household: HouseholdPayload
    inventory: List[InventoryItemPayload] = []
    asOf: Optional[date] = None


class RecommendationRequest(BaseModel):
    gaps: List[SupplyGap]
    householdSize: int = Field(ge=1)


class RecommendationResponse(BaseModel):
    recommendations: List[Recommendation]

# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------

@app.get("/")
def root():
    return {"status": "ok", "service": "ReadyScore API", "version": "1.0.0"}


@app.get("/health")
def health():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {
            "api": "operational",
            "scoring": "operational",
        },
        "household_size_policy": settings.HOUSEHOLD_SIZE_POLICY,
    }


@app.get("/catalog")
def catalog() -> Dict[str, List[Dict[str, Any]]]:
    return {
        category.value: [
            {"name": p.name, "unit": p.unit, "daysPerUnit": p.days_per_unit}
            for p in presets
        ]
        for category, presets in PRESET_ITEMS.items()
    }


@app.post("/readiness", response_model=ReadinessReport)
def readiness(payload: ReadinessRequest):
    household = build_household_profile(payload.household.model_dump())
    inventory = [build_inventory_item(item.model_dump()) for item in payload.inventory]

    logger.info(
        "Readiness requested: household_size=%s hazard=%s items=%d",
        household.household_size,
        household.hazard_profile,
        len(inventory),
    )

    return build_readiness_report(
        inventory,
        household,
        as_of=payload.asOf or datetime.now(timezone.utc).date(),
        household_size_policy=settings.HOUSEHOLD_SIZE_POLICY,
        expiry_window_days=settings.EXPIRY_WARNING_DAYS,
    )


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(payload: RecommendationRequest):
    recs = build_recommendations(payload.gaps, payload.householdSize)
    return RecommendationResponse(recommendations=recs)


@app.exception_handler(InvalidHouseholdSize)
async def invalid_household_handler(request: Request, exc: InvalidHouseholdSize):
    logger.warning("Rejected household: %s", exc)
    return JSONResponse(
        status_code=422,
        content={"error": str(exc), "status_code": 422, "path": str(request.url)},
    )


@app.exception_handler(ValidationError)
async def record_validation_handler(request: Request, exc: ValidationError):
    # raised while building engine records, e.g. a quantity whose days overflow to inf
    logger.warning("Rejected inventory: %s", exc)
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid inventory or household values", "status_code": 422, "path": str(request.url)},
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "status_code": exc.status_code, "path": str(request.url)},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})
