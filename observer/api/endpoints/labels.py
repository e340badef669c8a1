from fastapi import APIRouter, HTTPException

from observer.models.observed_profile import AvoidanceCategory, InterestCategory
from observer.services.profile.labels import (
    AVOIDANCE_LABELS,
    INTEREST_LABELS,
    get_avoidance_label,
    get_interest_label,
)

router = APIRouter(prefix="/labels", tags=["labels"])


@router.get("/interests")
async def interest_labels() -> dict[str, str]:
    return {category.value: label for category, label in INTEREST_LABELS.items()}


@router.get("/avoidances")
async def avoidance_labels() -> dict[str, str]:
    return {category.value: label for category, label in AVOIDANCE_LABELS.items()}


@router.get("/interests/{category}")
async def interest_label(category: str) -> dict[str, str]:
    if category not in {c.value for c in InterestCategory}:
        raise HTTPException(status_code=404, detail=f"Unknown interest category: {category}")
    return {"category": category, "label": get_interest_label(category)}


@router.get("/avoidances/{category}")
async def avoidance_label(category: str) -> dict[str, str]:
    if category not in {c.value for c in AvoidanceCategory}:
        raise HTTPException(status_code=404, detail=f"Unknown avoidance category: {category}")
    return {"category": category, "label": get_avoidance_label(category)}
