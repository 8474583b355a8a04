from fastapi import APIRouter, HTTPException, Query

from app.schemas.awards import BadgeOut
from app.schemas.behaviors import BehaviorType
from app.services.badges import REWARD_BADGES, badges_for_type, get_badge

router = APIRouter(prefix="/badges", tags=["badges"])


@router.get("", response_model=list[BadgeOut])
def list_badges(behavior_type: BehaviorType | None = Query(default=None, alias="type")):
    if behavior_type:
        return badges_for_type(behavior_type)
    return list(REWARD_BADGES)


@router.get("/{badge_id}", response_model=BadgeOut)
def badge_details(badge_id: str):
    badge = get_badge(badge_id)
    if not badge:
        raise HTTPException(status_code=404, detail="Badge not found")
    return badge
