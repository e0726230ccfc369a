from __future__ import annotations

from fastapi import APIRouter, Depends

from ..config import Settings, get_settings

router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "leaderboard_configured": bool(settings.leaderboard_code),
        "event_year": settings.event_year,
    }
