from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class StarInfo(BaseModel):
    get_star_ts: int
    star_index: int = 0


class Member(BaseModel):
    """A member snapshot as returned by the private leaderboard JSON."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str] = None
    stars: int = 0
    local_score: int = 0
    last_star_ts: int = 0
    # day number -> star part ("1" or "2") -> completion info
    completion_day_level: Dict[str, Dict[str, StarInfo]] = Field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return self.name or f"(anonymous user #{self.id})"


class LeaderboardResponse(BaseModel):
    members: Dict[str, Member] = Field(default_factory=dict)
    owner_id: int
    event: str


ErrorType = Literal["auth", "network", "config"]


class ErrorInfo(BaseModel):
    type: ErrorType
    message: str


class PageData(BaseModel):
    leaderboard_code: str
    join_code: str
    leaderboard_data: Optional[LeaderboardResponse] = None
    members: List[Member] = Field(default_factory=list)
    show_cookie_input: bool
    error: Optional[ErrorInfo] = None


class ActionResult(BaseModel):
    success: bool
    status_code: int = 200
    error: Optional[str] = None
    leaderboard_code: str = ""
    join_code: str = ""
