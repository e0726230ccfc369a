from __future__ import annotations

from typing import List

from ..schemas import LeaderboardResponse, Member

# Events from 2025 on run for 12 days instead of 25.
SHORT_EVENT_YEAR = 2025


def rank_members(leaderboard: LeaderboardResponse) -> List[Member]:
    """Order members the way the site does: score, then stars, then earliest finish."""
    return sorted(
        leaderboard.members.values(),
        key=lambda m: (-m.local_score, -m.stars, m.last_star_ts, m.id),
    )


def event_days(event: str) -> int:
    try:
        year = int(event)
    except (TypeError, ValueError):
        return 25
    return 12 if year >= SHORT_EVENT_YEAR else 25


def stars_by_day(member: Member, days: int) -> List[int]:
    """Stars earned per day (0, 1 or 2) for days 1..days."""
    return [len(member.completion_day_level.get(str(day), {})) for day in range(1, days + 1)]
