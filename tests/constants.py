"""Shared test data"""

LEADERBOARD_CODE = "123abc"
JOIN_CODE = "123abc-9f8e7d6c"
SESSION = "53616c7465645f5f-session"

SAMPLE_LEADERBOARD = {
    "owner_id": 101,
    "event": "2025",
    "members": {
        "101": {
            "id": 101,
            "name": "Alice",
            "stars": 3,
            "local_score": 10,
            "global_score": 0,
            "last_star_ts": 1764600000,
            "completion_day_level": {
                "1": {
                    "1": {"get_star_ts": 1764570000, "star_index": 1},
                    "2": {"get_star_ts": 1764571000, "star_index": 2},
                },
                "2": {
                    "1": {"get_star_ts": 1764600000, "star_index": 5},
                },
            },
        },
        "202": {
            "id": 202,
            "name": None,
            "stars": 3,
            "local_score": 10,
            "global_score": 0,
            "last_star_ts": 1764590000,
            "completion_day_level": {
                "1": {
                    "1": {"get_star_ts": 1764575000, "star_index": 3},
                    "2": {"get_star_ts": 1764576000, "star_index": 4},
                },
                "2": {
                    "1": {"get_star_ts": 1764590000, "star_index": 6},
                },
            },
        },
        "303": {
            "id": 303,
            "name": "Carol",
            "stars": 4,
            "local_score": 14,
            "global_score": 0,
            "last_star_ts": 1764650000,
            "completion_day_level": {
                "1": {
                    "1": {"get_star_ts": 1764566000, "star_index": 0},
                    "2": {"get_star_ts": 1764567000, "star_index": 2},
                },
                "2": {
                    "1": {"get_star_ts": 1764640000, "star_index": 7},
                    "2": {"get_star_ts": 1764650000, "star_index": 8},
                },
            },
        },
        "404": {
            "id": 404,
            "name": "Dave",
            "stars": 0,
            "local_score": 0,
            "global_score": 0,
            "last_star_ts": 0,
            "completion_day_level": {},
        },
    },
}

PERMISSION_DENIED_PAGE = (
    "<!DOCTYPE html><html><body><main><p>You don't have permission to view "
    "that private leaderboard.</p></main></body></html>"
)
