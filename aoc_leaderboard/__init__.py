"""
Advent of Code private leaderboard viewer.

A small FastAPI app that fetches a private leaderboard with a visitor's
session cookie and renders the member rankings. Run it with
``uvicorn --factory aoc_leaderboard.entrypoint:create_app``.
"""

__version__ = "0.1.0"
