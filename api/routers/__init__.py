"""
Router package for the FitTrack API.

This package contains all API routers organized by domain:
- health: Liveness endpoint
- auth: Role and display name resolution after login
- profile: Profile find-or-create, update and avatar upload
- exercises: Read-only exercise catalog
- logs: Per-set exercise history and streaks
- food: Nutrition lookup proxy
- workouts: Workout composition, feed, likes and comments
"""

from api.routers.health import router as health_router
from api.routers.auth import router as auth_router
from api.routers.profile import router as profile_router
from api.routers.exercises import router as exercises_router
from api.routers.logs import router as logs_router
from api.routers.food import router as food_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "auth_router",
    "profile_router",
    "exercises_router",
    "logs_router",
    "food_router",
    "workouts_router",
]
