from userhub.presentation.api.routers.health import router as health_router
from userhub.presentation.api.routers.users import router as users_router

__all__ = [
    "health_router",
    "users_router",
]
