from sessionauth.web.routers.auth import router as auth_router
from sessionauth.web.routers.session import router as session_router

__all__ = [
    "auth_router",
    "session_router",
]
