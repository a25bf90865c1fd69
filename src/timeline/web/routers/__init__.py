from timeline.web.routers.auth import router as auth_router
from timeline.web.routers.pages import router as pages_router
from timeline.web.routers.tweets import router as tweets_router

__all__ = [
    "auth_router",
    "pages_router",
    "tweets_router",
]
