from fod_dashboard.api.routes.leagues import router as leagues_router
from fod_dashboard.api.routes.pages import router as pages_router
from fod_dashboard.api.routes.site_settings import router as site_settings_router

__all__ = [
    "leagues_router",
    "pages_router",
    "site_settings_router",
]
