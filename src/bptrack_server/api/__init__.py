"""API routes."""

from litestar import Router

from bptrack_server.api.classify import classify_router
from bptrack_server.api.export import export_router
from bptrack_server.api.health import health_router
from bptrack_server.api.profiles import profiles_router
from bptrack_server.api.readings import readings_router
from bptrack_server.api.reminders import reminders_router
from bptrack_server.api.statistics import statistics_router
from bptrack_server.core.config import settings

# Versioned API routers
_v1_routers = [
    classify_router,
    profiles_router,
    readings_router,
    statistics_router,
    reminders_router,
    export_router,  # CSV data export
]

api_v1_router = Router(path=settings.api_prefix, route_handlers=_v1_routers)

# - health_router: /health - no version prefix
# - api_v1_router: /api/v1/* - everything else
api_routers = [health_router, api_v1_router]

__all__ = ["api_routers"]
