"""Statistics API endpoint."""

from typing import Annotated, Any

from litestar import Router, get
from litestar.params import Parameter
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.api.params import require_profile
from bptrack_server.core.config import settings
from bptrack_server.services.statistics import StatisticsService


@get("/profiles/{profile_id:str}/statistics", status_code=HTTP_200_OK)
async def get_statistics(
    profile_id: str,
    session: AsyncSession,
    days: Annotated[
        int | None,
        Parameter(
            query="days",
            ge=1,
            le=settings.statistics_max_days,
            description="Window length ending now (default 30)",
        ),
    ] = None,
) -> dict[str, Any]:
    """Summarise a profile's readings over the last `days` days.

    Returns totals, per-field averages and min/max, the distribution of
    ACC/AHA categories and the window the summary covers.

    Example response:
    ```json
    {
      "totalReadings": 2,
      "averages": {"systolic": 130, "diastolic": 85, "pulse": 73,
                   "pulseStressure": 45, "meanArterialPressure": 100},
      "ranges": {"systolic": {"min": 120, "max": 140}, ...},
      "distribution": {"Hypertension Stage 1": 1, "Hypertension Stage 2": 1},
      "period": {"startDate": "...", "endDate": "...", "days": 30}
    }
    ```
    """
    await require_profile(session, profile_id)
    window_days = days or settings.statistics_default_days

    summary = await StatisticsService(session).get_statistics(profile_id, window_days)
    return summary.to_json()


statistics_router = Router(path="/", route_handlers=[get_statistics], tags=["Statistics"])
