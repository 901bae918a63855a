"""CSV Export API endpoints.

Profile-scoped reading export for spreadsheets or sharing with a doctor.
"""

import csv
import io
from datetime import UTC, datetime, timedelta
from typing import Annotated

from litestar import Router, get
from litestar.params import Parameter
from litestar.response import Response
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.api.params import require_profile
from bptrack_server.core.config import settings
from bptrack_server.schemas.base import to_utc
from bptrack_server.services.readings import ReadingService

CSV_COLUMNS = [
    "reading_date",
    "systolic",
    "diastolic",
    "pulse",
    "pulse_pressure",
    "mean_arterial_pressure",
    "classification",
    "weight",
    "notes",
]


@get(
    "/profiles/{profile_id:str}/export/readings.csv",
    status_code=HTTP_200_OK,
)
async def export_readings_csv(
    profile_id: str,
    session: AsyncSession,
    days: Annotated[
        int | None, Parameter(query="days", ge=1, le=settings.statistics_max_days)
    ] = None,
) -> Response[bytes]:
    """Export a profile's readings as CSV, oldest first.

    Args:
        profile_id: Profile identifier
        session: Database session (injected)
        days: Number of days to export (default: settings.statistics_default_days)

    Returns:
        CSV file with one row per reading

    Example:
        GET /api/v1/profiles/{id}/export/readings.csv?days=90
    """
    await require_profile(session, profile_id)
    window_days = days or settings.statistics_default_days

    since = datetime.now(UTC) - timedelta(days=window_days)
    readings = await ReadingService(session).list_readings(profile_id, start_date=since)

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(CSV_COLUMNS)

    for r in reversed(readings):
        writer.writerow(
            [
                to_utc(r.reading_date).isoformat(),
                r.systolic,
                r.diastolic,
                r.pulse,
                r.pulse_pressure,
                r.mean_arterial_pressure,
                r.classification,
                r.weight if r.weight is not None else "",
                r.notes or "",
            ]
        )

    return Response(
        content=output.getvalue().encode("utf-8"),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename=readings_{window_days}days.csv"},
    )


export_router = Router(path="/", route_handlers=[export_readings_csv], tags=["Export"])
