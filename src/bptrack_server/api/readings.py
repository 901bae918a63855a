"""Blood pressure reading API endpoints."""

from datetime import datetime
from typing import Annotated, Any

from litestar import Router, delete, get, patch, post
from litestar.exceptions import NotFoundException, ValidationException
from litestar.params import Parameter
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED, HTTP_204_NO_CONTENT
from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.api.params import require_profile, validate_id
from bptrack_server.schemas.base import to_utc
from bptrack_server.schemas.readings import ReadingCreate, ReadingRead, ReadingUpdate
from bptrack_server.services.readings import ReadingService


@get("/profiles/{profile_id:str}/readings", status_code=HTTP_200_OK)
async def list_readings(
    profile_id: str,
    session: AsyncSession,
    start_date: Annotated[
        datetime | None,
        Parameter(query="startDate", description="Inclusive lower bound (ISO 8601)"),
    ] = None,
    end_date: Annotated[
        datetime | None,
        Parameter(query="endDate", description="Inclusive upper bound (ISO 8601)"),
    ] = None,
) -> list[dict[str, Any]]:
    """List a profile's readings, most recent first.

    Example:
        GET /api/v1/profiles/{id}/readings?startDate=2026-01-01T00:00:00&endDate=2026-01-31T23:59:59
    """
    await require_profile(session, profile_id)

    start = to_utc(start_date) if start_date else None
    end = to_utc(end_date) if end_date else None
    if start and end and start > end:
        raise ValidationException("startDate must not be after endDate")

    readings = await ReadingService(session).list_readings(profile_id, start, end)
    return [ReadingRead.model_validate(r).to_json() for r in readings]


@post("/profiles/{profile_id:str}/readings", status_code=HTTP_201_CREATED)
async def create_reading(
    profile_id: str,
    data: ReadingCreate,
    session: AsyncSession,
) -> dict[str, Any]:
    """Record a reading. Classification and derived metrics are computed here.

    Example body:
        {"systolic": 128, "diastolic": 82, "pulse": 70, "readingDate": "2026-01-20T08:00:00Z"}
    """
    await require_profile(session, profile_id)
    reading = await ReadingService(session).create_reading(profile_id, data)
    return ReadingRead.model_validate(reading).to_json()


@get("/profiles/{profile_id:str}/readings/{reading_id:str}", status_code=HTTP_200_OK)
async def get_reading(profile_id: str, reading_id: str, session: AsyncSession) -> dict[str, Any]:
    """Get a single reading."""
    validate_id(profile_id, "profile_id")
    validate_id(reading_id, "reading_id")
    reading = await ReadingService(session).get_reading(profile_id, reading_id)
    if reading is None:
        raise NotFoundException(f"Reading {reading_id} not found")
    return ReadingRead.model_validate(reading).to_json()


@patch("/profiles/{profile_id:str}/readings/{reading_id:str}", status_code=HTTP_200_OK)
async def update_reading(
    profile_id: str,
    reading_id: str,
    data: ReadingUpdate,
    session: AsyncSession,
) -> dict[str, Any]:
    """Update a reading; derived fields are recomputed from the result."""
    validate_id(profile_id, "profile_id")
    validate_id(reading_id, "reading_id")
    reading = await ReadingService(session).update_reading(profile_id, reading_id, data)
    if reading is None:
        raise NotFoundException(f"Reading {reading_id} not found")
    return ReadingRead.model_validate(reading).to_json()


@delete("/profiles/{profile_id:str}/readings/{reading_id:str}", status_code=HTTP_204_NO_CONTENT)
async def delete_reading(profile_id: str, reading_id: str, session: AsyncSession) -> None:
    """Delete a reading."""
    validate_id(profile_id, "profile_id")
    validate_id(reading_id, "reading_id")
    if not await ReadingService(session).delete_reading(profile_id, reading_id):
        raise NotFoundException(f"Reading {reading_id} not found")


readings_router = Router(
    path="/",
    route_handlers=[list_readings, create_reading, get_reading, update_reading, delete_reading],
    tags=["Readings"],
)
