"""Blood pressure reading seed data for tests.

Generates morning and evening readings with realistic variation:
- Mornings run a few mmHg higher than evenings
- Weekends slightly lower (more rest)
- An occasional hypertensive spike
"""

import random
from datetime import UTC, datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.models.reading import BloodPressureReading
from bptrack_server.schemas.readings import ReadingCreate
from bptrack_server.services.readings import ReadingService

# Fixed "now" so windowed queries are deterministic
NOW = datetime(2026, 3, 15, 12, 0, tzinfo=UTC)

# Seeded generator for reproducible tests
_rng = random.Random(42)


def _generate_pair(day_index: int, is_morning: bool) -> tuple[int, int, int]:
    """Generate (systolic, diastolic, pulse) for one reading."""
    systolic = 124 + (6 if is_morning else 0)
    diastolic = 78 + (3 if is_morning else 0)
    pulse = 68

    # Weekend dip
    if day_index % 7 in (5, 6):
        systolic -= 4
        diastolic -= 2

    systolic += _rng.randint(-8, 8)
    diastolic += _rng.randint(-5, 5)
    pulse += _rng.randint(-6, 10)

    # Every 11th day has a spike
    if day_index % 11 == 0 and is_morning:
        systolic += 30
        diastolic += 12

    return systolic, diastolic, pulse


async def seed_readings(
    session: AsyncSession,
    profile_id: str,
    days: int,
    end: datetime,
) -> list[BloodPressureReading]:
    """Store two readings a day for `days` days ending at `end`.

    Readings go through ReadingService so derived fields are computed
    exactly as in production.

    Returns:
        The created readings
    """
    service = ReadingService(session)
    created = []

    for day in range(days):
        day_start = end - timedelta(days=day + 1)
        for hour, is_morning in ((7, True), (20, False)):
            systolic, diastolic, pulse = _generate_pair(day, is_morning)
            reading_date = day_start.replace(hour=hour, minute=0, second=0, microsecond=0)
            if reading_date > end:
                continue
            reading = await service.create_reading(
                profile_id,
                ReadingCreate(
                    systolic=systolic,
                    diastolic=diastolic,
                    pulse=pulse,
                    reading_date=reading_date,
                ),
            )
            created.append(reading)

    return created
