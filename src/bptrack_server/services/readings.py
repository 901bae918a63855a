"""Blood pressure reading persistence service."""

from datetime import datetime

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.models.reading import BloodPressureReading
from bptrack_server.schemas.readings import ReadingCreate, ReadingUpdate
from bptrack_server.services.classification import classify

logger = structlog.get_logger()


def apply_derived_metrics(reading: BloodPressureReading) -> BloodPressureReading:
    """Recompute classification, pulse pressure and MAP from systolic/diastolic.

    Must run on every create and update so derived fields never go stale.
    """
    metrics = classify(reading.systolic, reading.diastolic)
    reading.classification = metrics.category
    reading.pulse_pressure = metrics.pulse_pressure
    reading.mean_arterial_pressure = metrics.mean_arterial_pressure
    return reading


class ReadingService:
    """Service for storing and querying a profile's readings.

    Every method takes the owning profile_id explicitly; a reading is only
    visible through the profile it belongs to.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize reading service.

        Args:
            session: Database session
        """
        self.session = session
        self.logger = logger.bind(service="readings")

    async def list_readings(
        self,
        profile_id: str,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[BloodPressureReading]:
        """Get a profile's readings, most recent first.

        Args:
            profile_id: Profile identifier
            start_date: Only readings taken at or after this time
            end_date: Only readings taken at or before this time

        Returns:
            List of readings
        """
        stmt = select(BloodPressureReading).where(BloodPressureReading.profile_id == profile_id)
        if start_date is not None:
            stmt = stmt.where(BloodPressureReading.reading_date >= start_date)
        if end_date is not None:
            stmt = stmt.where(BloodPressureReading.reading_date <= end_date)
        stmt = stmt.order_by(BloodPressureReading.reading_date.desc())

        result = await self.session.execute(stmt)
        readings = list(result.scalars().all())

        self.logger.debug(
            "Readings fetched",
            profile_id=profile_id,
            start_date=start_date.isoformat() if start_date else None,
            end_date=end_date.isoformat() if end_date else None,
            count=len(readings),
        )
        return readings

    async def get_reading(self, profile_id: str, reading_id: str) -> BloodPressureReading | None:
        """Get a single reading belonging to a profile.

        Returns:
            The reading, or None if it does not exist for this profile
        """
        stmt = (
            select(BloodPressureReading)
            .where(BloodPressureReading.profile_id == profile_id)
            .where(BloodPressureReading.id == reading_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_reading(self, profile_id: str, data: ReadingCreate) -> BloodPressureReading:
        """Classify and store a new reading.

        Args:
            profile_id: Owning profile (must exist)
            data: Validated reading values

        Returns:
            The stored reading with derived fields populated
        """
        reading = BloodPressureReading(
            profile_id=profile_id,
            systolic=data.systolic,
            diastolic=data.diastolic,
            pulse=data.pulse,
            weight=data.weight,
            notes=data.notes,
            reading_date=data.reading_date,
        )
        apply_derived_metrics(reading)

        self.session.add(reading)
        await self.session.commit()
        await self.session.refresh(reading)

        self.logger.info(
            "Reading created",
            profile_id=profile_id,
            reading_id=reading.id,
            classification=reading.classification,
        )
        return reading

    async def update_reading(
        self,
        profile_id: str,
        reading_id: str,
        data: ReadingUpdate,
    ) -> BloodPressureReading | None:
        """Apply a partial update and recompute derived fields.

        Returns:
            The updated reading, or None if it does not exist for this profile
        """
        reading = await self.get_reading(profile_id, reading_id)
        if reading is None:
            return None

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(reading, field, value)
        apply_derived_metrics(reading)

        await self.session.commit()
        await self.session.refresh(reading)

        self.logger.info(
            "Reading updated",
            profile_id=profile_id,
            reading_id=reading_id,
            classification=reading.classification,
        )
        return reading

    async def delete_reading(self, profile_id: str, reading_id: str) -> bool:
        """Delete a reading.

        Returns:
            True if a reading was deleted
        """
        stmt = (
            delete(BloodPressureReading)
            .where(BloodPressureReading.profile_id == profile_id)
            .where(BloodPressureReading.id == reading_id)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()

        deleted = result.rowcount > 0
        if deleted:
            self.logger.info("Reading deleted", profile_id=profile_id, reading_id=reading_id)
        return deleted
