"""Statistics aggregation over a window of readings."""

from collections import Counter
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from fractions import Fraction
from typing import Protocol

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.schemas.statistics import (
    Averages,
    Period,
    Range,
    Ranges,
    StatisticsSummary,
)
from bptrack_server.services.classification import parse_category, round_half_away_from_zero
from bptrack_server.services.readings import ReadingService

logger = structlog.get_logger()


class ReadingValues(Protocol):
    """The fields of a stored reading the aggregator reads."""

    systolic: int
    diastolic: int
    pulse: int
    pulse_pressure: int
    mean_arterial_pressure: int
    classification: str


def _average(values: Sequence[int]) -> int:
    return round_half_away_from_zero(Fraction(sum(values), len(values)))


def _range(values: Sequence[int]) -> Range:
    return Range(min=min(values), max=max(values))


def aggregate_readings(
    readings: Sequence[ReadingValues],
    window_start: datetime,
    window_end: datetime,
    window_days: int,
) -> StatisticsSummary:
    """Summarise a pre-filtered set of readings.

    The caller is responsible for selecting readings of one profile within
    [window_start, window_end]; nothing is re-filtered here.

    Pulse pressure and MAP averages are the mean of each reading's stored
    value, not values recomputed from the averaged systolic/diastolic.

    Args:
        readings: Readings in the window, in any order
        window_start: Window start, echoed into period
        window_end: Window end, echoed into period
        window_days: Window length, echoed into period

    Returns:
        StatisticsSummary (all zeros when readings is empty)
    """
    period = Period(start_date=window_start, end_date=window_end, days=window_days)

    if not readings:
        return StatisticsSummary(period=period)

    systolic = [r.systolic for r in readings]
    diastolic = [r.diastolic for r in readings]
    pulse = [r.pulse for r in readings]

    averages = Averages(
        systolic=_average(systolic),
        diastolic=_average(diastolic),
        pulse=_average(pulse),
        pulse_pressure=_average([r.pulse_pressure for r in readings]),
        mean_arterial_pressure=_average([r.mean_arterial_pressure for r in readings]),
    )

    ranges = Ranges(
        systolic=_range(systolic),
        diastolic=_range(diastolic),
        pulse=_range(pulse),
    )

    distribution = Counter(parse_category(r.classification) for r in readings)

    return StatisticsSummary(
        total_readings=len(readings),
        averages=averages,
        ranges=ranges,
        distribution=dict(distribution),
        period=period,
    )


class StatisticsService:
    """Service for computing a profile's statistics summary."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize statistics service.

        Args:
            session: Database session
        """
        self.session = session
        self.readings = ReadingService(session)
        self.logger = logger.bind(service="statistics")

    async def get_statistics(
        self,
        profile_id: str,
        days: int,
        now: datetime | None = None,
    ) -> StatisticsSummary:
        """Summarise the last `days` days of a profile's readings.

        Args:
            profile_id: Profile identifier
            days: Window length in days, ending at `now`
            now: End of the window (defaults to the current UTC time)

        Returns:
            StatisticsSummary for [now - days, now]
        """
        end_date = now or datetime.now(UTC)
        start_date = end_date - timedelta(days=days)

        readings = await self.readings.list_readings(
            profile_id, start_date=start_date, end_date=end_date
        )
        summary = aggregate_readings(readings, start_date, end_date, days)

        self.logger.debug(
            "Statistics computed",
            profile_id=profile_id,
            days=days,
            total_readings=summary.total_readings,
        )
        return summary
