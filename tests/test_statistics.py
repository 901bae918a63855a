"""Tests for statistics aggregation."""

import json
from datetime import timedelta
from types import SimpleNamespace

from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.schemas.readings import ReadingCreate
from bptrack_server.services.classification import classify
from bptrack_server.services.readings import ReadingService
from bptrack_server.services.statistics import StatisticsService, aggregate_readings
from tests.fixtures.reading_seed import NOW

WINDOW_START = NOW - timedelta(days=30)


def make_reading(systolic: int, diastolic: int, pulse: int, **overrides) -> SimpleNamespace:
    """Build a stored-reading lookalike with derived fields filled in."""
    metrics = classify(systolic, diastolic)
    values = {
        "systolic": systolic,
        "diastolic": diastolic,
        "pulse": pulse,
        "classification": metrics.category,
        "pulse_pressure": metrics.pulse_pressure,
        "mean_arterial_pressure": metrics.mean_arterial_pressure,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def summarise(readings):
    return aggregate_readings(readings, WINDOW_START, NOW, 30)


class TestAggregateReadings:
    """Tests for the pure aggregation function."""

    def test_empty_window_is_all_zero(self):
        summary = summarise([])

        assert summary.total_readings == 0
        assert summary.averages.systolic == 0
        assert summary.averages.mean_arterial_pressure == 0
        assert summary.ranges.systolic.min == 0
        assert summary.ranges.pulse.max == 0
        assert summary.distribution == {}
        assert summary.period.days == 30

    def test_two_readings(self):
        """120/80 and 140/90 average to 130/85."""
        summary = summarise([make_reading(120, 80, 70), make_reading(140, 90, 75)])

        assert summary.total_readings == 2
        assert summary.averages.systolic == 130
        assert summary.averages.diastolic == 85
        assert summary.averages.pulse == 73  # 72.5 rounds up
        assert summary.averages.pulse_pressure == 45
        assert summary.averages.mean_arterial_pressure == 100  # (93 + 107) / 2
        assert summary.ranges.systolic.min == 120
        assert summary.ranges.systolic.max == 140
        assert summary.ranges.diastolic.min == 80
        assert summary.ranges.diastolic.max == 90
        assert summary.distribution == {"Hypertension Stage 1": 1, "Hypertension Stage 2": 1}

    def test_single_reading(self):
        summary = summarise([make_reading(118, 76, 64)])

        assert summary.total_readings == 1
        assert summary.averages.systolic == 118
        assert summary.ranges.systolic.min == summary.ranges.systolic.max == 118
        assert summary.distribution == {"Normal": 1}

    def test_averages_round_half_away_from_zero(self):
        """120 and 121 average to 120.5, which rounds to 121."""
        summary = summarise([make_reading(120, 80, 70), make_reading(121, 80, 71)])

        assert summary.averages.systolic == 121
        assert summary.averages.pulse == 71

    def test_derived_averages_use_stored_values(self):
        """MAP average is the mean of stored MAPs, not MAP of the mean pair.

        121/80 stores 94 and 124/80 stores 95, averaging 94.5 -> 95, whereas
        MAP of the averaged 123/80 would be 94.
        """
        summary = summarise([make_reading(121, 80, 70), make_reading(124, 80, 70)])

        assert summary.averages.mean_arterial_pressure == 95

        stale = summarise([make_reading(120, 80, 70, pulse_pressure=10)])
        assert stale.averages.pulse_pressure == 10

    def test_order_does_not_matter(self):
        readings = [
            make_reading(118, 76, 64),
            make_reading(135, 85, 72),
            make_reading(150, 95, 80),
            make_reading(125, 79, 68),
        ]

        forward = summarise(readings)
        backward = summarise(list(reversed(readings)))

        assert forward == backward

    def test_distribution_counts_sum_to_total(self):
        readings = [make_reading(118, 76, 64)] * 3 + [make_reading(185, 70, 90)]
        summary = summarise(readings)

        assert sum(summary.distribution.values()) == summary.total_readings
        assert summary.distribution == {"Normal": 3, "Hypertensive Crisis": 1}

    def test_distribution_accepts_legacy_json_classification(self):
        legacy = make_reading(
            125, 79, 68, classification=json.dumps({"category": "Elevated", "color": "x"})
        )
        summary = summarise([legacy, make_reading(126, 78, 70)])

        assert summary.distribution == {"Elevated": 2}

    def test_wire_format(self):
        """Serialised summary uses camelCase, including the pulseStressure key."""
        data = summarise([make_reading(120, 80, 70)]).to_json()

        assert data["totalReadings"] == 1
        assert set(data["averages"]) == {
            "systolic",
            "diastolic",
            "pulse",
            "pulseStressure",
            "meanArterialPressure",
        }
        assert data["ranges"]["systolic"] == {"min": 120, "max": 120}
        assert set(data["period"]) == {"startDate", "endDate", "days"}


class TestStatisticsService:
    """Tests for StatisticsService against the database."""

    async def test_summary_over_seeded_month(self, async_session: AsyncSession, profile_with_30d):
        profile, readings = profile_with_30d
        service = StatisticsService(async_session)

        summary = await service.get_statistics(profile.id, days=30, now=NOW)

        # The earliest seeded morning reading falls just before the window
        assert len(readings) == 60
        assert summary.total_readings == 59
        assert sum(summary.distribution.values()) == 59
        assert summary.period.days == 30
        assert summary.ranges.systolic.min <= summary.averages.systolic
        assert summary.averages.systolic <= summary.ranges.systolic.max

    async def test_shorter_window(self, async_session: AsyncSession, profile_with_30d):
        profile, _ = profile_with_30d

        summary = await StatisticsService(async_session).get_statistics(
            profile.id, days=7, now=NOW
        )

        assert summary.total_readings == 13

    async def test_matches_pure_aggregation(self, async_session: AsyncSession, profile_with_30d):
        profile, _ = profile_with_30d
        start = NOW - timedelta(days=14)

        in_window = await ReadingService(async_session).list_readings(
            profile.id, start_date=start, end_date=NOW
        )
        summary = await StatisticsService(async_session).get_statistics(
            profile.id, days=14, now=NOW
        )

        expected = aggregate_readings(in_window, start, NOW, 14)
        assert summary.averages == expected.averages
        assert summary.distribution == expected.distribution

    async def test_window_bounds_are_inclusive(self, async_session: AsyncSession, test_profile):
        service = ReadingService(async_session)
        for reading_date in (NOW - timedelta(days=7), NOW, NOW + timedelta(seconds=1)):
            await service.create_reading(
                test_profile.id,
                ReadingCreate(systolic=120, diastolic=80, pulse=70, reading_date=reading_date),
            )

        summary = await StatisticsService(async_session).get_statistics(
            test_profile.id, days=7, now=NOW
        )

        assert summary.total_readings == 2

    async def test_other_profiles_are_excluded(
        self, async_session: AsyncSession, profile_with_30d, test_profile_2
    ):
        summary = await StatisticsService(async_session).get_statistics(
            test_profile_2.id, days=30, now=NOW
        )

        assert summary.total_readings == 0
        assert summary.distribution == {}
