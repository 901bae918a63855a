"""Pydantic schema for the classification preview endpoint."""

from bptrack_server.schemas.base import CamelModel
from bptrack_server.services.classification import ReadingMetrics


class ClassificationResult(CamelModel):
    """Category, presentation attributes and derived metrics for a pair."""

    systolic: int
    diastolic: int
    category: str
    description: str
    color: str
    bg_color: str
    pulse_pressure: int
    mean_arterial_pressure: int

    @classmethod
    def from_metrics(
        cls, systolic: int, diastolic: int, metrics: ReadingMetrics
    ) -> "ClassificationResult":
        return cls(
            systolic=systolic,
            diastolic=diastolic,
            category=metrics.category,
            description=metrics.classification.description,
            color=metrics.classification.color,
            bg_color=metrics.classification.bg_color,
            pulse_pressure=metrics.pulse_pressure,
            mean_arterial_pressure=metrics.mean_arterial_pressure,
        )
