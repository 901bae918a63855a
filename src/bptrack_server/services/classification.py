"""Blood pressure classification and derived metrics.

Implements the ACC/AHA 2017 categories plus pulse pressure and mean arterial
pressure. Everything here is pure and synchronous; range validation of the
inputs happens at the API boundary, not here.
"""

import json
import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction


class BPCategory(str, Enum):
    """ACC/AHA 2017 blood pressure categories."""

    NORMAL = "Normal"
    ELEVATED = "Elevated"
    HYPERTENSION_STAGE_1 = "Hypertension Stage 1"
    HYPERTENSION_STAGE_2 = "Hypertension Stage 2"
    HYPERTENSIVE_CRISIS = "Hypertensive Crisis"


@dataclass(frozen=True)
class Classification:
    """A category together with its fixed presentation attributes."""

    category: BPCategory
    description: str
    color: str
    bg_color: str


@dataclass(frozen=True)
class ClassificationRule:
    """One threshold rule. Rules are evaluated in order; first match wins."""

    classification: Classification
    matches: Callable[[int, int], bool]


@dataclass(frozen=True)
class ReadingMetrics:
    """Everything derived from a systolic/diastolic pair."""

    classification: Classification
    pulse_pressure: int
    mean_arterial_pressure: int

    @property
    def category(self) -> str:
        return self.classification.category.value


CLASSIFICATIONS: dict[BPCategory, Classification] = {
    BPCategory.HYPERTENSIVE_CRISIS: Classification(
        category=BPCategory.HYPERTENSIVE_CRISIS,
        description="Seek immediate medical attention",
        color="text-red-800",
        bg_color="bg-red-600",
    ),
    BPCategory.HYPERTENSION_STAGE_2: Classification(
        category=BPCategory.HYPERTENSION_STAGE_2,
        description="High blood pressure",
        color="text-red-700",
        bg_color="bg-red-500",
    ),
    BPCategory.HYPERTENSION_STAGE_1: Classification(
        category=BPCategory.HYPERTENSION_STAGE_1,
        description="High blood pressure",
        color="text-orange-700",
        bg_color="bg-orange-500",
    ),
    BPCategory.ELEVATED: Classification(
        category=BPCategory.ELEVATED,
        description="Elevated blood pressure",
        color="text-yellow-700",
        bg_color="bg-yellow-500",
    ),
    BPCategory.NORMAL: Classification(
        category=BPCategory.NORMAL,
        description="Normal blood pressure",
        color="text-green-700",
        bg_color="bg-green-500",
    ),
}

# Order matters: the conditions overlap, so earlier rules take precedence.
CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        classification=CLASSIFICATIONS[BPCategory.HYPERTENSIVE_CRISIS],
        matches=lambda systolic, diastolic: systolic >= 180 or diastolic >= 120,
    ),
    ClassificationRule(
        classification=CLASSIFICATIONS[BPCategory.HYPERTENSION_STAGE_2],
        matches=lambda systolic, diastolic: systolic >= 140 or diastolic >= 90,
    ),
    ClassificationRule(
        classification=CLASSIFICATIONS[BPCategory.HYPERTENSION_STAGE_1],
        matches=lambda systolic, diastolic: systolic >= 130 or diastolic >= 80,
    ),
    ClassificationRule(
        classification=CLASSIFICATIONS[BPCategory.ELEVATED],
        matches=lambda systolic, diastolic: systolic >= 120 and diastolic < 80,
    ),
)

DEFAULT_CLASSIFICATION = CLASSIFICATIONS[BPCategory.NORMAL]


def round_half_away_from_zero(value: Fraction | int | float) -> int:
    """Round to the nearest integer, ties away from zero.

    Built-in round() rounds ties to even (round(92.5) == 92); this does not.

    Args:
        value: Number to round. Pass a Fraction for exact results.

    Returns:
        Rounded integer
    """
    exact = Fraction(value)
    magnitude = math.floor(abs(exact) + Fraction(1, 2))
    return magnitude if exact >= 0 else -magnitude


def classify_blood_pressure(systolic: int, diastolic: int) -> Classification:
    """Classify a reading according to ACC/AHA 2017 guidelines.

    Args:
        systolic: Systolic pressure (mmHg)
        diastolic: Diastolic pressure (mmHg)

    Returns:
        The first matching Classification; Normal if no rule matches
    """
    for rule in CLASSIFICATION_RULES:
        if rule.matches(systolic, diastolic):
            return rule.classification
    return DEFAULT_CLASSIFICATION


def calculate_pulse_pressure(systolic: int, diastolic: int) -> int:
    """Pulse pressure: systolic minus diastolic. Normal range is 30-50 mmHg."""
    return systolic - diastolic


def calculate_mean_arterial_pressure(systolic: int, diastolic: int) -> int:
    """Mean arterial pressure: diastolic + pulse pressure / 3.

    Normal range is 70-100 mmHg.
    """
    pulse_pressure = calculate_pulse_pressure(systolic, diastolic)
    return round_half_away_from_zero(diastolic + Fraction(pulse_pressure, 3))


def classify(systolic: int, diastolic: int) -> ReadingMetrics:
    """Compute category and derived metrics for a systolic/diastolic pair.

    Called whenever a reading is created or its systolic/diastolic changes.
    """
    return ReadingMetrics(
        classification=classify_blood_pressure(systolic, diastolic),
        pulse_pressure=calculate_pulse_pressure(systolic, diastolic),
        mean_arterial_pressure=calculate_mean_arterial_pressure(systolic, diastolic),
    )


def parse_category(value: str | dict[str, str]) -> str:
    """Extract the category from a stored classification value.

    Older rows stored the whole classification object as JSON text
    instead of just the category name; both forms are accepted.

    Args:
        value: Category string, JSON-encoded classification, or dict

    Returns:
        Category string. Values without a category come back as text:
        strings unchanged, dicts JSON-encoded.
    """
    if isinstance(value, dict):
        if value.get("category"):
            return str(value["category"])
        return json.dumps(value, sort_keys=True)

    try:
        parsed = json.loads(value)
    except ValueError:
        return value

    if isinstance(parsed, dict) and parsed.get("category"):
        return str(parsed["category"])
    return value
