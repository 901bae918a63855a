"""Database models."""

from bptrack_server.models.base import Base
from bptrack_server.models.profile import Profile
from bptrack_server.models.reading import BloodPressureReading
from bptrack_server.models.reminder import Reminder

__all__ = [
    "Base",
    "BloodPressureReading",
    "Profile",
    "Reminder",
]
