"""Shared path-parameter validation for API handlers."""

import re

from litestar.exceptions import NotFoundException, ValidationException
from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.models.profile import Profile
from bptrack_server.services.profiles import ProfileService

# Regex for valid identifiers (UUIDs and other simple ids)
ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


def validate_id(value: str, name: str = "id") -> str:
    """Validate identifier format before it reaches a query.

    Args:
        value: The identifier to validate
        name: Parameter name used in the error message

    Returns:
        The validated identifier

    Raises:
        ValidationException: If the identifier format is invalid
    """
    if not value or len(value) > 100:
        raise ValidationException(f"Invalid {name}: must be 1-100 characters")
    if not ID_PATTERN.match(value):
        raise ValidationException(f"Invalid {name}: must be alphanumeric with _ or - only")
    return value


async def require_profile(session: AsyncSession, profile_id: str) -> Profile:
    """Load a profile or fail with 404.

    Raises:
        ValidationException: If profile_id format is invalid
        NotFoundException: If the profile does not exist
    """
    validate_id(profile_id, "profile_id")
    profile = await ProfileService(session).get_profile(profile_id)
    if profile is None:
        raise NotFoundException(f"Profile {profile_id} not found")
    return profile
