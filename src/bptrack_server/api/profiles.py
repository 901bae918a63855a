"""Profile API endpoints."""

from typing import Any

from litestar import Router, delete, get, patch, post
from litestar.exceptions import NotFoundException
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED, HTTP_204_NO_CONTENT
from sqlalchemy.ext.asyncio import AsyncSession

from bptrack_server.api.params import require_profile, validate_id
from bptrack_server.schemas.profiles import ProfileCreate, ProfileRead, ProfileUpdate
from bptrack_server.services.profiles import ProfileService


@get("/profiles", status_code=HTTP_200_OK)
async def list_profiles(session: AsyncSession) -> list[dict[str, Any]]:
    """List all profiles."""
    profiles = await ProfileService(session).list_profiles()
    return [ProfileRead.model_validate(p).to_json() for p in profiles]


@post("/profiles", status_code=HTTP_201_CREATED)
async def create_profile(data: ProfileCreate, session: AsyncSession) -> dict[str, Any]:
    """Create a profile.

    Example body:
        {"name": "Dad", "gender": "male", "age": 76, "medicalConditions": ["Diabetic"]}
    """
    profile = await ProfileService(session).create_profile(data)
    return ProfileRead.model_validate(profile).to_json()


@get("/profiles/{profile_id:str}", status_code=HTTP_200_OK)
async def get_profile(profile_id: str, session: AsyncSession) -> dict[str, Any]:
    """Get a single profile.

    Raises:
        NotFoundException: If the profile does not exist
    """
    profile = await require_profile(session, profile_id)
    return ProfileRead.model_validate(profile).to_json()


@patch("/profiles/{profile_id:str}", status_code=HTTP_200_OK)
async def update_profile(
    profile_id: str,
    data: ProfileUpdate,
    session: AsyncSession,
) -> dict[str, Any]:
    """Update name, gender, age or medical conditions."""
    validate_id(profile_id, "profile_id")
    profile = await ProfileService(session).update_profile(profile_id, data)
    if profile is None:
        raise NotFoundException(f"Profile {profile_id} not found")
    return ProfileRead.model_validate(profile).to_json()


@delete("/profiles/{profile_id:str}", status_code=HTTP_204_NO_CONTENT)
async def delete_profile(profile_id: str, session: AsyncSession) -> None:
    """Delete a profile and all of its readings and reminders."""
    validate_id(profile_id, "profile_id")
    if not await ProfileService(session).delete_profile(profile_id):
        raise NotFoundException(f"Profile {profile_id} not found")


profiles_router = Router(
    path="/",
    route_handlers=[list_profiles, create_profile, get_profile, update_profile, delete_profile],
    tags=["Profiles"],
)
