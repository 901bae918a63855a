"""Shared pydantic configuration for API schemas."""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def to_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


# SQLite hands back naive datetimes; every stored timestamp is UTC
UTCDateTime = Annotated[datetime, AfterValidator(to_utc)]


class CamelModel(BaseModel):
    """Base schema that speaks camelCase on the wire.

    Fields are snake_case in Python; aliases are camelCase. Input is
    accepted in either form.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_json(self) -> dict:
        """Dump to a JSON-compatible dict using wire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True)
