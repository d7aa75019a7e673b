"""Base schema utilities and common types."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Strings are kept as received; fields that should be trimmed use StrippedStr.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict:
        """Serialize using the hiring API's field names."""
        return self.model_dump(by_alias=True)


# Common field types
NonEmptyStr = Annotated[str, Field(min_length=1)]
StrippedStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
HttpUrl = Annotated[str, Field(min_length=1, pattern=r"(?i)^https?://")]
