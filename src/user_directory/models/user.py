"""User model for the User Directory API."""

from typing import ClassVar

from pydantic import BaseModel, Field


class User(BaseModel):
    """Directory entry. Frozen once constructed."""

    id: int = Field(..., ge=0, description="Unique numeric identifier for the user")
    name: str = Field(..., min_length=1, description="Full name of the user")

    class Config:
        """Pydantic config."""

        frozen = True
        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": 2,
                "name": "Bruce Banner",
            }
        }
