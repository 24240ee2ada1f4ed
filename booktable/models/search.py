"""Search query model."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from booktable.timeofday import normalize


class SearchQuery(BaseModel):
    """What the user is looking for: when, how many, and optionally where."""

    model_config = ConfigDict(frozen=True)

    date: date
    time: str = Field(..., description="Requested time (HH:MM)")
    party_size: int = Field(..., gt=0, description="Number of people")
    location: str | None = Field(None, description="City, state or zip code")
    cuisine: str | None = Field(None, description="Cuisine type")

    @field_validator("time")
    @classmethod
    def normalize_time(cls, value: str) -> str:
        return normalize(value)

    @field_validator("location", "cuisine")
    @classmethod
    def strip_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None
