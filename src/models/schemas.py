"""Pydantic schemas for data-access inputs."""

from pydantic import BaseModel, Field, field_validator


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str = "0.1.0"


class NewUser(BaseModel):
    """A user to be registered."""

    name: str
    email: str
    password: str


class NewProperty(BaseModel):
    """A property listing to be created."""

    owner_id: int
    title: str
    description: str = ""
    thumbnail_photo_url: str = ""
    cover_photo_url: str = ""

    # Stored in cents
    cost_per_night: int = Field(ge=0)

    street: str
    city: str
    province: str
    post_code: str
    country: str

    parking_spaces: int = Field(default=0, ge=0)
    number_of_bathrooms: int = Field(default=0, ge=0)
    number_of_bedrooms: int = Field(default=0, ge=0)


class PropertySearchOptions(BaseModel):
    """Optional filters for property search.

    Prices are in dollars per night; they are compared against
    ``cost_per_night`` which is stored in cents.
    """

    city: str | None = None
    owner_id: int | None = None
    minimum_price_per_night: float | None = Field(None, ge=0)
    maximum_price_per_night: float | None = Field(None, ge=0)
    minimum_rating: float | None = Field(None, ge=0, le=5)

    @field_validator(
        "city",
        "owner_id",
        "minimum_price_per_night",
        "maximum_price_per_night",
        "minimum_rating",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        # Search forms submit untouched fields as empty strings
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def has_filters(self) -> bool:
        """Whether any option would narrow the search."""
        return any(
            (
                self.city,
                self.owner_id,
                self.minimum_price_per_night,
                self.maximum_price_per_night,
                self.minimum_rating,
            )
        )
