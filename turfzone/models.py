from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from turfzone.constants import DEFAULT_CATEGORY


class Turf(BaseModel):
    """One bookable venue, mapped from a row of the ``turfs`` table."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    address: str
    price_per_hour: Decimal = Field(..., ge=0)
    operating_hours: str
    category: str

    @classmethod
    def from_row(cls, row):
        return cls(
            id=row["id"],
            name=row["name"],
            address=row["address"],
            price_per_hour=row["hourly_rate"],
            operating_hours=row["operating_hours"],
            category=row["category"],
        )


class BookingRequest(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    turf_name: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1)  # free text, not parsed
    time_slot_label: str = Field(..., min_length=1)


class BookingConfirmation(BaseModel):
    model_config = ConfigDict(frozen=True)

    confirmation_id: str = Field(..., pattern=r"^#[1-9]\d{3}$")
    turf_name: str
    date: str
    time_slot: str
    user_id: int


# Request bodies for the web surface

class CategorySelect(BaseModel):
    category: str = Field(default=DEFAULT_CATEGORY, min_length=1)


class BookNowRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    turf_name: str = Field(..., min_length=1)


class ConfirmBody(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    turf_name: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1)
    time_slot: str = Field(..., min_length=1)
