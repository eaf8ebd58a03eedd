from pydantic import BaseModel, Field, StringConstraints, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional, Annotated
from datetime import date, datetime
from pydantic import ConfigDict

from travelgo.models.booking import NO_HOTEL, BookingStatus

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Fields that may be omitted from an update but never set to null
NON_NULLABLE_UPDATE_FIELDS = (
    "traveler_name",
    "passport_num",
    "destination",
    "flight_date",
    "status",
    "price",
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)


class BookingCreate(CamelModel):
    traveler_name: RequiredText
    passport_num: RequiredText
    destination: RequiredText
    flight_date: date
    hotel_name: Optional[str] = NO_HOTEL
    status: BookingStatus = Field(default=BookingStatus.CONFIRMED, validate_default=True)
    price: float = Field(default=0, ge=0, allow_inf_nan=False)

    @field_validator("hotel_name", mode="before")
    @classmethod
    def default_hotel(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return NO_HOTEL
        return value.strip() if isinstance(value, str) else value

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, value):
        return value or BookingStatus.CONFIRMED


class BookingUpdate(CamelModel):
    traveler_name: Optional[RequiredText] = None
    passport_num: Optional[RequiredText] = None
    destination: Optional[RequiredText] = None
    flight_date: Optional[date] = None
    hotel_name: Optional[str] = None
    status: Optional[BookingStatus] = None
    price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("hotel_name", mode="before")
    @classmethod
    def default_hotel(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return NO_HOTEL
        return value.strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in NON_NULLABLE_UPDATE_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class BookingOut(CamelModel):
    id: int
    user_id: int
    traveler_name: str
    passport_num: str
    destination: str
    flight_date: date
    hotel_name: str
    status: BookingStatus
    price: float
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DestinationOut(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str
