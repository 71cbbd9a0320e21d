"""Rendering-free view models. Any presentation layer can draw these."""

from typing import Optional
from pydantic import BaseModel, Field, computed_field
from turfzone.constants import (
    BOOKING_TURF_OPTIONS, TIME_SLOT_OPTIONS, DEFAULT_BOOKING_DATE,
    CONFIRMATION_TITLE, CURRENCY_SYMBOL
)
from turfzone.models import Turf, BookingConfirmation
from turfzone.notices import Notice


class TurfCard(BaseModel):
    turf: Turf

    @computed_field
    @property
    def hours_label(self) -> str:
        return f"Hours: {self.turf.operating_hours}"

    @computed_field
    @property
    def price_label(self) -> str:
        return f"Price: {CURRENCY_SYMBOL}{self.turf.price_per_hour:.2f}/hour"


class HomeView(BaseModel):
    category: str
    turfs: list[Turf] = Field(default_factory=list)

    @computed_field
    @property
    def heading(self) -> str:
        if not self.turfs:
            return f"No {self.category} turfs found."
        return f"{self.category} Turfs"

    @computed_field
    @property
    def cards(self) -> list[TurfCard]:
        return [TurfCard(turf=turf) for turf in self.turfs]


class BookingForm(BaseModel):
    selected_turf: str
    turf_options: list[str] = Field(default_factory=lambda: list(BOOKING_TURF_OPTIONS))
    date: str = DEFAULT_BOOKING_DATE
    time_slot_options: list[str] = Field(default_factory=lambda: list(TIME_SLOT_OPTIONS))

    @classmethod
    def for_turf(cls, turf_name: str):
        options = list(BOOKING_TURF_OPTIONS)
        if turf_name not in options:
            options.append(turf_name)
        return cls(selected_turf=turf_name, turf_options=options)


class ConfirmationView(BaseModel):
    confirmation: BookingConfirmation
    title: str = CONFIRMATION_TITLE

    @computed_field
    @property
    def details(self) -> list[tuple[str, str]]:
        c = self.confirmation
        return [
            ("Confirmation ID", c.confirmation_id),
            ("Turf", c.turf_name),
            ("Date & Time", f"{c.date} @ {c.time_slot}"),
            ("Logged in User ID", str(c.user_id)),
        ]


class ViewState(BaseModel):
    view: str
    logged_in: bool
    exited: bool = False
    home: Optional[HomeView] = None
    booking: Optional[BookingForm] = None
    confirmation: Optional[ConfirmationView] = None


class ActionResponse(BaseModel):
    state: ViewState
    notices: list[Notice] = Field(default_factory=list)
