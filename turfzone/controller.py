"""Home/Booking view state machine.

The controller owns which view is showing and what it shows. It never draws
anything: the presentation layer calls :meth:`ViewController.dispatch` (or the
named methods) and renders :meth:`ViewController.snapshot` afterwards.

Transitions::

    Home    --select_category-->  Home
    Home    --book_now-->         Booking    (only while logged in)
    Booking --cancel-->           Home
    Booking --confirm-->          Booking    (confirmation pending)
    Booking --acknowledge-->      Home
    Home    --logout-->           exited
"""

import logging
from enum import Enum
from typing import Optional

from turfzone.confirmation import ConfirmationGenerator
from turfzone.constants import (
    DEFAULT_CATEGORY, LOGIN_REQUIRED_MESSAGE, LOGIN_REQUIRED_TITLE,
    LOGOUT_MESSAGE, LOGOUT_TITLE
)
from turfzone.models import BookingConfirmation, BookingRequest
from turfzone.notices import NoticeBoard
from turfzone.repository import TurfRepository
from turfzone.session import Session
from turfzone.views import BookingForm, ConfirmationView, HomeView, ViewState

logger = logging.getLogger(__name__)


class View(str, Enum):
    HOME = "HOME"
    BOOKING = "BOOKING"


class Action(str, Enum):
    SELECT_CATEGORY = "select_category"
    BOOK_NOW = "book_now"
    CANCEL = "cancel"
    CONFIRM = "confirm"
    ACKNOWLEDGE = "acknowledge"
    LOGOUT = "logout"


class InvalidTransition(RuntimeError):
    """The action has no transition out of the current view."""


class ApplicationExited(InvalidTransition):
    """An action arrived after logout ended the application."""


class ViewController:
    def __init__(
        self,
        repository: TurfRepository,
        session: Session,
        generator: Optional[ConfirmationGenerator] = None,
        notices: Optional[NoticeBoard] = None,
    ):
        self.repository = repository
        self.session = session
        self.generator = generator or ConfirmationGenerator()
        self.notices = notices if notices is not None else NoticeBoard()

        self.view = View.HOME
        self.exited = False
        self.home = HomeView(category=DEFAULT_CATEGORY)
        self.booking: Optional[BookingForm] = None
        self.pending: Optional[BookingConfirmation] = None

        self._handlers = {
            Action.SELECT_CATEGORY: self.select_category,
            Action.BOOK_NOW: self.book_now,
            Action.CANCEL: self.cancel,
            Action.CONFIRM: self.confirm,
            Action.ACKNOWLEDGE: self.acknowledge,
            Action.LOGOUT: self.logout,
        }

    def start(self) -> HomeView:
        """Initial lookup for the default category."""
        return self.select_category(DEFAULT_CATEGORY)

    def dispatch(self, action, **payload):
        handler = self._handlers[Action(action)]
        return handler(**payload)

    # ---- transitions ----

    def select_category(self, category: str) -> HomeView:
        self._require(View.HOME, Action.SELECT_CATEGORY)
        turfs = self.repository.list_turfs_by_category(category)
        self.home = HomeView(category=category, turfs=turfs)
        logger.info("Home showing %d %s turfs", len(turfs), category)
        return self.home

    def book_now(self, turf_name: str) -> View:
        self._require(View.HOME, Action.BOOK_NOW)
        if not self.session.is_logged_in():
            logger.info("Book now for %r rejected: not logged in", turf_name)
            self.notices.info(LOGIN_REQUIRED_TITLE, LOGIN_REQUIRED_MESSAGE)
            return self.view

        self.booking = BookingForm.for_turf(turf_name)
        self._switch(View.BOOKING)
        return self.view

    def cancel(self) -> View:
        self._require(View.BOOKING, Action.CANCEL)
        self._leave_booking()
        return self.view

    def confirm(self, turf_name: str, date: str, time_slot: str) -> BookingConfirmation:
        self._require(View.BOOKING, Action.CONFIRM)
        request = BookingRequest(turf_name=turf_name, date=date, time_slot_label=time_slot)
        self.pending = self.generator.confirm(request)
        logger.info("Booking confirmed %s for %s on %s",
                    self.pending.confirmation_id, request.turf_name, request.date)
        return self.pending

    def acknowledge(self) -> View:
        if self.exited:
            raise ApplicationExited("Application has exited")
        if self.view is not View.BOOKING or self.pending is None:
            raise InvalidTransition("No booking confirmation to acknowledge")
        self._leave_booking()
        return self.view

    def logout(self) -> None:
        self._require(View.HOME, Action.LOGOUT)
        self.session.logout()
        self.notices.info(LOGOUT_TITLE, LOGOUT_MESSAGE)
        self.exited = True
        logger.info("Application exiting after logout")

    # ---- state ----

    def snapshot(self) -> ViewState:
        return ViewState(
            view=self.view.value,
            logged_in=self.session.is_logged_in(),
            exited=self.exited,
            home=self.home if self.view is View.HOME else None,
            booking=self.booking if self.view is View.BOOKING else None,
            confirmation=ConfirmationView(confirmation=self.pending) if self.pending else None,
        )

    def _require(self, view: View, action: Action) -> None:
        if self.exited:
            raise ApplicationExited("Application has exited")
        if self.view is not view:
            raise InvalidTransition(f"{action.value} is not available from {self.view.value}")
        # A shown confirmation must be acknowledged before anything else
        if self.pending is not None:
            raise InvalidTransition(f"{action.value} is not available until the confirmation is acknowledged")

    def _switch(self, view: View) -> None:
        logger.info("View %s -> %s", self.view.value, view.value)
        self.view = view

    def _leave_booking(self) -> None:
        self.booking = None
        self.pending = None
        self._switch(View.HOME)
