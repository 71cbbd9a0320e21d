import logging
import random
from typing import Optional

from turfzone.constants import (
    CONFIRMATION_ID_MAX, CONFIRMATION_ID_MIN, CONFIRMATION_ID_PREFIX,
    PLACEHOLDER_TIME_SLOT, PLACEHOLDER_USER_ID
)
from turfzone.models import BookingConfirmation, BookingRequest

logger = logging.getLogger(__name__)


class ConfirmationGenerator:
    """Builds mock booking confirmations. Nothing is stored.

    ``time_slot`` and ``user_id`` are fixed placeholders and ignore the
    request; only the id is random. Pass a seeded ``random.Random`` to pin it.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def generate_id(self) -> str:
        number = self._rng.randint(CONFIRMATION_ID_MIN, CONFIRMATION_ID_MAX)
        return f"{CONFIRMATION_ID_PREFIX}{number}"

    def confirm(self, request: BookingRequest) -> BookingConfirmation:
        confirmation = BookingConfirmation(
            confirmation_id=self.generate_id(),
            turf_name=request.turf_name,
            date=request.date,
            time_slot=PLACEHOLDER_TIME_SLOT,
            user_id=PLACEHOLDER_USER_ID,
        )
        if not request.time_slot_label.startswith(PLACEHOLDER_TIME_SLOT):
            logger.warning(
                "Confirmation %s reports placeholder slot %r instead of selected %r",
                confirmation.confirmation_id, PLACEHOLDER_TIME_SLOT, request.time_slot_label
            )
        return confirmation
