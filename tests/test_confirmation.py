import random
import re

from turfzone.confirmation import ConfirmationGenerator
from turfzone.models import BookingRequest
from turfzone.views import ConfirmationView


def _request(slot="11:00-12:00"):
    return BookingRequest(turf_name="Ground Zero Arena", date="2025-10-27", time_slot_label=slot)


def test_confirmation_reports_placeholder_slot_and_user():
    confirmation = ConfirmationGenerator().confirm(_request())

    assert re.fullmatch(r"#[1-9][0-9]{3}", confirmation.confirmation_id)
    assert confirmation.turf_name == "Ground Zero Arena"
    assert confirmation.date == "2025-10-27"
    # The selected slot is ignored
    assert confirmation.time_slot == "10:00 - 11:00"
    assert confirmation.user_id == 13


def test_seeded_generator_is_reproducible():
    first = ConfirmationGenerator(random.Random(7)).confirm(_request())
    second = ConfirmationGenerator(random.Random(7)).confirm(_request())

    assert first.confirmation_id == second.confirmation_id


def test_consecutive_ids_differ():
    generator = ConfirmationGenerator(random.Random(1))

    ids = {generator.confirm(_request()).confirmation_id for _ in range(20)}

    # 20 draws from 9000 values; a handful of collisions at most
    assert len(ids) > 15


def test_id_range_bounds():
    class Edges(random.Random):
        def __init__(self, values):
            super().__init__()
            self.values = list(values)

        def randint(self, a, b):
            assert (a, b) == (1000, 9999)
            return self.values.pop(0)

    generator = ConfirmationGenerator(Edges([1000, 9999]))

    assert generator.generate_id() == "#1000"
    assert generator.generate_id() == "#9999"


def test_confirmation_view_details():
    confirmation = ConfirmationGenerator(random.Random(3)).confirm(_request())
    view = ConfirmationView(confirmation=confirmation)

    assert view.title == "BOOKING SUCCESS!"
    assert view.details == [
        ("Confirmation ID", confirmation.confirmation_id),
        ("Turf", "Ground Zero Arena"),
        ("Date & Time", "2025-10-27 @ 10:00 - 11:00"),
        ("Logged in User ID", "13"),
    ]
