# turfzone/constants.py
"""Application constants - single source of truth for configuration values."""

DEFAULT_CATEGORY = "Football"

# Booking form options shown next to the turf picked with "Book Now"
BOOKING_TURF_OPTIONS = [
    "Star Turf Club (Default)",
    "Champions Dome",
    "Ground Zero Arena",
]

TIME_SLOT_OPTIONS = [
    "10:00 - 11:00 (10 AM)",
    "11:00 - 12:00 (11 AM)",
    "12:00 - 13:00 (12 PM)",
]

DEFAULT_BOOKING_DATE = "2025-10-27"

# Mock confirmation values. The slot and user id are placeholders: they do
# not depend on what the user picked in the form.
CONFIRMATION_ID_PREFIX = "#"
CONFIRMATION_ID_MIN = 1000
CONFIRMATION_ID_MAX = 9999
PLACEHOLDER_TIME_SLOT = "10:00 - 11:00"
PLACEHOLDER_USER_ID = 13

CURRENCY_SYMBOL = "₹"

# Notice texts
LOGIN_REQUIRED_TITLE = "Session Required"
LOGIN_REQUIRED_MESSAGE = "Please log in to book a slot."
LOGOUT_TITLE = "Logout"
LOGOUT_MESSAGE = "Logged out successfully."
LOOKUP_FAILED_TITLE = "Database Connection Failed"
LOOKUP_FAILED_MESSAGE = "Database Error: Could not load turfs. Check the database connection."
CONFIRMATION_TITLE = "BOOKING SUCCESS!"
