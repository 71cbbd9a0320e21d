import logging

from turfzone.config import START_LOGGED_IN

logger = logging.getLogger(__name__)


class Session:
    """Logged-in flag shared by reference with everything that gates on it.

    There is no real authentication behind it; login and logout only flip
    the flag.
    """

    def __init__(self, logged_in: bool = START_LOGGED_IN):
        self._logged_in = logged_in

    def is_logged_in(self) -> bool:
        return self._logged_in

    def login(self) -> None:
        self._logged_in = True
        logger.info("Session logged in")

    def logout(self) -> None:
        self._logged_in = False
        logger.info("Session logged out")
