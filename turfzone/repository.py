"""Turf lookup: one parameterized read against the ``turfs`` table."""

import logging
from typing import Optional, Protocol

import psycopg2
from pydantic import ValidationError

from turfzone.constants import LOOKUP_FAILED_MESSAGE, LOOKUP_FAILED_TITLE
from turfzone.database import get_db
from turfzone.models import Turf
from turfzone.notices import NoticeBoard

logger = logging.getLogger(__name__)

SELECT_TURFS_SQL = (
    "SELECT id, name, address, hourly_rate, operating_hours, category "
    "FROM turfs WHERE category = %s"
)


class TurfRepository(Protocol):
    def list_turfs_by_category(self, category: str) -> list[Turf]:
        ...


class PostgresTurfRepository:
    """Reads turfs from PostgreSQL.

    Each lookup opens its own connection and closes it before returning.
    Failures never propagate: they are logged, posted to the notice board
    when one is attached, and the lookup yields an empty list. No retry.
    """

    def __init__(self, connect=get_db, notices: Optional[NoticeBoard] = None):
        self._connect = connect
        self._notices = notices

    def list_turfs_by_category(self, category: str) -> list[Turf]:
        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute(SELECT_TURFS_SQL, (category,))
                rows = cursor.fetchall()
        except (psycopg2.Error, ValueError) as e:
            logger.error("SQL error while fetching %s turfs: %s", category, e)
            if self._notices is not None:
                self._notices.error(LOOKUP_FAILED_TITLE, LOOKUP_FAILED_MESSAGE)
            return []

        turfs = []
        for row in rows:
            try:
                turfs.append(Turf.from_row(row))
            except (KeyError, ValidationError) as e:
                logger.warning("Skipping turf row %s: %s", row.get("id"), e)
        logger.debug("Loaded %d %s turfs", len(turfs), category)
        return turfs
