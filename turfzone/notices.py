"""User-visible notices shared between the lookup service and the controller."""

from typing import Literal
from pydantic import BaseModel


class Notice(BaseModel):
    level: Literal["info", "error"] = "info"
    title: str
    message: str


class NoticeBoard:
    """Ordered channel of notices waiting to be shown to the user."""

    def __init__(self):
        self._pending: list[Notice] = []

    def post(self, notice: Notice) -> None:
        self._pending.append(notice)

    def info(self, title: str, message: str) -> None:
        self.post(Notice(level="info", title=title, message=message))

    def error(self, title: str, message: str) -> None:
        self.post(Notice(level="error", title=title, message=message))

    def drain(self) -> list[Notice]:
        """Return every pending notice and clear the board."""
        pending, self._pending = self._pending, []
        return pending

    def __len__(self):
        return len(self._pending)
