"""
Shared plumbing for feature stores.

A store caches one functional area's server state together with
is_loading/error flags. Actions never raise: failures end up in `error`
and the action returns False or None.
"""

from collections import defaultdict
from typing import NamedTuple, Optional

from attendance_portal.core.exceptions import ApiError
from attendance_portal.core.logging import get_logger

logger = get_logger(__name__)


class Ticket(NamedTuple):
    """An in-flight action: store generation plus the key and number of a keyed fetch."""

    generation: int
    key: Optional[str] = None
    number: int = 0


class RequestSequencer:
    """
    Issues increasing tickets per action key.

    A response is applied only if its ticket is still the latest issued for
    that key, so a slow earlier request cannot overwrite a newer one.
    """

    def __init__(self):
        self._latest: defaultdict[str, int] = defaultdict(int)

    def issue(self, key: str) -> int:
        self._latest[key] += 1
        return self._latest[key]

    def is_latest(self, key: str, number: int) -> bool:
        return self._latest[key] == number


class BaseStore:
    """Base class for the attendance, leave, report and admin stores."""

    def __init__(self):
        self.is_loading: bool = False
        self.error: Optional[str] = None
        self._generation = 0
        self._sequencer = RequestSequencer()

    def set_loading(self, is_loading: bool) -> None:
        self.is_loading = is_loading

    def set_error(self, error: Optional[str]) -> None:
        self.error = error

    def reset(self) -> None:
        """Drop cached data; every action in flight is ignored when it resolves."""
        self.error = None
        self.is_loading = False
        self._generation += 1

    def _begin(self, key: Optional[str] = None) -> Ticket:
        self.is_loading = True
        self.error = None
        if key is None:
            return Ticket(self._generation)
        return Ticket(self._generation, key, self._sequencer.issue(key))

    def _is_stale(self, ticket: Ticket) -> bool:
        if ticket.generation != self._generation:
            logger.debug(f"{type(self).__name__}: discarding response issued before reset")
            return True
        if ticket.key is None or self._sequencer.is_latest(ticket.key, ticket.number):
            return False
        logger.debug(f"{type(self).__name__}: discarding stale response for {ticket.key}")
        return True

    def _finish(self, ticket: Ticket) -> None:
        if not self._is_stale(ticket):
            self.is_loading = False

    def _fail(self, message: Optional[str], fallback: str) -> None:
        """Record a failure reported in a non-success envelope."""
        self.error = message or fallback

    def _fail_with(self, exc: Exception, fallback: str, action: str) -> None:
        """Record a failure raised by the gateway or by response parsing."""
        if isinstance(exc, ApiError):
            logger.warning(f"{action} failed (status: {exc.status_code}): {exc.message}")
            self.error = exc.message or fallback
        else:
            logger.error(f"Unexpected error during {action}: {exc}", exc_info=True)
            self.error = fallback
