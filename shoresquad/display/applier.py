"""Display boundary: the single step that applies pipeline results to a display.

Results carry a monotonic run sequence number. A result that is not newer
than the last one applied is discarded, so a slow run that finishes after
a later one cannot overwrite fresher data.
"""

import logging
import threading
from typing import Protocol

from shoresquad.config.schema import FallbackPolicy
from shoresquad.models.advisory import AdvisoryResult, CurrentDisplay, DailyOutlook
from shoresquad.models.common import utc_now_iso
from shoresquad.reporting.formatters import format_current_text, format_outlook_text

logger = logging.getLogger(__name__)


class Display(Protocol):
    def update_current(self, current: CurrentDisplay) -> None: ...

    def update_forecast(self, outlook: list[DailyOutlook]) -> None: ...


class MemoryDisplay:
    """Keeps the last rendered values; read by the HTTP API."""

    def __init__(self) -> None:
        self.current: CurrentDisplay | None = None
        self.outlook: list[DailyOutlook] = []
        self.updated_at: str | None = None

    def update_current(self, current: CurrentDisplay) -> None:
        self.current = current
        self.updated_at = utc_now_iso()

    def update_forecast(self, outlook: list[DailyOutlook]) -> None:
        self.outlook = list(outlook)


class ConsoleDisplay:
    def __init__(self, out=print) -> None:
        self.out = out

    def update_current(self, current: CurrentDisplay) -> None:
        self.out(format_current_text(current))

    def update_forecast(self, outlook: list[DailyOutlook]) -> None:
        self.out(format_outlook_text(outlook))


class DisplayApplier:
    def __init__(
        self, display: Display, fallback_policy: FallbackPolicy = FallbackPolicy.RESET
    ):
        self.display = display
        self.fallback_policy = fallback_policy
        self.last_applied_seq = 0
        self.last_good: AdvisoryResult | None = None
        self._lock = threading.Lock()

    def apply(self, result: AdvisoryResult) -> bool:
        """Apply a result to the display. Returns False if it was discarded."""
        with self._lock:
            if result.run_seq <= self.last_applied_seq:
                logger.info(
                    "Discarding stale run #%d (last applied #%d)",
                    result.run_seq, self.last_applied_seq,
                )
                return False
            self.last_applied_seq = result.run_seq

            if not result.is_fallback:
                self.display.update_current(result.current)
                self.display.update_forecast(list(result.outlook))
                self.last_good = result
                return True

            if (
                self.fallback_policy == FallbackPolicy.KEEP_LAST_GOOD
                and self.last_good is not None
            ):
                logger.warning(
                    "Run #%d failed, keeping data from run #%d",
                    result.run_seq, self.last_good.run_seq,
                )
                return True

            # Forecast is left unrendered on fallback.
            self.display.update_current(result.current)
            return True
