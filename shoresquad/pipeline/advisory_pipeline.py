"""Advisory pipeline: one fetch -> normalize -> score/map cycle."""

import logging
import time
from datetime import datetime

from shoresquad.advisory.mapping import current_display
from shoresquad.config.schema import AdvisoryConfig
from shoresquad.ingest.conditions_fetcher import ConditionsFetcher
from shoresquad.ingest.errors import DataUnavailable
from shoresquad.ingest.nea_client import NeaClient
from shoresquad.ingest.normalizer import format_temperature
from shoresquad.models.advisory import AdvisoryResult, CurrentDisplay
from shoresquad.models.common import utc_now

logger = logging.getLogger(__name__)


def fallback_display(config: AdvisoryConfig) -> CurrentDisplay:
    """The fixed placeholder shown when live data cannot be obtained."""
    return CurrentDisplay(
        temperature_display=format_temperature(
            config.focus_area.default_temperature_c, config.display
        ),
        icon=config.fallback.icon,
        recommendation=config.fallback.message,
    )


def fallback_result(
    config: AdvisoryConfig, run_seq: int, error: str, now: datetime | None = None
) -> AdvisoryResult:
    if now is None:
        now = utc_now()
    return AdvisoryResult(
        run_seq=run_seq,
        generated_at=now.isoformat(),
        current=fallback_display(config),
        outlook=(),
        is_fallback=True,
        error=error,
    )


class AdvisoryPipeline:
    def __init__(self, config: AdvisoryConfig, client: NeaClient | None = None):
        self.config = config
        self.client = client or NeaClient(
            base_url=config.feeds.base_url, user_agent=config.feeds.user_agent
        )
        self.fetcher = ConditionsFetcher(self.client, config)

    def run(self, run_seq: int, now: datetime | None = None) -> AdvisoryResult:
        """Execute one pipeline run. Data failures yield the fallback result."""
        start_time = time.monotonic()
        if now is None:
            now = utc_now()

        try:
            conditions = self.fetcher.fetch_current(now)
            outlook = self.fetcher.fetch_outlook()
        except DataUnavailable as e:
            logger.warning("Weather service unavailable (run #%d): %s", run_seq, e)
            return fallback_result(self.config, run_seq, str(e), now)

        result = AdvisoryResult(
            run_seq=run_seq,
            generated_at=now.isoformat(),
            current=current_display(conditions),
            outlook=outlook,
        )
        logger.info(
            "Run #%d OK: %s %s, %d outlook days (%.2fs)",
            run_seq,
            result.current.temperature_display,
            conditions.weather_condition,
            len(outlook),
            time.monotonic() - start_time,
        )
        return result
