"""Advisory daemon: runs the pipeline at startup and then on a fixed interval.

A failed run is not retried early; the next tick is the retry.

Usage:
    python -m shoresquad daemon
    python -m shoresquad daemon --interval 300 --serve 8777
"""

import itertools
import logging
import signal
import time

from shoresquad.config.schema import AdvisoryConfig
from shoresquad.display.applier import Display, DisplayApplier
from shoresquad.models.advisory import AdvisoryResult
from shoresquad.pipeline.advisory_pipeline import AdvisoryPipeline, fallback_result

logger = logging.getLogger(__name__)


class AdvisoryDaemon:
    """Runs the advisory pipeline in a loop with signal handling."""

    def __init__(
        self,
        config: AdvisoryConfig,
        display: Display,
        interval: int | None = None,
    ):
        self.config = config
        self.interval = (
            interval if interval is not None else config.schedule.interval_minutes * 60
        )
        self.applier = DisplayApplier(display, config.fallback.policy)
        self.last_result: AdvisoryResult | None = None
        self._seq = itertools.count(1)
        self._running = False
        self._total_runs = 0
        self._total_successes = 0
        self._total_failures = 0

    def start(self) -> None:
        """Start the daemon loop. Blocks until stopped."""
        self._setup_signals()
        self._running = True
        logger.info("Daemon started, interval=%ds", self.interval)

        try:
            self._loop()
        except KeyboardInterrupt:
            logger.info("Daemon interrupted by keyboard")
        finally:
            logger.info(
                "Daemon stopped: %d runs (%d ok, %d fallback)",
                self._total_runs, self._total_successes, self._total_failures,
            )

    def stop(self) -> None:
        self._running = False

    def _loop(self) -> None:
        while self._running:
            run_start = time.monotonic()
            self.run_once()

            # Sleep in 1-second increments so we can respond to signals
            sleep_until = run_start + self.interval
            while self._running and time.monotonic() < sleep_until:
                time.sleep(min(1.0, max(0.0, sleep_until - time.monotonic())))

    def run_once(self) -> AdvisoryResult:
        """Run the pipeline once and apply the result to the display."""
        run_seq = next(self._seq)
        self._total_runs += 1

        try:
            result = AdvisoryPipeline(self.config).run(run_seq)
        except Exception as e:
            logger.exception("Run #%d crashed", run_seq)
            result = fallback_result(self.config, run_seq, f"{type(e).__name__}: {e}")

        if result.is_fallback:
            self._total_failures += 1
        else:
            self._total_successes += 1

        self.applier.apply(result)
        self.last_result = result
        return result

    def _setup_signals(self) -> None:
        """Handle SIGTERM and SIGINT for graceful shutdown."""
        def _stop(signum: int, frame: object) -> None:
            logger.info("Received %s, shutting down", signal.Signals(signum).name)
            self._running = False

        signal.signal(signal.SIGTERM, _stop)
        signal.signal(signal.SIGINT, _stop)
