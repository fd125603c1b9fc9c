"""
Polling loop for statwatch.

Drives fetch -> parse -> evaluate on a fixed interval and gives up after a
configured number of consecutive failures.

    POLLING --success--> EVALUATING --> POLLING
    POLLING --failure--> COUNTING --> POLLING | TERMINATED

Author: statwatch Team
SPDX-License-Identifier: BUSL-1.1
"""

import logging
import time
from collections.abc import Callable
from enum import Enum

from statwatch.config import DEFAULT_CONFIG, MonitorConfig
from statwatch.errors import StatsError
from statwatch.monitor.analyzer import Alert, evaluate_sample, print_alerts
from statwatch.monitor.fetcher import StatsFetcher
from statwatch.monitor.parser import StatsSample, parse_stats
from statwatch.ui import StatwatchConsole
from statwatch.ui import console as default_console

logger = logging.getLogger(__name__)

TERMINAL_MESSAGE = "Unable to fetch server statistic"


class PollState(Enum):
    """States of the polling loop."""
    POLLING = "polling"
    EVALUATING = "evaluating"
    COUNTING = "counting"
    TERMINATED = "terminated"


class ErrorCounter:
    """Consecutive failure counter."""

    def __init__(self, limit: int):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self.count = 0

    def increment(self) -> int:
        self.count += 1
        return self.count

    def reset(self) -> None:
        self.count = 0

    @property
    def exhausted(self) -> bool:
        return self.count >= self.limit


class StatsPoller:
    """
    Single-threaded statistics poller.

    Example:
        poller = StatsPoller(DEFAULT_CONFIG)
        poller.run()  # returns PollState.TERMINATED after repeated failures
    """

    def __init__(
        self,
        config: MonitorConfig = DEFAULT_CONFIG,
        fetcher: StatsFetcher | None = None,
        sleep: Callable[[float], None] = time.sleep,
        report: Callable[[list[Alert]], None] = print_alerts,
        console: StatwatchConsole | None = None,
    ):
        """
        Initialize the poller.

        Args:
            config: Polling configuration
            fetcher: Optional fetcher (defaults to one built from config)
            sleep: Wait primitive, replaced in tests
            report: Callback receiving the alerts of each successful poll
            console: Console for the terminal failure line
        """
        self.config = config
        self.fetcher = fetcher or StatsFetcher(config.stats_url, timeout=config.request_timeout)
        self._sleep = sleep
        self._report = report
        self._console = console or default_console
        self._errors = ErrorCounter(config.max_consecutive_errors)
        self._state = PollState.POLLING

    @property
    def state(self) -> PollState:
        return self._state

    @property
    def error_count(self) -> int:
        return self._errors.count

    def poll_once(self) -> StatsSample:
        """Fetch and parse one sample. Raises a StatsError subclass on failure."""
        return parse_stats(self.fetcher.fetch())

    def step(self) -> PollState:
        """Run one tick and return the next state."""
        if self._state is PollState.TERMINATED:
            return self._state

        try:
            sample = self.poll_once()
        except StatsError as e:
            self._state = PollState.COUNTING
            return self._on_failure(e)

        self._state = PollState.EVALUATING
        self._errors.reset()
        self._report(evaluate_sample(sample, self.config.thresholds))
        self._sleep(self.config.poll_interval)
        self._state = PollState.POLLING
        return self._state

    def _on_failure(self, error: StatsError) -> PollState:
        count = self._errors.increment()
        logger.warning(
            f"Poll failed ({count}/{self._errors.limit}): {type(error).__name__}: {error}"
        )

        if self._errors.exhausted:
            logger.error(f"Giving up after {count} consecutive failures")
            self._console.fatal(TERMINAL_MESSAGE)
            self._state = PollState.TERMINATED
            return self._state

        self._sleep(self.config.error_backoff)
        self._state = PollState.POLLING
        return self._state

    def run(self, max_ticks: int | None = None) -> PollState:
        """
        Poll until terminated.

        Args:
            max_ticks: Stop after this many ticks (None runs until termination)

        Returns:
            The state the loop stopped in
        """
        ticks = 0
        while self._state is not PollState.TERMINATED:
            if max_ticks is not None and ticks >= max_ticks:
                break
            self.step()
            ticks += 1
        return self._state
