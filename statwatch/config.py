"""Static configuration for the statistics poller.

All values are fixed at startup. ``DEFAULT_CONFIG`` is the single instance the
CLI uses; tests build their own with shorter intervals.
"""

from dataclasses import dataclass, field

STATS_URL = "http://srv.msk01.gigacorp.local/_stats"

# Upper bound for a single GET, in seconds
MAX_REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True)
class Thresholds:
    """Alert thresholds for a single statistics sample.

    Attributes:
        load_average: Load average ceiling (alert when strictly above)
        memory_percent: Memory usage ceiling in percent (alert when strictly above)
        disk_free_fraction: Free disk floor as a fraction of total (alert when below)
        network_free_fraction: Free bandwidth floor as a fraction of total (alert when below)
    """

    load_average: float = 30.0
    memory_percent: float = 80.0
    disk_free_fraction: float = 0.1
    network_free_fraction: float = 0.1

    def __post_init__(self):
        if self.load_average < 0:
            raise ValueError("load_average must be non-negative")
        if not 0 <= self.memory_percent <= 100:
            raise ValueError("memory_percent must be between 0 and 100")
        if not 0 <= self.disk_free_fraction <= 1:
            raise ValueError("disk_free_fraction must be between 0 and 1")
        if not 0 <= self.network_free_fraction <= 1:
            raise ValueError("network_free_fraction must be between 0 and 1")


@dataclass(frozen=True)
class MonitorConfig:
    """Polling behavior.

    Attributes:
        stats_url: Endpoint returning the comma-separated statistics line
        request_timeout: Timeout for one GET, in seconds
        poll_interval: Wait after a successful poll, in seconds
        error_backoff: Wait after a failed poll, in seconds (shorter than poll_interval)
        max_consecutive_errors: Failures in a row before the poller gives up
        thresholds: Alert thresholds
    """

    stats_url: str = STATS_URL
    request_timeout: float = 5.0
    poll_interval: float = 10.0
    error_backoff: float = 5.0
    max_consecutive_errors: int = 3
    thresholds: Thresholds = field(default_factory=Thresholds)

    def __post_init__(self):
        if not self.stats_url:
            raise ValueError("stats_url must not be empty")
        if not 0 < self.request_timeout <= MAX_REQUEST_TIMEOUT:
            raise ValueError(f"request_timeout must be in (0, {MAX_REQUEST_TIMEOUT:g}]")
        if self.poll_interval < 0:
            raise ValueError("poll_interval must be non-negative")
        if self.error_backoff < 0:
            raise ValueError("error_backoff must be non-negative")
        if self.poll_interval and self.error_backoff >= self.poll_interval:
            raise ValueError("error_backoff must be shorter than poll_interval")
        if self.max_consecutive_errors < 1:
            raise ValueError("max_consecutive_errors must be at least 1")


DEFAULT_CONFIG = MonitorConfig()
