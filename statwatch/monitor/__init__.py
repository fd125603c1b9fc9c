"""
statwatch Monitor Module

Polls the server statistics endpoint and reports threshold violations.
"""

from statwatch.monitor.analyzer import Alert, evaluate_sample, print_alerts
from statwatch.monitor.fetcher import StatsFetcher
from statwatch.monitor.parser import StatsSample, parse_stats
from statwatch.monitor.poller import ErrorCounter, PollState, StatsPoller

__all__ = [
    "Alert",
    "ErrorCounter",
    "PollState",
    "StatsFetcher",
    "StatsPoller",
    "StatsSample",
    "evaluate_sample",
    "parse_stats",
    "print_alerts",
]
