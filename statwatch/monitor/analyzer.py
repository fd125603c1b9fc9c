"""
Threshold evaluation for statistics samples.

Each metric is checked independently and produces at most one Alert.
Reported quantities are truncated toward zero, never rounded.

Author: statwatch Team
SPDX-License-Identifier: BUSL-1.1
"""

import logging
from dataclasses import dataclass

from statwatch.config import Thresholds
from statwatch.monitor.parser import StatsSample
from statwatch.ui import StatwatchConsole
from statwatch.ui import console as default_console

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024**2
BITS_PER_BYTE = 8


@dataclass(frozen=True)
class Alert:
    """A single threshold violation."""

    metric: str
    value: float
    message: str


def evaluate_sample(sample: StatsSample, thresholds: Thresholds | None = None) -> list[Alert]:
    """
    Check a sample against the thresholds.

    Args:
        sample: Parsed statistics sample
        thresholds: Optional thresholds (defaults to Thresholds())

    Returns:
        Alerts in load, memory, disk, network order (empty if all within bounds)
    """
    thresholds = thresholds or Thresholds()
    alerts = []

    for check in (_check_load, _check_memory, _check_disk, _check_network):
        alert = check(sample, thresholds)
        if alert:
            alerts.append(alert)

    return alerts


def _check_load(sample: StatsSample, thresholds: Thresholds) -> Alert | None:
    if sample.load_average > thresholds.load_average:
        return Alert(
            metric="load",
            value=sample.load_average,
            message=f"Load Average is too high: {int(sample.load_average)}",
        )
    return None


def _check_memory(sample: StatsSample, thresholds: Thresholds) -> Alert | None:
    if sample.total_memory == 0:
        logger.debug("Skipping memory check: total memory is zero")
        return None

    usage = sample.used_memory / sample.total_memory * 100
    if usage > thresholds.memory_percent:
        return Alert(metric="memory", value=usage, message=f"Memory usage too high: {int(usage)}%")
    return None


def _check_disk(sample: StatsSample, thresholds: Thresholds) -> Alert | None:
    if sample.total_disk == 0:
        logger.debug("Skipping disk check: total disk is zero")
        return None

    free = sample.total_disk - sample.used_disk
    if free / sample.total_disk < thresholds.disk_free_fraction:
        free_mb = free / BYTES_PER_MB
        return Alert(
            metric="disk",
            value=free_mb,
            message=f"Free disk space is too low: {int(free_mb)} Mb left",
        )
    return None


def _check_network(sample: StatsSample, thresholds: Thresholds) -> Alert | None:
    if sample.total_network == 0:
        logger.debug("Skipping network check: total bandwidth is zero")
        return None

    free = sample.total_network - sample.used_network
    if free / sample.total_network < thresholds.network_free_fraction:
        free_mbit = free * BITS_PER_BYTE / BYTES_PER_MB
        return Alert(
            metric="network",
            value=free_mbit,
            message=f"Network bandwidth usage high: {int(free_mbit)} Mbit/s available",
        )
    return None


def print_alerts(alerts: list[Alert], console: StatwatchConsole | None = None) -> None:
    """Print one line per alert to stdout."""
    out = console or default_console
    for alert in alerts:
        out.alert(alert.message)
