"""
Parser for the statistics payload.

The endpoint answers with a single line of seven comma-separated decimals:

    load_average,total_memory,used_memory,total_disk,used_disk,total_network,used_network

Author: statwatch Team
SPDX-License-Identifier: BUSL-1.1
"""

import logging
import math
import re
from collections.abc import Sequence
from dataclasses import astuple, dataclass

from statwatch.errors import FormatError, NumericError

logger = logging.getLogger(__name__)

FIELD_COUNT = 7

# Optional sign, digits with optional fraction, optional exponent
DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class StatsSample:
    """A single statistics snapshot, fields in payload order."""

    load_average: float
    # Memory, bytes
    total_memory: float
    used_memory: float
    # Disk, bytes
    total_disk: float
    used_disk: float
    # Network, bytes/sec
    total_network: float
    used_network: float

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "StatsSample":
        if len(values) != FIELD_COUNT:
            raise ValueError(f"StatsSample needs {FIELD_COUNT} values, got {len(values)}")
        return cls(*(float(v) for v in values))

    def as_tuple(self) -> tuple[float, ...]:
        return astuple(self)


def _parse_field(index: int, raw: str) -> float:
    # float() alone also takes "nan", "1_000", padding and non-ASCII digits
    if not DECIMAL_RE.fullmatch(raw):
        raise NumericError(index, raw)
    value = float(raw)
    # Exponent overflow, e.g. "1e999"
    if not math.isfinite(value):
        raise NumericError(index, raw)
    return value


def parse_stats(text: str) -> StatsSample:
    """
    Parse the raw payload into a StatsSample.

    Raises:
        FormatError: if the payload does not have exactly seven fields
        NumericError: if a field is not a decimal number
    """
    parts = text.strip().split(",")
    if len(parts) != FIELD_COUNT:
        raise FormatError(len(parts), FIELD_COUNT)

    sample = StatsSample.from_values([_parse_field(i, part) for i, part in enumerate(parts)])
    logger.debug(f"Parsed sample: {sample}")
    return sample
