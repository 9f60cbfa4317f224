"""
Aggregate statistics for benchmark results.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence

from ..codecs.base import EncodeResult, ImageFormat


BYTE_UNITS = ["Bytes", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"]


def format_bytes(value: Any, decimals: int = 2) -> str:
    """
    Format a byte count with base-1024 units.

    Picks the largest unit whose scaled value is at least 1 and rounds to
    ``decimals`` places, dropping trailing zeros (1536 -> "1.5 KiB").

    Args:
        value: Byte count; 0, None, NaN and non-numeric values give "0 Bytes"
        decimals: Decimal places (negative values are treated as 0)

    Returns:
        Human-readable size string
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return "0 Bytes"

    if not number or math.isnan(number):
        return "0 Bytes"

    sign = "-" if number < 0 else ""
    number = abs(number)
    dm = decimals if decimals > 0 else 0

    if math.isinf(number):
        index = len(BYTE_UNITS) - 1
    else:
        index = int(math.floor(math.log(number) / math.log(1024)))
        index = min(max(index, 0), len(BYTE_UNITS) - 1)
        # log() is inexact at exact powers of 1024
        while index + 1 < len(BYTE_UNITS) and number >= 1024 ** (index + 1):
            index += 1
        while index > 0 and number < 1024 ** index:
            index -= 1

    text = f"{number / 1024 ** index:.{dm}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    return f"{sign}{text} {BYTE_UNITS[index]}"


@dataclass(frozen=True)
class AggregateStat:
    """
    Totals for one format compared against the original images.

    ``difference`` is positive when storage was saved and negative when it
    was lost; ``save`` and ``lost`` carry the formatted magnitude of each
    side, with the other side always "0 Bytes".
    """
    size: int
    duration: int
    is_less: bool
    difference: int
    save: str
    lost: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "size": self.size,
            "duration": self.duration,
            "isLess": self.is_less,
            "difference": self.difference,
            "save": self.save,
            "lost": self.lost,
        }


def compute_stat(results: Sequence[EncodeResult], original_total_size: int) -> AggregateStat:
    """Aggregate one format's results against the original total size."""
    size = sum(r.size for r in results)
    duration = sum(r.duration for r in results)
    difference = original_total_size - size

    return AggregateStat(
        size=size,
        duration=duration,
        is_less=size < original_total_size,
        difference=difference,
        save=format_bytes(difference if difference >= 0 else 0),
        lost=format_bytes(-difference if difference < 0 else 0),
    )


def aggregate(
    results: Mapping[ImageFormat, Sequence[EncodeResult]],
    original_total_size: int,
) -> Dict[ImageFormat, AggregateStat]:
    """
    Compute one AggregateStat per format.

    Args:
        results: Encode results keyed by format
        original_total_size: Combined size of the source images in bytes

    Returns:
        Dictionary mapping format to its AggregateStat, in input key order
    """
    return {
        fmt: compute_stat(format_results, original_total_size)
        for fmt, format_results in results.items()
    }
