"""Time stamp type and precision parsing for ``-t`` and ``-u``.

A ``-t`` argument has one of three shapes::

    TYPE            format only
    .PRECISION      precision only
    TYPE.PRECISION  both

The parser is a pure function over slices of the argument, so the original
text is always available for error messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping

from dissectopt.exceptions import SecondsTypeError, TimestampSpecError


class TimeFormat(StrEnum):
    NOT_SET = "not_set"
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    ABSOLUTE_WITH_YMD = "absolute_with_ymd"
    ABSOLUTE_WITH_YDOY = "absolute_with_ydoy"
    DELTA = "delta"
    DELTA_DISPLAYED = "delta_displayed"
    EPOCH = "epoch"
    UTC = "utc"
    UTC_WITH_YMD = "utc_with_ymd"
    UTC_WITH_YDOY = "utc_with_ydoy"


class TimePrecision(StrEnum):
    NOT_SET = "not_set"
    AUTO = "auto"
    FIXED_SEC = "fixed_sec"
    FIXED_DSEC = "fixed_dsec"
    FIXED_CSEC = "fixed_csec"
    FIXED_MSEC = "fixed_msec"
    FIXED_USEC = "fixed_usec"
    FIXED_NSEC = "fixed_nsec"


class SecondsType(StrEnum):
    DEFAULT = "default"
    HOUR_MIN_SEC = "hour_min_sec"


# Token order here is the order of the help listing.
TIME_FORMAT_TOKENS: Mapping[str, TimeFormat] = MappingProxyType(
    {
        "a": TimeFormat.ABSOLUTE,
        "ad": TimeFormat.ABSOLUTE_WITH_YMD,
        "adoy": TimeFormat.ABSOLUTE_WITH_YDOY,
        "d": TimeFormat.DELTA,
        "dd": TimeFormat.DELTA_DISPLAYED,
        "e": TimeFormat.EPOCH,
        "r": TimeFormat.RELATIVE,
        "u": TimeFormat.UTC,
        "ud": TimeFormat.UTC_WITH_YMD,
        "udoy": TimeFormat.UTC_WITH_YDOY,
    }
)

TIME_FORMAT_HELP: tuple[str, ...] = (
    '\t"a"    for absolute',
    '\t"ad"   for absolute with YYYY-MM-DD date',
    '\t"adoy" for absolute with YYYY/DOY date',
    '\t"d"    for delta',
    '\t"dd"   for delta displayed',
    '\t"e"    for epoch',
    '\t"r"    for relative',
    '\t"u"    for absolute UTC',
    '\t"ud"   for absolute UTC with YYYY-MM-DD date',
    '\t"udoy" for absolute UTC with YYYY/DOY date',
)

TIME_PRECISION_DIGITS: Mapping[str, TimePrecision] = MappingProxyType(
    {
        "0": TimePrecision.FIXED_SEC,
        "1": TimePrecision.FIXED_DSEC,
        "2": TimePrecision.FIXED_CSEC,
        "3": TimePrecision.FIXED_MSEC,
        "6": TimePrecision.FIXED_USEC,
        "9": TimePrecision.FIXED_NSEC,
    }
)

SECONDS_TYPE_TOKENS: Mapping[str, SecondsType] = MappingProxyType(
    {
        "s": SecondsType.DEFAULT,
        "hms": SecondsType.HOUR_MIN_SEC,
    }
)

SECONDS_TYPE_HELP: tuple[str, ...] = (
    '\t"s"   for seconds',
    '\t"hms" for hours, minutes and seconds',
)


@dataclass(frozen=True)
class TimestampSpec:
    """Result of parsing one ``-t`` argument; ``None`` fields stay unchanged."""

    time_format: TimeFormat | None = None
    time_precision: TimePrecision | None = None


def _parse_precision(text: str, suffix: str) -> TimePrecision:
    precision = TIME_PRECISION_DIGITS.get(suffix)
    if precision is None:
        raise TimestampSpecError(
            f'Invalid .N time stamp precision "{text}"; '
            "N must be 0, 1, 2, 3, 6 or 9"
        )
    return precision


def parse_timestamp_spec(text: str) -> TimestampSpec:
    prefix, dot, suffix = text.partition(".")
    precision: TimePrecision | None = None
    if dot:
        precision = _parse_precision(text, suffix)
        if not prefix:
            return TimestampSpec(time_precision=precision)
    time_format = TIME_FORMAT_TOKENS.get(prefix)
    if time_format is None:
        raise TimestampSpecError(
            f'Invalid time stamp type "{text}"; it must be one of:',
            TIME_FORMAT_HELP,
        )
    return TimestampSpec(time_format=time_format, time_precision=precision)


def parse_seconds_type(text: str) -> SecondsType:
    seconds_type = SECONDS_TYPE_TOKENS.get(text)
    if seconds_type is None:
        raise SecondsTypeError(
            f'Invalid seconds type "{text}"; it must be one of:',
            SECONDS_TYPE_HELP,
        )
    return seconds_type
