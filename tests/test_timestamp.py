from __future__ import annotations

import pytest

from dissectopt.exceptions import SecondsTypeError, TimestampSpecError
from dissectopt.timestamp import (
    TIME_FORMAT_HELP,
    TIME_FORMAT_TOKENS,
    SecondsType,
    TimeFormat,
    TimePrecision,
    TimestampSpec,
    parse_seconds_type,
    parse_timestamp_spec,
)


def test_type_only_leaves_precision_unset() -> None:
    assert parse_timestamp_spec("r") == TimestampSpec(time_format=TimeFormat.RELATIVE)


def test_precision_only_leaves_format_unset() -> None:
    assert parse_timestamp_spec(".0") == TimestampSpec(
        time_precision=TimePrecision.FIXED_SEC
    )


def test_type_and_precision() -> None:
    assert parse_timestamp_spec("a.3") == TimestampSpec(
        time_format=TimeFormat.ABSOLUTE,
        time_precision=TimePrecision.FIXED_MSEC,
    )


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("r", TimeFormat.RELATIVE),
        ("a", TimeFormat.ABSOLUTE),
        ("ad", TimeFormat.ABSOLUTE_WITH_YMD),
        ("adoy", TimeFormat.ABSOLUTE_WITH_YDOY),
        ("d", TimeFormat.DELTA),
        ("dd", TimeFormat.DELTA_DISPLAYED),
        ("e", TimeFormat.EPOCH),
        ("u", TimeFormat.UTC),
        ("ud", TimeFormat.UTC_WITH_YMD),
        ("udoy", TimeFormat.UTC_WITH_YDOY),
    ],
)
def test_every_type_token(token: str, expected: TimeFormat) -> None:
    assert parse_timestamp_spec(token).time_format is expected
    assert TIME_FORMAT_TOKENS[token] is expected


@pytest.mark.parametrize(
    ("digit", "expected"),
    [
        ("0", TimePrecision.FIXED_SEC),
        ("1", TimePrecision.FIXED_DSEC),
        ("2", TimePrecision.FIXED_CSEC),
        ("3", TimePrecision.FIXED_MSEC),
        ("6", TimePrecision.FIXED_USEC),
        ("9", TimePrecision.FIXED_NSEC),
    ],
)
def test_every_precision_digit(digit: str, expected: TimePrecision) -> None:
    assert parse_timestamp_spec(f"ud.{digit}").time_precision is expected
    assert parse_timestamp_spec(f".{digit}").time_precision is expected


@pytest.mark.parametrize("text", ["a.", "a.99", "a.5", ".", ".4", "r.x", "a.3.3"])
def test_bad_precision_cites_whole_argument(text: str) -> None:
    with pytest.raises(TimestampSpecError) as exc_info:
        parse_timestamp_spec(text)
    assert exc_info.value.message.startswith(
        f'Invalid .N time stamp precision "{text}"'
    )
    assert exc_info.value.details == ()


@pytest.mark.parametrize("text", ["bogus", "xyz", "R", "A.3", "", "adoy1", "x.3"])
def test_bad_type_lists_valid_types(text: str) -> None:
    with pytest.raises(TimestampSpecError) as exc_info:
        parse_timestamp_spec(text)
    assert exc_info.value.message == (
        f'Invalid time stamp type "{text}"; it must be one of:'
    )
    assert exc_info.value.details == TIME_FORMAT_HELP


def test_precision_is_checked_before_type() -> None:
    with pytest.raises(TimestampSpecError) as exc_info:
        parse_timestamp_spec("bogus.7")
    assert "precision" in exc_info.value.message


def test_argument_is_not_modified() -> None:
    text = "x.3"
    with pytest.raises(TimestampSpecError) as exc_info:
        parse_timestamp_spec(text)
    assert text == "x.3"
    assert '"x.3"' in exc_info.value.message


def test_seconds_type_values() -> None:
    assert parse_seconds_type("s") is SecondsType.DEFAULT
    assert parse_seconds_type("hms") is SecondsType.HOUR_MIN_SEC


@pytest.mark.parametrize("text", ["", "S", "ms", "hm", "hms "])
def test_seconds_type_rejects_other_values(text: str) -> None:
    with pytest.raises(SecondsTypeError) as exc_info:
        parse_seconds_type(text)
    assert exc_info.value.message == (
        f'Invalid seconds type "{text}"; it must be one of:'
    )
    assert len(exc_info.value.details) == 2
