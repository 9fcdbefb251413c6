"""
Format Python values as SQL literals.

Values are classified into a LiteralKind, and each kind has exactly one
formatter. Formatting never fails: None renders as NULL and anything
unrecognised falls back to `str(value)`.
"""
import datetime
import decimal
import enum
import uuid
from collections.abc import Callable
from typing import Any

from .error import InvalidParameter
from .option import Option
from .parameter import Parameter


_SQL_QUOTE_ESCAPE = str.maketrans({"'": "''"})


class LiteralKind(enum.StrEnum):
    NULL = "null"
    DATETIME = "datetime"
    DATETIME_OFFSET = "datetime-offset"
    DATE = "date"
    TEXT = "text"
    BOOLEAN = "boolean"
    UUID = "uuid"
    BINARY = "binary"
    INTEGER = "integer"
    FLOAT = "float"
    DURATION = "duration"
    OPTIONAL = "optional"
    OTHER = "other"


def classify(value: Any) -> LiteralKind:
    """Find the LiteralKind for a value.

    Order matters: datetime is a subclass of date, and bool is a subclass of int.
    """
    if value is None:
        return LiteralKind.NULL

    if isinstance(value, Option):
        return LiteralKind.OPTIONAL if value.flatten().has_value() else LiteralKind.NULL

    if isinstance(value, datetime.datetime):
        return LiteralKind.DATETIME if value.utcoffset() is None else LiteralKind.DATETIME_OFFSET

    if isinstance(value, datetime.date):
        return LiteralKind.DATE

    if isinstance(value, str):
        return LiteralKind.TEXT

    if isinstance(value, bool):
        return LiteralKind.BOOLEAN

    if isinstance(value, uuid.UUID):
        return LiteralKind.UUID

    if isinstance(value, (bytes, bytearray, memoryview)):
        return LiteralKind.BINARY

    if isinstance(value, int):
        return LiteralKind.INTEGER

    if isinstance(value, (float, decimal.Decimal)):
        return LiteralKind.FLOAT

    if isinstance(value, datetime.timedelta):
        return LiteralKind.DURATION

    return LiteralKind.OTHER


def _quote(text: str) -> str:
    return "'{}'".format(text)


def _format_null(value: Any) -> str:
    return "NULL"


def _format_datetime(value: datetime.datetime) -> str:
    return _quote(value.replace(tzinfo=None).isoformat(sep=" ", timespec="seconds"))


def _format_datetime_offset(value: datetime.datetime) -> str:
    offset = value.utcoffset()
    sign = "-" if offset < datetime.timedelta(0) else "+"
    minutes = int(abs(offset).total_seconds()) // 60
    hours, minutes = divmod(minutes, 60)

    timestamp = value.replace(tzinfo=None).isoformat(sep=" ", timespec="seconds")
    return _quote("{} {}{:02d}:{:02d}".format(timestamp, sign, hours, minutes))


def _format_date(value: datetime.date) -> str:
    return _quote(value.isoformat())


def _format_text(value: str) -> str:
    return _quote(value.translate(_SQL_QUOTE_ESCAPE))


def _format_boolean(value: bool) -> str:
    return "1" if value else "0"


def _format_uuid(value: uuid.UUID) -> str:
    return _quote(str(value))


def _format_binary(value: bytes | bytearray | memoryview) -> str:
    return "0x{}".format(bytes(value).hex().upper())


def _format_number(value: int | float | decimal.Decimal) -> str:
    # str() of a float is the shortest text that round trips
    return str(value)


def _format_duration(value: datetime.timedelta) -> str:
    # integer division keeps this exact, total_seconds() is a float
    seconds = abs(value) // datetime.timedelta(seconds=1)
    sign = "-" if value < datetime.timedelta(0) and seconds else ""
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return _quote("{}{:02d}:{:02d}:{:02d}".format(sign, hours, minutes, seconds))


def _format_optional(value: Option) -> str:
    return format_value(value.flatten().get_value())


def _format_other(value: Any) -> str:
    return str(value)


FORMATTERS: dict[LiteralKind, Callable[[Any], str]] = {
    LiteralKind.NULL: _format_null,
    LiteralKind.DATETIME: _format_datetime,
    LiteralKind.DATETIME_OFFSET: _format_datetime_offset,
    LiteralKind.DATE: _format_date,
    LiteralKind.TEXT: _format_text,
    LiteralKind.BOOLEAN: _format_boolean,
    LiteralKind.UUID: _format_uuid,
    LiteralKind.BINARY: _format_binary,
    LiteralKind.INTEGER: _format_number,
    LiteralKind.FLOAT: _format_number,
    LiteralKind.DURATION: _format_duration,
    LiteralKind.OPTIONAL: _format_optional,
    LiteralKind.OTHER: _format_other,
}


def format_value(value: Any) -> str:
    """Format a value as an SQL literal.

    >>> format_value("O'Reilly")
    "'O''Reilly'"
    >>> format_value(None)
    'NULL'
    """
    return FORMATTERS[classify(value)](value)


def format_parameter(parameter: Parameter) -> str:
    """Format a single Parameter's value, raises InvalidParameter for anything else."""
    if not isinstance(parameter, Parameter):
        err = "Expected a Parameter, got {}.".format(type(parameter).__name__)
        raise InvalidParameter(err, {"type": type(parameter).__name__})
    return format_value(parameter.value)
