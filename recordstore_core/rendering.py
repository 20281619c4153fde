"""Fixed field order rendering for records and stores."""

from __future__ import annotations

import json
from collections.abc import Iterable
from decimal import Decimal

from .schemas import Record

# Shortest-digit numbers switch to exponent form outside 1e-4 <= |x| < 1e6.
_EXPONENT_MIN = -4
_EXPONENT_MAX = 6


def _render_number(value: int | float) -> str:
    """Render a number the way the store has always printed ages.

    Every age is treated as a double: ``30`` and ``30.0`` print ``30``,
    ``1000000`` prints ``1e+06`` and ``0.00001`` prints ``1e-05``.
    """
    number = Decimal(repr(float(value))).normalize()
    sign, digits, exponent = number.as_tuple()
    decimal_exponent = len(digits) + int(exponent) - 1
    if _EXPONENT_MIN <= decimal_exponent < _EXPONENT_MAX:
        return format(number, "f")

    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(digit) for digit in digits[1:])
    exponent_sign = "-" if decimal_exponent < 0 else "+"
    return (
        ("-" if sign else "")
        + mantissa
        + "e"
        + exponent_sign
        + f"{abs(decimal_exponent):02d}"
    )


def _render_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def render_record(record: Record) -> str:
    """Render a record as ``{"id":...,"email":...,"age":...}``.

    Field order is always id, email, age; age is a bare numeric literal.
    """
    return (
        '{"id":' + _render_string(record.id)
        + ',"email":' + _render_string(record.email)
        + ',"age":' + _render_number(record.age)
        + "}"
    )


def render_records(records: Iterable[Record]) -> str:
    return "[" + ",".join(render_record(record) for record in records) + "]"
