"""
Operator literal -> ABI value coercion.

Integer-typed parameters are entered as human amounts and scaled to 18
decimals, unless the fractional part is the ``314159`` marker, which means
"use the integer part as-is". Everything else goes through
``parse_structured_literal``.
"""
from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from typing import Any

__all__ = [
    "EXACT_INTEGER_MARKER",
    "WEI_PER_ETHER",
    "parse_numeric_literal",
    "coerce_numeric_literal",
    "parse_structured_literal",
    "coerce_argument",
]

EXACT_INTEGER_MARKER = "314159"
WEI_PER_ETHER = 10**18


def _is_int_type(param_type: str) -> bool:
    return "int" in param_type


def parse_numeric_literal(raw: str) -> Decimal | None:
    """Parse ``raw`` as a finite decimal number, or None."""
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def _fraction_digits(value: Decimal) -> str:
    # shortest plain form, the way the number would be echoed back
    text = format(value.normalize(), "f")
    if "." not in text:
        return ""
    return text.split(".", 1)[1]


def coerce_numeric_literal(value: Decimal | int | str) -> int:
    """Scale a human-entered amount to an on-chain integer.

    ``5.314159`` -> 5, ``2`` -> 2 * 10**18, ``1.5`` -> 15 * 10**18 // 10.
    """
    if not isinstance(value, Decimal):
        parsed = parse_numeric_literal(str(value))
        if parsed is None:
            raise ValueError(f"Not a numeric literal: {value!r}")
        value = parsed

    fraction = _fraction_digits(value)
    if fraction == EXACT_INTEGER_MARKER:
        return int(value)  # int() truncates toward zero

    decimals = len(fraction)
    if decimals == 0:
        return int(value) * WEI_PER_ETHER

    scaled = int(value * 10**decimals)
    return scaled * WEI_PER_ETHER // 10**decimals


def parse_structured_literal(raw: str) -> Any:
    """Parse JSON arrays/objects, otherwise return ``raw`` unchanged.

    Unparseable text (``"[1, 2"``) is not an error: the operator's literal
    string is the value.
    """
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        return raw
    if isinstance(parsed, (list, dict)):
        return parsed
    return raw


def coerce_argument(param_type: str, raw: str) -> Any:
    """Coerce one operator answer for a parameter of ``param_type``."""
    if _is_int_type(param_type):
        number = parse_numeric_literal(raw)
        if number is not None:
            return coerce_numeric_literal(number)
    return parse_structured_literal(raw)
