"""Typed representation of an entity's ``state`` field.

Home Assistant transmits every state as a JSON string, whatever the
underlying datatype: a thermostat reports ``"21.5"``, a binary helper
``"true"``, a light ``"on"``.  :func:`decode_state_text` recovers the
most specific type by trying, in order:

1. a boolean literal (exactly ``"true"`` or ``"false"``),
2. a signed 64-bit integer literal,
3. a decimal literal (including ``inf``/``infinity``/``nan``),
4. the original text.

The first successful parse wins.  Decoding never fails: anything that
is not a literal ends up as :class:`StringState` with the text kept
verbatim.  Each string state therefore pays up to three failed parse
attempts; there is deliberately no switch to turn this off.

Usage::

    match entity.state:
        case BooleanState(flag):
            ...
        case DecimalState(value) | IntegerState(value):
            ...
        case StringState(text):
            ...
        case None:
            ...  # no state reported
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar

from pydantic import PlainSerializer, PlainValidator

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
# Digits in the widest i64 literal; longer texts cannot be in range.
_I64_DIGITS = 19

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class BooleanState:
    """State that is a boolean literal."""

    value: bool
    kind: ClassVar[str] = "boolean"

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class IntegerState:
    """State that is an integer literal within the signed 64-bit range."""

    value: int
    kind: ClassVar[str] = "integer"

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class DecimalState:
    """State that is a floating point literal."""

    value: float
    kind: ClassVar[str] = "decimal"

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class StringState:
    """Any other state, text preserved exactly."""

    value: str
    kind: ClassVar[str] = "string"

    def __str__(self) -> str:
        return self.value


StateValue = BooleanState | IntegerState | DecimalState | StringState
"""Tagged union over the four state variants."""

_VARIANTS = (BooleanState, IntegerState, DecimalState, StringState)


def _parse_bool(text: str) -> bool | None:
    if text == "true":
        return True
    if text == "false":
        return False
    return None


def _parse_int(text: str) -> int | None:
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    # int() refuses very long digit strings, leading zeros included.
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _I64_DIGITS:
        return None
    value = -int(digits) if text.startswith("-") else int(digits)
    return value if _in_i64(value) else None


def _in_i64(value: int) -> bool:
    return _I64_MIN <= value <= _I64_MAX


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_decimal(text: str) -> float | None:
    if _DECIMAL_RE.fullmatch(text) is None:
        return None
    return float(text)


def decode_state_text(text: str) -> StateValue:
    """Decode the textual state into the most specific :data:`StateValue`.

    Total function: every ``str`` maps to exactly one variant.
    """
    flag = _parse_bool(text)
    if flag is not None:
        return BooleanState(flag)

    integer = _parse_int(text)
    if integer is not None:
        return IntegerState(integer)

    decimal = _parse_decimal(text)
    if decimal is not None:
        return DecimalState(decimal)

    return StringState(text)


def decode_state(value: Any) -> StateValue | None:
    """Decode an already JSON-decoded ``state`` value.

    ``null`` maps to ``None``.  Native JSON booleans and numbers map to
    their variant directly, with integers outside the signed 64-bit
    range becoming :class:`DecimalState`; strings go through
    :func:`decode_state_text`.

    Raises
    ------
    ValueError
        For arrays, objects and any other non-scalar value.
    """
    if value is None:
        return None
    if isinstance(value, _VARIANTS):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return BooleanState(value)
    if isinstance(value, int):
        return IntegerState(value) if _in_i64(value) else DecimalState(_int_to_float(value))
    if isinstance(value, float):
        return DecimalState(value)
    if isinstance(value, str):
        return decode_state_text(value)
    raise ValueError(f"expected bool, integer, decimal or string value, got {type(value).__name__}")


def _state_to_wire(value: StateValue | None) -> str | None:
    """Render a state as text.

    Booleans, integers and strings round-trip to the text that was
    received.  Decimals are rendered with ``repr(float)``, so ``"1e16"``
    and ``"10000000000000000.0"`` both come back as ``"1e+16"`` and
    ``"21.50"`` as ``"21.5"``; the received spelling is not kept.
    """
    return None if value is None else str(value)


StateField = Annotated[
    StateValue | None,
    PlainValidator(decode_state),
    PlainSerializer(_state_to_wire),
]
"""Annotated type for model fields holding an entity state."""
