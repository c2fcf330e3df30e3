"""A small formatted-output routine supporting %c %s %p %d %i %u %x %X %%.

Unknown conversions are dropped without consuming an argument, and a
lone ``%`` at the end of the template produces nothing.
"""

from __future__ import annotations

import sys
from typing import Any, Callable

from pipex.libstr import itoa

_UINT32_MASK = 0xFFFF_FFFF
_UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c"))


def _as_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _as_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _require_int(value, "p") & _UINT64_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _as_signed(value: Any) -> str:
    wrapped = (_require_int(value, "d") + 2**31) % 2**32 - 2**31
    return itoa(wrapped)


def _as_unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT32_MASK)


def _as_hex_lower(value: Any) -> str:
    return format(_require_int(value, "x") & _UINT32_MASK, "x")


def _as_hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") & _UINT32_MASK, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _as_char,
    "s": _as_string,
    "p": _as_pointer,
    "d": _as_signed,
    "i": _as_signed,
    "u": _as_unsigned,
    "x": _as_hex_lower,
    "X": _as_hex_upper,
}


def render(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text."""
    values = iter(args)
    chars = iter(template)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        out.append(convert(value))
    return "".join(out)


def printf(template: str, *args: Any) -> int:
    """Write the expanded template to standard output; return its length."""
    text = render(template, *args)
    sys.stdout.write(text)
    return len(text)