# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2024/10/13 15:08:52
# @Author : Chloride

"""Raw INI value -> typed value.

A *closed* set of converters. Each takes the stripped raw string
and raises `ValueError` when it is not a valid literal of its type,
so `Ini.get()` knows when to fall back to a default.

Literal grammar (ASCII only, no inner spaces):
- int / uint: `0x1F`, `0o17`, `0b101`, `017` (a leading 0 is octal), `1_000`.
- float: `1.33`, `.5`, `6.02e23`, `0x1.8p1`, `inf`, `nan`.
- bool: `1 t true` / `0 f false`, case insensitive.
"""

import math
import re
from struct import pack, unpack

__all__ = ['to_int', 'to_uint', 'to_float', 'to_bool', 'to_str']

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
UINT32_MAX = (1 << 32) - 1

# `_` may only sit between two digits, or between a base prefix and a digit.
_INT_LITERAL = re.compile(r'''
    (?P<sign>[+-]?)
    (?:
        0[xX](?P<hex>(?:_?[0-9a-fA-F])+)
      | 0[oO](?P<oct>(?:_?[0-7])+)
      | 0[bB](?P<bin>(?:_?[01])+)
      | 0(?P<legacy>(?:_?[0-7])+)
      | (?P<dec>0|[1-9](?:_?[0-9])*)
    )
''', re.VERBOSE)

_BASES = (('hex', 16), ('oct', 8), ('bin', 2), ('legacy', 8), ('dec', 10))

_DIGITS = r'[0-9](?:_?[0-9])*'
_HEXITS = r'[0-9a-fA-F](?:_?[0-9a-fA-F])*'

_DEC_FLOAT = re.compile(rf'''
    [+-]?
    (?:{_DIGITS}(?:\.(?:{_DIGITS})?)? | \.{_DIGITS})
    (?:[eE][+-]?{_DIGITS})?
''', re.VERBOSE)

_HEX_FLOAT = re.compile(rf'''
    [+-]?0[xX]
    (?:(?:_?[0-9a-fA-F])+(?:\.(?:{_HEXITS})?)? | \.{_HEXITS})
    [pP][+-]?{_DIGITS}
''', re.VERBOSE)

_SPECIAL_FLOAT = re.compile(r'[+-]?inf(?:inity)?|nan', re.IGNORECASE)

_TRUTHY = frozenset(('1', 't', 'true'))
_FALSY = frozenset(('0', 'f', 'false'))


def _parse_integer(text: str) -> int:
    matched = _INT_LITERAL.fullmatch(text)
    if matched is None:
        raise ValueError(f'invalid integer literal: {text!r}')
    for group, base in _BASES:
        digits = matched[group]
        if digits is not None:
            value = int(digits.replace('_', ''), base)
            return -value if matched['sign'] == '-' else value
    raise ValueError(f'invalid integer literal: {text!r}')  # unreachable


def to_int(text: str) -> int:
    """Signed 32-bit integer."""
    value = _parse_integer(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f'{text!r} out of int32 range')
    return value


def to_uint(text: str) -> int:
    """Unsigned 32-bit integer. No sign is accepted, not even `+`."""
    if text[:1] in ('+', '-'):
        raise ValueError(f'invalid unsigned literal: {text!r}')
    value = _parse_integer(text)
    if value > UINT32_MAX:
        raise ValueError(f'{text!r} out of uint32 range')
    return value


def _narrow(value: float) -> float:
    # round to the nearest float32, overflowing to inf like a C cast.
    try:
        return unpack('f', pack('f', value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def to_float(text: str) -> float:
    """Float parsed in double precision, then rounded to 32 bits."""
    if _SPECIAL_FLOAT.fullmatch(text):
        return float(text)

    if _DEC_FLOAT.fullmatch(text):
        value = float(text.replace('_', ''))
    elif _HEX_FLOAT.fullmatch(text):
        try:
            value = float.fromhex(text.replace('_', ''))
        except OverflowError as e:
            raise ValueError(f'{text!r} out of float range') from e
    else:
        raise ValueError(f'invalid float literal: {text!r}')

    if math.isinf(value):
        raise ValueError(f'{text!r} out of float range')
    return _narrow(value)


def to_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f'invalid boolean literal: {text!r}')


def to_str(text: str) -> str:
    # an empty value can't be told apart from a missing key.
    if not text:
        raise ValueError('empty value')
    return text
