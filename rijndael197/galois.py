"""Arithmetic in GF(2^8) and on four-term polynomials with GF(2^8) coefficients.

The field uses the irreducible polynomial m(x) = x^8 + x^4 + x^3 + x + 1.
Words of four bytes are polynomials reduced modulo x^4 + 1.
"""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Sequence

_REDUCTION = 0x1B
_WORD_SIZE = 4


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value!r}")
    return value


def _check_word(word: Sequence[int]) -> tuple[int, ...]:
    if len(word) != _WORD_SIZE:
        raise ValueError(f"a word has {_WORD_SIZE} bytes, got {len(word)}")
    return tuple(_check_byte(b) for b in word)


def _multiply(a: int, b: int) -> int:
    """Shift-and-add multiplication, reducing by m(x) on overflow."""
    product = 0
    for _ in range(8):
        if b & 1:
            product ^= a
        carry = a & 0x80
        a = (a << 1) & 0xFF
        if carry:
            a ^= _REDUCTION
        b >>= 1
    return product


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    # {03} generates the multiplicative group, so every non-zero
    # product can be read from logarithm tables.
    exp = [0] * 510
    log = [0] * 256
    value = 1
    for power in range(255):
        exp[power] = exp[power + 255] = value
        log[value] = power
        value = _multiply(value, 0x03)
    return tuple(exp), tuple(log)


_EXP, _LOG = _build_tables()


def gadd(a: int, b: int) -> int:
    """Add two field elements."""
    return _check_byte(a) ^ _check_byte(b)


def gsub(a: int, b: int) -> int:
    """Subtract two field elements (the same as addition)."""
    return _check_byte(a) ^ _check_byte(b)


def gmult(a: int, b: int) -> int:
    """Multiply two field elements."""
    _check_byte(a)
    _check_byte(b)
    if a == 0 or b == 0:
        return 0
    return _EXP[_LOG[a] + _LOG[b]]


def coef_add(a: Sequence[int], b: Sequence[int]) -> tuple[int, int, int, int]:
    """Add two four-byte words coefficient by coefficient."""
    return tuple(x ^ y for x, y in zip(_check_word(a), _check_word(b)))  # type: ignore[return-value]


def coef_mult(a: Sequence[int], b: Sequence[int]) -> tuple[int, int, int, int]:
    """Multiply two four-byte words modulo x^4 + 1."""
    a_word = _check_word(a)
    b_word = _check_word(b)
    return tuple(  # type: ignore[return-value]
        reduce(
            xor,
            (gmult(a_word[(k - j) % _WORD_SIZE], b_j) for j, b_j in enumerate(b_word)),
        )
        for k in range(_WORD_SIZE)
    )