"""The AES block cipher as specified in FIPS PUB 197.

The State is held as four rows of four bytes; a block maps into it
column by column.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .galois import coef_add, coef_mult, gmult

BLOCK_SIZE = 16
NB = 4

_KEY_PARAMETERS = {16: (4, 10), 24: (6, 12), 32: (8, 14)}

S_BOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)


def _invert(table: bytes) -> bytes:
    inverse = bytearray(len(table))
    for index, value in enumerate(table):
        inverse[value] = index
    return bytes(inverse)


INV_S_BOX = _invert(S_BOX)

_MIX = (0x02, 0x01, 0x01, 0x03)
_INV_MIX = (0x0E, 0x09, 0x0D, 0x0B)

State = list[list[int]]
Word = tuple[int, ...]


def rcon(i: int) -> tuple[int, int, int, int]:
    """Return the round constant word [x^(i-1), 0, 0, 0]."""
    if i < 1:
        raise ValueError(f"round constant index must be at least 1, got {i}")
    value = 1
    for _ in range(i - 1):
        value = gmult(value, 0x02)
    return (value, 0, 0, 0)


def sub_word(word: Sequence[int]) -> Word:
    """Apply the S-box to each byte of a four-byte word."""
    return tuple(S_BOX[b] for b in word)


def rot_word(word: Sequence[int]) -> Word:
    """Rotate a four-byte word one byte to the left."""
    items = tuple(word)
    return items[1:] + items[:1]


def sub_bytes(state: Sequence[Sequence[int]]) -> State:
    """Substitute every State byte through the S-box."""
    return [[S_BOX[b] for b in row] for row in state]


def inv_sub_bytes(state: Sequence[Sequence[int]]) -> State:
    """Substitute every State byte through the inverse S-box."""
    return [[INV_S_BOX[b] for b in row] for row in state]


def shift_rows(state: Sequence[Sequence[int]]) -> State:
    """Rotate row r of the State left by r positions."""
    return [list(row[r:]) + list(row[:r]) for r, row in enumerate(state)]


def inv_shift_rows(state: Sequence[Sequence[int]]) -> State:
    """Rotate row r of the State right by r positions."""
    shifted = []
    for r, row in enumerate(state):
        cut = len(row) - r
        shifted.append(list(row[cut:]) + list(row[:cut]))
    return shifted


def _mix(state: Sequence[Sequence[int]], polynomial: Word) -> State:
    mixed_columns = [coef_mult(polynomial, column) for column in zip(*state)]
    return [list(row) for row in zip(*mixed_columns)]


def mix_columns(state: Sequence[Sequence[int]]) -> State:
    """Multiply each State column by {03}x^3 + {01}x^2 + {01}x + {02}."""
    return _mix(state, _MIX)


def inv_mix_columns(state: Sequence[Sequence[int]]) -> State:
    """Multiply each State column by {0b}x^3 + {0d}x^2 + {09}x + {0e}."""
    return _mix(state, _INV_MIX)


@dataclass(frozen=True)
class KeySchedule:
    """The expanded key: Nb * (Nr + 1) four-byte words."""

    words: tuple[Word, ...]
    nk: int
    rounds: int

    def round_key(self, round_index: int) -> bytes:
        """Return the 16-byte key used in the given round."""
        if not 0 <= round_index <= self.rounds:
            raise ValueError(f"round index must be in 0..{self.rounds}, got {round_index}")
        start = NB * round_index
        return bytes(b for word in self.words[start:start + NB] for b in word)


def add_round_key(
    state: Sequence[Sequence[int]], schedule: KeySchedule, round_index: int
) -> State:
    """XOR the State with the round key of the given round."""
    if not 0 <= round_index <= schedule.rounds:
        raise ValueError(f"round index must be in 0..{schedule.rounds}, got {round_index}")
    start = NB * round_index
    words = schedule.words[start:start + NB]
    return [
        [b ^ word[row] for b, word in zip(state_row, words)]
        for row, state_row in enumerate(state)
    ]


def expand_key(key: bytes | bytearray | memoryview) -> KeySchedule:
    """Expand a 16, 24 or 32 byte cipher key into its key schedule."""
    key = bytes(key)
    try:
        nk, rounds = _KEY_PARAMETERS[len(key)]
    except KeyError:
        raise ValueError(f"key must be 16, 24 or 32 bytes long, got {len(key)}") from None

    words: list[Word] = [tuple(key[4 * i:4 * i + 4]) for i in range(nk)]
    for i in range(nk, NB * (rounds + 1)):
        temp = words[-1]
        if i % nk == 0:
            temp = coef_add(sub_word(rot_word(temp)), rcon(i // nk))
        elif nk > 6 and i % nk == 4:
            temp = sub_word(temp)
        words.append(coef_add(words[i - nk], temp))
    return KeySchedule(words=tuple(words), nk=nk, rounds=rounds)


def _to_state(block: bytes | bytearray | memoryview) -> State:
    data = bytes(block)
    if len(data) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes long, got {len(data)}")
    return [list(data[row::4]) for row in range(4)]


def _from_state(state: State) -> bytes:
    return bytes(b for column in zip(*state) for b in column)


class AES:
    """An AES block cipher bound to one key."""

    def __init__(self, key: bytes | bytearray | memoryview) -> None:
        self.schedule = expand_key(key)

    @property
    def rounds(self) -> int:
        return self.schedule.rounds

    def encrypt_block(self, block: bytes | bytearray | memoryview) -> bytes:
        """Encrypt one 16-byte block."""
        schedule = self.schedule
        state = add_round_key(_to_state(block), schedule, 0)
        for r in range(1, schedule.rounds):
            state = mix_columns(shift_rows(sub_bytes(state)))
            state = add_round_key(state, schedule, r)
        state = shift_rows(sub_bytes(state))
        state = add_round_key(state, schedule, schedule.rounds)
        return _from_state(state)

    def decrypt_block(self, block: bytes | bytearray | memoryview) -> bytes:
        """Decrypt one 16-byte block."""
        schedule = self.schedule
        state = add_round_key(_to_state(block), schedule, schedule.rounds)
        for r in range(schedule.rounds - 1, 0, -1):
            state = inv_sub_bytes(inv_shift_rows(state))
            state = add_round_key(state, schedule, r)
            state = inv_mix_columns(state)
        state = inv_sub_bytes(inv_shift_rows(state))
        state = add_round_key(state, schedule, 0)
        return _from_state(state)