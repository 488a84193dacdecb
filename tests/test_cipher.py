import pytest
from hypothesis import given
from hypothesis import strategies as st

from rijndael197.cipher import (
    AES,
    INV_S_BOX,
    S_BOX,
    add_round_key,
    expand_key,
    inv_mix_columns,
    inv_shift_rows,
    inv_sub_bytes,
    mix_columns,
    rcon,
    rot_word,
    shift_rows,
    sub_bytes,
    sub_word,
)

byte = st.integers(min_value=0, max_value=255)
row = st.lists(byte, min_size=4, max_size=4)
state_strategy = st.lists(row, min_size=4, max_size=4)
block = st.binary(min_size=16, max_size=16)
key = st.sampled_from([16, 24, 32]).flatmap(lambda n: st.binary(min_size=n, max_size=n))

PLAINTEXT = bytes.fromhex("00112233445566778899aabbccddeeff")


@pytest.mark.parametrize(
    "key_size,expected",
    [
        (16, "69c4e0d86a7b0430d8cdb78070b4c55a"),
        (24, "dda97ca4864cdfe06eaf70a0ec0d7191"),
        (32, "8ea2b7ca516745bfeafc49904b496089"),
    ],
)
def test_fips_appendix_c_vectors(key_size, expected):
    cipher = AES(bytes(range(key_size)))
    ciphertext = cipher.encrypt_block(PLAINTEXT)
    assert ciphertext.hex() == expected
    assert cipher.decrypt_block(ciphertext) == PLAINTEXT


@pytest.mark.parametrize("key_size,rounds", [(16, 10), (24, 12), (32, 14)])
def test_round_counts(key_size, rounds):
    cipher = AES(bytes(key_size))
    assert cipher.rounds == rounds
    assert len(cipher.schedule.words) == 4 * (rounds + 1)


@given(key, block)
def test_encrypt_decrypt_round_trip(k, b):
    cipher = AES(k)
    assert cipher.decrypt_block(cipher.encrypt_block(b)) == b


@given(key, block)
def test_bytearray_input_matches_bytes(k, b):
    cipher = AES(bytearray(k))
    assert cipher.encrypt_block(bytearray(b)) == cipher.encrypt_block(b)


@pytest.mark.parametrize("size", [0, 15, 17, 31, 40])
def test_invalid_key_length(size):
    with pytest.raises(ValueError):
        AES(bytes(size))


@pytest.mark.parametrize("size", [0, 15, 17, 32])
def test_invalid_block_length(size):
    cipher = AES(bytes(16))
    with pytest.raises(ValueError):
        cipher.encrypt_block(bytes(size))
    with pytest.raises(ValueError):
        cipher.decrypt_block(bytes(size))


def test_rcon_values():
    assert rcon(1) == (0x01, 0, 0, 0)
    assert rcon(2) == (0x02, 0, 0, 0)
    assert rcon(9) == (0x1B, 0, 0, 0)
    assert rcon(10) == (0x36, 0, 0, 0)


def test_rcon_rejects_zero():
    with pytest.raises(ValueError):
        rcon(0)


def test_sbox_tables_are_inverse():
    for value in range(256):
        state = [[value] * 4 for _ in range(4)]
        substituted = sub_bytes(state)
        assert substituted == [[S_BOX[value]] * 4 for _ in range(4)]
        assert inv_sub_bytes(substituted) == state
        assert inv_sub_bytes(state) == [[INV_S_BOX[value]] * 4 for _ in range(4)]
    assert inv_sub_bytes([[0] * 4 for _ in range(4)]) == [[0x52] * 4 for _ in range(4)]


def test_sub_word_and_rot_word():
    assert sub_word((0, 0, 0, 0)) == (0x63, 0x63, 0x63, 0x63)
    assert rot_word((1, 2, 3, 4)) == (2, 3, 4, 1)


@given(st.tuples(byte, byte, byte, byte))
def test_rot_word_four_times_is_identity(w):
    result = w
    for _ in range(4):
        result = rot_word(result)
    assert result == w


@given(state_strategy)
def test_sub_bytes_round_trip(state):
    assert inv_sub_bytes(sub_bytes(state)) == state


def test_sub_bytes_of_zero_state():
    assert sub_bytes([[0] * 4 for _ in range(4)]) == [[0x63] * 4 for _ in range(4)]


@given(state_strategy)
def test_shift_rows_round_trip(state):
    assert inv_shift_rows(shift_rows(state)) == state
    assert shift_rows(inv_shift_rows(state)) == state


@given(state_strategy)
def test_shift_rows_keeps_first_row_and_row_contents(state):
    shifted = shift_rows(state)
    assert shifted[0] == state[0]
    assert [sorted(r) for r in shifted] == [sorted(r) for r in state]


@given(state_strategy)
def test_shift_rows_has_order_four(state):
    result = state
    for _ in range(4):
        result = shift_rows(result)
    assert result == state


@given(state_strategy)
def test_mix_columns_round_trip(state):
    assert inv_mix_columns(mix_columns(state)) == state


@given(state_strategy, state_strategy)
def test_mix_columns_linear(a, b):
    xored = [[x ^ y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]
    mixed = [[x ^ y for x, y in zip(ra, rb)] for ra, rb in zip(mix_columns(a), mix_columns(b))]
    assert mix_columns(xored) == mixed


@given(byte)
def test_mix_columns_fixes_constant_columns(value):
    state = [[value] * 4 for _ in range(4)]
    assert mix_columns(state) == state


@given(key)
def test_key_schedule_starts_with_key(k):
    schedule = expand_key(k)
    assert schedule.round_key(0) == k[:16]
    assert len(schedule.words) == 4 * (schedule.rounds + 1)
    assert schedule.nk == len(k) // 4


def test_256_bit_key_second_round_key_is_key_tail():
    k = bytes(range(32))
    assert expand_key(k).round_key(1) == k[16:]


def test_round_key_out_of_range():
    schedule = expand_key(bytes(16))
    with pytest.raises(ValueError):
        schedule.round_key(11)
    with pytest.raises(ValueError):
        schedule.round_key(-1)


@given(key, state_strategy)
def test_add_round_key_is_involution(k, state):
    schedule = expand_key(k)
    for r in (0, schedule.rounds):
        assert add_round_key(add_round_key(state, schedule, r), schedule, r) == state


def test_add_round_key_on_zero_state_gives_round_key():
    k = bytes(range(16))
    schedule = expand_key(k)
    zero = [[0] * 4 for _ in range(4)]
    result = add_round_key(zero, schedule, 0)
    assert bytes(b for column in zip(*result) for b in column) == k