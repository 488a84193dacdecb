# rijndael197

A small, dependency-free implementation of the AES block cipher as specified
in FIPS 197. It supports 128-, 192- and 256-bit keys and encrypts or decrypts
single 16-byte blocks. It is meant for study and testing. It is slow and makes
no attempt at side-channel resistance.

## Installation

```
pip install .
```

## Usage

```python
from rijndael197.cipher import AES

key = bytes(range(32))                       # 256-bit key
block = bytes.fromhex("00112233445566778899aabbccddeeff")

aes = AES(key)
ciphertext = aes.encrypt_block(block)
print(ciphertext.hex())                      # 8ea2b7ca516745bfeafc49904b496089
assert aes.decrypt_block(ciphertext) == block
print(aes.rounds)                            # 14
```

`AES(key)` raises `ValueError` if the key is not 16, 24 or 32 bytes long.
`encrypt_block` and `decrypt_block` raise `ValueError` if the block is not
exactly 16 bytes long. Keys and blocks may be `bytes`, `bytearray` or
`memoryview`. The results are `bytes`.

### Building blocks

`rijndael197.galois` works in GF(2^8) with the polynomial
x^8 + x^4 + x^3 + x + 1:

- `gadd(a, b)` and `gsub(a, b)` add and subtract field elements. Both are XOR.
- `gmult(a, b)` multiplies two field elements.
- `coef_add(a, b)` and `coef_mult(a, b)` add and multiply four-byte words as
  polynomials modulo x^4 + 1. They return 4-tuples.

These functions raise `ValueError` for values outside 0..255 and for words
that are not four bytes long.

`rijndael197.cipher` exposes the round transformations. Each one operates on
a State of four rows of four bytes and returns a new State:

- `sub_bytes` and `inv_sub_bytes`
- `shift_rows` and `inv_shift_rows`
- `mix_columns` and `inv_mix_columns`
- `add_round_key(state, schedule, round_index)`

It also exposes the key-expansion helpers:

- `rcon(i)` for `i >= 1`
- `sub_word`
- `rot_word`
- `expand_key(key)`, which returns a frozen `KeySchedule` with the fields
  `words`, `nk` and `rounds`

`KeySchedule.round_key(i)` returns the 16 bytes of round key `i`, where `i`
is in the range `0..rounds`. The module also exports the tables `S_BOX` and
`INV_S_BOX`, as well as `BLOCK_SIZE` (16) and `NB` (4).

## Command line

```
rijndael197
rijndael197 --key 000102030405060708090a0b0c0d0e0f --input 00112233445566778899aabbccddeeff
```

The command encrypts a block, decrypts the result, and prints three lines of
hex: the plaintext, the ciphertext and the recovered block. The options are:

- `-k` / `--key` gives the key as hex. It must be 16, 24 or 32 bytes. The
  default is `000102…1f`, a 256-bit key.
- `-i` / `--input` gives the block as hex. It must be 16 bytes. The default
  is `00112233445566778899aabbccddeeff`.

If the hex is invalid or a length is wrong, the command prints a usage error
and exits with status 2.

## What it does not do

The package works on one 16-byte block at a time. It provides:

- no modes of operation (ECB, CBC, CTR, GCM, …)
- no padding
- no authentication
- no way to encrypt files or streams

## Tests

```
pip install .[test]
pytest
```