"""Command line demonstration: encrypt and decrypt one block."""

from __future__ import annotations

import argparse
from typing import Sequence

from .cipher import AES

DEFAULT_KEY = bytes(range(32))
DEFAULT_BLOCK = bytes.fromhex("00112233445566778899aabbccddeeff")


def format_block(block: bytes | bytearray) -> str:
    """Render bytes as space separated hex pairs, each followed by a space."""
    return "".join(f"{b:02x} " for b in block)


def _hex_bytes(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a hex string: {text!r}") from exc


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rijndael197",
        description="Encrypt a block with AES, then decrypt it again.",
    )
    parser.add_argument(
        "-k", "--key", type=_hex_bytes, default=DEFAULT_KEY,
        help="cipher key as hex (16, 24 or 32 bytes)",
    )
    parser.add_argument(
        "-i", "--input", type=_hex_bytes, default=DEFAULT_BLOCK,
        help="plaintext block as hex (16 bytes)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    try:
        cipher = AES(args.key)
        ciphertext = cipher.encrypt_block(args.input)
    except ValueError as exc:
        parser.error(str(exc))
    recovered = cipher.decrypt_block(ciphertext)

    print("Plaintext message:")
    print(format_block(args.input))
    print("Ciphered message:")
    print(format_block(ciphertext))
    print("Original message (after inv cipher):")
    print(format_block(recovered))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())