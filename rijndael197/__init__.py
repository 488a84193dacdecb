"""AES (FIPS 197) block cipher, GF(2^8) arithmetic and a demonstration command."""

__version__ = "0.1.0"
__all__ = ["galois", "cipher", "cli"]