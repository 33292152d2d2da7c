"""Base58 encoding with the Bitcoin alphabet, as used for account addresses."""

from __future__ import annotations

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(ALPHABET)}

PUBKEY_LENGTH = 32


def b58encode(data: bytes) -> str:
    """Encode bytes as base58 text; each leading zero byte becomes a '1'."""
    data = bytes(data)
    stripped = data.lstrip(b"\x00")
    leading_zeros = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    return "1" * leading_zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text; raise ValueError on a character outside the alphabet."""
    number = 0
    for position, char in enumerate(text):
        try:
            digit = _INDEX[char]
        except KeyError:
            raise ValueError(
                f"invalid base58 character {char!r} at position {position}"
            ) from None
        number = number * 58 + digit
    leading_ones = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * leading_ones + body


def parse_pubkey(text: str) -> bytes:
    """Decode a base58 account address into its 32 raw bytes."""
    raw = b58decode(text)
    if len(raw) != PUBKEY_LENGTH:
        raise ValueError(
            f"invalid public key {text!r}: expected {PUBKEY_LENGTH} bytes, got {len(raw)}"
        )
    return raw