"""Decoding of the pool program's instruction data."""

from __future__ import annotations

import base64
import binascii
import enum
import hashlib
import struct
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from gammakit.base58 import b58decode

DISCRIMINATOR_LENGTH = 8


class InstructionEncoding(enum.Enum):
    """Text encodings accepted for instruction data."""

    HEX = "hex"
    BASE64 = "base64"
    BASE58 = "base58"


@dataclass(frozen=True)
class DecodedInstruction:
    """An instruction's name and its decoded arguments, in declaration order."""

    name: str
    fields: Dict[str, int] = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.name} {{"]
        lines.extend(f"    {key}: {value}," for key, value in self.fields.items())
        lines.append("}")
        return "\n".join(lines)


def discriminator(namespace: str, name: str) -> bytes:
    """The 8-byte prefix identifying `namespace:name`."""
    return hashlib.sha256(f"{namespace}:{name}".encode()).digest()[:DISCRIMINATOR_LENGTH]


_U64_PAIR = ("Q", "Q")

_LAYOUTS: Tuple[Tuple[str, str, Tuple[Tuple[str, str], ...]], ...] = (
    (
        "create_amm_config",
        "CreateAmmConfig",
        (
            ("index", "H"),
            ("trade_fee_rate", "Q"),
            ("protocol_fee_rate", "Q"),
            ("fund_fee_rate", "Q"),
            ("create_pool_fee", "Q"),
        ),
    ),
    ("update_amm_config", "UpdateAmmConfig", (("param", "B"), ("value", "Q"))),
    (
        "initialize",
        "Initialize",
        (("init_amount_0", "Q"), ("init_amount_1", "Q"), ("open_time", "Q")),
    ),
    (
        "collect_protocol_fee",
        "CollectProtocolFee",
        (("amount_0_requested", "Q"), ("amount_1_requested", "Q")),
    ),
    (
        "collect_fund_fee",
        "CollectFundFee",
        (("amount_0_requested", "Q"), ("amount_1_requested", "Q")),
    ),
    (
        "deposit",
        "Deposit",
        (
            ("lp_token_amount", "Q"),
            ("maximum_token_0_amount", "Q"),
            ("maximum_token_1_amount", "Q"),
        ),
    ),
    (
        "withdraw",
        "Withdraw",
        (
            ("lp_token_amount", "Q"),
            ("minimum_token_0_amount", "Q"),
            ("minimum_token_1_amount", "Q"),
        ),
    ),
    ("swap_base_input", "SwapBaseInput", (("amount_in", "Q"), ("minimum_amount_out", "Q"))),
    ("swap_base_output", "SwapBaseOutput", (("max_amount_in", "Q"), ("amount_out", "Q"))),
)

_BY_DISCRIMINATOR = {
    discriminator("global", method): (display, layout)
    for method, display, layout in _LAYOUTS
}


def decode_instruction(data: bytes) -> Optional[DecodedInstruction]:
    """Decode raw instruction bytes; None if the discriminator is not recognised."""
    data = bytes(data)
    if len(data) < DISCRIMINATOR_LENGTH:
        raise ValueError("instruction data is shorter than its discriminator")
    spec = _BY_DISCRIMINATOR.get(data[:DISCRIMINATOR_LENGTH])
    if spec is None:
        return None
    name, layout = spec
    fmt = "<" + "".join(code for _, code in layout)
    payload = data[DISCRIMINATOR_LENGTH:]
    if len(payload) < struct.calcsize(fmt):
        raise ValueError(f"instruction {name} did not deserialize")
    values = struct.unpack_from(fmt, payload)
    return DecodedInstruction(
        name=name, fields={key: value for (key, _), value in zip(layout, values)}
    )


def _decode_text(text: str, encoding: InstructionEncoding) -> bytes:
    if encoding is InstructionEncoding.HEX:
        try:
            return bytes.fromhex(text)
        except ValueError as exc:
            raise ValueError(f"could not hex decode instruction: {text}") from exc
    if encoding is InstructionEncoding.BASE64:
        try:
            return base64.b64decode(text, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"could not base64 decode instruction: {text}") from exc
    try:
        return b58decode(text)
    except ValueError as exc:
        raise ValueError(f"could not base58 decode instruction: {text}") from exc


def decode_instruction_text(
    text: str, encoding: InstructionEncoding
) -> Optional[DecodedInstruction]:
    """Decode instruction data given as hex, base64 or base58 text."""
    return decode_instruction(_decode_text(text, InstructionEncoding(encoding)))