import base64
import struct

import pytest

from gammakit.base58 import b58encode
from gammakit.instructions import (
    DecodedInstruction,
    InstructionEncoding,
    decode_instruction,
    decode_instruction_text,
    discriminator,
)


def _swap_base_input_data(amount_in, minimum_out):
    return discriminator("global", "swap_base_input") + struct.pack("<QQ", amount_in, minimum_out)


def test_discriminator_shape_and_determinism():
    first = discriminator("global", "deposit")
    assert len(first) == 8
    assert discriminator("global", "deposit") == first
    assert discriminator("global", "withdraw") != first
    assert discriminator("event", "deposit") != first


def test_decode_swap_base_input():
    result = decode_instruction(_swap_base_input_data(100, 50))
    assert result == DecodedInstruction(
        "SwapBaseInput", {"amount_in": 100, "minimum_amount_out": 50}
    )


def test_decode_create_amm_config_mixed_widths():
    data = discriminator("global", "create_amm_config") + struct.pack(
        "<HQQQQ", 3, 2500, 120000, 40000, 1000
    )
    result = decode_instruction(data)
    assert result.name == "CreateAmmConfig"
    assert list(result.fields) == [
        "index",
        "trade_fee_rate",
        "protocol_fee_rate",
        "fund_fee_rate",
        "create_pool_fee",
    ]
    assert list(result.fields.values()) == [3, 2500, 120000, 40000, 1000]


def test_decode_update_amm_config():
    data = discriminator("global", "update_amm_config") + struct.pack("<BQ", 2, 77)
    assert decode_instruction(data).fields == {"param": 2, "value": 77}


def test_trailing_bytes_are_ignored():
    data = _swap_base_input_data(1, 2) + b"\x09\x09"
    assert decode_instruction(data).fields == {"amount_in": 1, "minimum_amount_out": 2}


def test_unknown_discriminator_returns_none():
    assert decode_instruction(b"\x00" * 24) is None


def test_short_data_rejected():
    with pytest.raises(ValueError):
        decode_instruction(b"\x01\x02")


def test_truncated_arguments_rejected():
    with pytest.raises(ValueError):
        decode_instruction(_swap_base_input_data(5, 6)[:-1])


@pytest.mark.parametrize(
    "encoding, encode",
    [
        (InstructionEncoding.HEX, lambda b: b.hex()),
        (InstructionEncoding.BASE64, lambda b: base64.b64encode(b).decode()),
        (InstructionEncoding.BASE58, b58encode),
    ],
)
def test_text_encodings_agree(encoding, encode):
    data = discriminator("global", "withdraw") + struct.pack("<QQQ", 10, 20, 30)
    assert decode_instruction_text(encode(data), encoding) == decode_instruction(data)


@pytest.mark.parametrize(
    "text, encoding",
    [
        ("zz", InstructionEncoding.HEX),
        ("!!!!", InstructionEncoding.BASE64),
        ("0OIl", InstructionEncoding.BASE58),
    ],
)
def test_bad_text_rejected(text, encoding):
    with pytest.raises(ValueError):
        decode_instruction_text(text, encoding)


def test_str_lists_fields():
    text = str(decode_instruction(_swap_base_input_data(7, 8)))
    assert text.splitlines() == [
        "SwapBaseInput {",
        "    amount_in: 7,",
        "    minimum_amount_out: 8,",
        "}",
    ]