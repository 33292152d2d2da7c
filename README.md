# gammakit

Tools for working with a constant-product (x · y = k) liquidity pool program:

- exact integer pool math on 128-bit unsigned amounts: swap output without fees,
  LP-token ↔ trading-token conversion with floor or ceiling rounding, and slippage bounds;
- decoding of the program's instruction data given as hex, base64 or base58;
- recognition of the `SwapEvent` and `LpChangeEvent` events that the program writes to
  transaction logs;
- base58 encoding and decoding of account addresses;
- a `gamma-cli` command that decodes instructions, events and a transaction's logs.

## Installation

```
pip install .
```

For development, with the test dependencies:

```
pip install -e ".[test]"
pytest
```

## Pool math

```python
from gammakit.curve import (
    RoundDirection,
    lp_tokens_to_trading_tokens,
    swap_base_input_without_fees,
    token_0_to_lp_tokens,
)
from gammakit.utils import amount_with_slippage

# Output amount for 1_000 units in, against reserves of 50_000 / 100_000
out = swap_base_input_without_fees(1_000, 50_000, 100_000)

# Token amounts backing 10 LP tokens out of a supply of 1_000
result = lp_tokens_to_trading_tokens(10, 1_000, 50_000, 100_000, RoundDirection.CEILING)
print(result.token_0_amount, result.token_1_amount)

# LP tokens worth 500 units of token 0
lp = token_0_to_lp_tokens(500, 50_000, 1_000)

# Minimum acceptable output with 1% slippage (rounded down); pass True to round up instead
minimum_out = amount_with_slippage(out, 0.01, False)
```

- `swap_base_input_without_fees` raises `gammakit.errors.GammaError` with code
  `ErrorCode.MATH_OVERFLOW` when a product or sum leaves the 128-bit range or the divisor
  is zero.
- `validate_supply` raises `GammaError` with `ErrorCode.EMPTY_SUPPLY` if either amount is zero.
- `lp_tokens_to_trading_tokens`, `token_0_to_lp_tokens` and `token_1_to_lp_tokens` return
  `None` on overflow or division by zero. With ceiling rounding, a share that floors to zero
  stays zero.
- `TradeDirection.opposite()` gives the reverse direction of a trade.

Every `GammaError` carries a `code` from `gammakit.errors.ErrorCode`, numbered from 6000,
and that code's `message`.

## Decoding

```python
from gammakit.instructions import InstructionEncoding, decode_instruction_text
from gammakit.logs import parse_program_logs

decoded = decode_instruction_text("<hex data>", InstructionEncoding.HEX)
if decoded is not None:
    print(decoded.name, decoded.fields)

program_id = "<base58 program address>"
for event in parse_program_logs(program_id, log_messages):
    print(event.name, event.data.hex())
```

- `decode_instruction` takes raw bytes. It returns a `DecodedInstruction` for the
  `CreateAmmConfig`, `UpdateAmmConfig`, `Initialize`, `CollectProtocolFee`, `CollectFundFee`,
  `Deposit`, `Withdraw`, `SwapBaseInput` and `SwapBaseOutput` instructions, and `None` for
  any other discriminator. It raises `ValueError` when the data is too short.
- `decode_instruction_text` first decodes the text and raises `ValueError` if it is not
  valid in the chosen encoding.
- `parse_program_logs` follows the program invocation stack through the log lines and
  returns a `DecodedEvent` for each base64 `Program data:` line the program wrote. Known
  events get their name; others have `name` set to `None`. The event payload is returned as
  raw bytes and is not split into fields.
- The lower-level helpers `handle_program_log`, `handle_system_log` and `Execution` are also
  available, as are `discriminator` and `event_discriminator`.

`gammakit.base58` provides `b58encode`, `b58decode` and `parse_pubkey`. `parse_pubkey`
requires exactly 32 bytes.

## Command line

```
gamma-cli --help
gamma-cli decode-instruction <hex data>
gamma-cli decode-event <base64 event data>
gamma-cli decode-tx-log <transaction signature>
```

Every subcommand needs the full configuration, even the ones that work offline. Each
setting is taken from an option first, then from an environment variable:

| option            | variable        |
|-------------------|-----------------|
| `--http-url`      | `HTTP_URL`      |
| `--ws-url`        | `WS_URL`        |
| `--payer-path`    | `PAYER_PATH`    |
| `--admin-path`    | `ADMIN_PATH`    |
| `--gamma-program` | `GAMMA_PROGRAM` |
| `--slippage`      | `SLIPPAGE`      |

A `.env` file, searched for from the working directory upward, is loaded into the
environment first. `GAMMA_PROGRAM` must be a valid base58 public key. `SLIPPAGE` must be a
decimal number, for example `0.005`. You can also build the configuration in code with
`gammakit.config.load_config`.

- `decode-instruction` prints the decoded instruction, or `unknow instruction: ...` when the
  discriminator is not recognised.
- `decode-event` prints the event, or `unknow event: ...` when its discriminator is not
  recognised.
- `decode-tx-log` fetches the transaction from `HTTP_URL` with a JSON-RPC `getTransaction`
  request. It prints every top-level and inner instruction addressed to the program, then
  the events found in the transaction's logs.

On an error the command writes `error: ...` to standard error and exits with status 1.

## What this package does not do

- It does not build, sign or send transactions. Creating configs or pools, depositing,
  withdrawing and swapping are not available.
- It does not read keypair files. The payer and admin paths are only stored in the
  configuration.
- It has no fee-inclusive swap quotes: no dynamic, protocol or fund fees, and no token
  transfer fees.
- It does not decode the fields of event payloads.