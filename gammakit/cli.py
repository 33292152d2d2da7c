"""Command-line entry point for decoding pool instructions, events and transaction logs."""

from __future__ import annotations

import argparse
import base64
import binascii
import json
import sys
import urllib.error
import urllib.request
from typing import Any, List, Optional, Sequence

from gammakit.base58 import b58decode
from gammakit.config import ClientConfig, load_config
from gammakit.errors import GammaError
from gammakit.instructions import decode_instruction
from gammakit.logs import (
    PROGRAM_DATA,
    DecodedEvent,
    LogParseError,
    handle_program_log,
    parse_program_logs,
)

SIGNATURE_LENGTH = 64
_RPC_TIMEOUT = 30.0


def _rpc_request(url: str, method: str, params: List[Any]) -> Any:
    body = json.dumps(
        {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
    ).encode()
    request = urllib.request.Request(
        url, data=body, headers={"Content-Type": "application/json"}
    )
    try:
        with urllib.request.urlopen(request, timeout=_RPC_TIMEOUT) as response:
            reply = json.load(response)
    except urllib.error.URLError as exc:
        raise ConnectionError(f"request to {url} failed: {exc.reason}") from exc
    if not isinstance(reply, dict):
        raise RuntimeError(f"malformed RPC reply to {method}")
    error = reply.get("error")
    if error:
        message = error.get("message", error) if isinstance(error, dict) else error
        raise RuntimeError(f"RPC error in {method}: {message}")
    return reply.get("result")


def _print_decoded(data: bytes, original: str) -> None:
    decoded = decode_instruction(data)
    if decoded is None:
        print(f"unknow instruction: {original}")
    else:
        print(decoded)


def _print_hex_instruction(text: str) -> None:
    try:
        data = bytes.fromhex(text)
    except ValueError:
        raise ValueError(f"could not hex decode instruction: {text}") from None
    _print_decoded(data, text)


def _print_base58_instruction(text: str) -> None:
    try:
        data = b58decode(text)
    except ValueError:
        print(f"Could not base58 decode instruction: {text}")
        return
    _print_decoded(data, text)


def _print_event(event: DecodedEvent, line: str) -> None:
    if event.name is None:
        print(f"unknow event: {line}")
    else:
        print(event)


def _event_line(event: DecodedEvent) -> str:
    payload = base64.b64encode(event.discriminator + event.data).decode()
    return f"{PROGRAM_DATA}{payload}"


def _decode_instruction_command(config: ClientConfig, args: argparse.Namespace) -> None:
    _print_hex_instruction(args.instr_hex_data)


def _decode_event_command(config: ClientConfig, args: argparse.Namespace) -> None:
    line = args.log_event
    event, _, _ = handle_program_log(config.gamma_program, line, False)
    if event is not None:
        _print_event(event, line)
    elif not line.startswith("Program log:"):
        print(f"Could not base64 decode log: {line}")


def _account_keys(transaction: Any) -> tuple:
    message = transaction.get("message") if isinstance(transaction, dict) else None
    if not isinstance(message, dict):
        return [], []
    keys = message.get("accountKeys") or []
    if not all(isinstance(key, str) for key in keys):
        return [], []
    return list(keys), list(message.get("instructions") or [])


def _print_transaction_instructions(
    program_id: str, transaction: Any, meta: Optional[dict]
) -> None:
    if meta is None:
        return
    account_keys, instructions = _account_keys(transaction)
    loaded = meta.get("loadedAddresses")
    if isinstance(loaded, dict):
        account_keys.extend(loaded.get("writable") or [])
        account_keys.extend(loaded.get("readonly") or [])
    try:
        program_index = account_keys.index(program_id)
    except ValueError:
        raise ValueError(
            f"program {program_id} is not among the transaction's accounts"
        ) from None

    for number, instruction in enumerate(instructions, start=1):
        if instruction.get("programIdIndex") == program_index:
            print(f"instruction #{number}")
            _print_base58_instruction(instruction.get("data", ""))

    for inner in meta.get("innerInstructions") or []:
        for number, instruction in enumerate(inner.get("instructions") or [], start=1):
            if "programIdIndex" not in instruction or "data" not in instruction:
                continue
            if instruction["programIdIndex"] == program_index:
                print(f"inner_instruction #{inner.get('index', 0) + 1}.{number}")
                _print_base58_instruction(instruction["data"])


def _print_transaction_events(program_id: str, meta: Optional[dict]) -> None:
    logs = (meta or {}).get("logMessages") or []
    if not logs:
        print("log is empty")
        return
    for event in parse_program_logs(program_id, logs):
        _print_event(event, _event_line(event))


def _decode_tx_log_command(config: ClientConfig, args: argparse.Namespace) -> None:
    try:
        raw_signature = b58decode(args.tx_id)
    except ValueError:
        raw_signature = b""
    if len(raw_signature) != SIGNATURE_LENGTH:
        raise ValueError(f"invalid transaction signature: {args.tx_id}")

    result = _rpc_request(
        config.http_url,
        "getTransaction",
        [
            args.tx_id,
            {
                "encoding": "json",
                "commitment": "confirmed",
                "maxSupportedTransactionVersion": 0,
            },
        ],
    )
    if not isinstance(result, dict):
        raise RuntimeError(f"transaction {args.tx_id} not found")
    meta = result.get("meta")
    meta = meta if isinstance(meta, dict) else None
    _print_transaction_instructions(config.gamma_program, result.get("transaction"), meta)
    _print_transaction_events(config.gamma_program, meta)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gamma-cli")
    parser.add_argument("--http-url", dest="http_url")
    parser.add_argument("--ws-url", dest="ws_url")
    parser.add_argument("--payer-path", dest="payer_path")
    parser.add_argument("--admin-path", dest="admin_path")
    parser.add_argument("--gamma-program", dest="gamma_program")
    parser.add_argument("--slippage", type=float)
    commands = parser.add_subparsers(dest="command", required=True)

    decode_instr = commands.add_parser("decode-instruction")
    decode_instr.add_argument("instr_hex_data")
    decode_instr.set_defaults(handler=_decode_instruction_command)

    decode_event = commands.add_parser("decode-event")
    decode_event.add_argument("log_event")
    decode_event.set_defaults(handler=_decode_event_command)

    decode_tx = commands.add_parser("decode-tx-log")
    decode_tx.add_argument("tx_id")
    decode_tx.set_defaults(handler=_decode_tx_log_command)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        config = load_config(args)
        args.handler(config, args)
    except (ValueError, OSError, RuntimeError, LogParseError, GammaError, binascii.Error) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())