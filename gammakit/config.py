"""Client configuration taken from command-line options and the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import find_dotenv, load_dotenv

from gammakit.base58 import parse_pubkey

_TEXT_SETTINGS = (
    ("http_url", "HTTP_URL"),
    ("ws_url", "WS_URL"),
    ("payer_path", "PAYER_PATH"),
    ("admin_path", "ADMIN_PATH"),
    ("gamma_program", "GAMMA_PROGRAM"),
)


@dataclass(frozen=True)
class ClientConfig:
    """Connection endpoints, key files, program address and slippage tolerance."""

    http_url: str
    ws_url: str
    payer_path: str
    admin_path: str
    gamma_program: str
    slippage: float

    @property
    def gamma_program_bytes(self) -> bytes:
        """The program address as its 32 raw bytes."""
        return parse_pubkey(self.gamma_program)


def _option(options: Any, name: str) -> Any:
    if options is None:
        return None
    if isinstance(options, Mapping):
        return options.get(name)
    return getattr(options, name, None)


def _required(environ: Mapping, variable: str) -> str:
    value = environ.get(variable)
    if value is None:
        raise ValueError(f"{variable} must be set")
    return value


def _parse_slippage(text: str) -> float:
    if text != text.strip():
        raise ValueError("SLIPPAGE must be a valid float")
    try:
        return float(text)
    except ValueError:
        raise ValueError("SLIPPAGE must be a valid float") from None


def load_config(options: Any = None, environ: Optional[Mapping] = None) -> ClientConfig:
    """Build the configuration; options win over environment variables.

    With no environment given, a .env file found from the working directory
    upward is loaded into the process environment first, and that is used.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    values = {}
    for name, variable in _TEXT_SETTINGS:
        value = _option(options, name)
        values[name] = str(value) if value is not None else _required(environ, variable)

    slippage_option = _option(options, "slippage")
    if slippage_option is not None:
        slippage = float(slippage_option)
    else:
        slippage = _parse_slippage(_required(environ, "SLIPPAGE"))

    try:
        parse_pubkey(values["gamma_program"])
    except ValueError:
        raise ValueError("Invalid GAMMA_PROGRAM pubkey") from None

    return ClientConfig(slippage=slippage, **values)