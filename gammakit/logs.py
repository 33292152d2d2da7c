"""Parsing of transaction log lines and the events the pool program emits."""

from __future__ import annotations

import base64
import binascii
import hashlib
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

PROGRAM_LOG = "Program log: "
PROGRAM_DATA = "Program data: "

DISCRIMINATOR_LENGTH = 8
KNOWN_EVENTS = ("SwapEvent", "LpChangeEvent")

_INVOKE_RE = re.compile(r"Program (.*) invoke.*")
_SUCCESS_RE = re.compile(r"Program (.*) success*")


class LogParseError(Exception):
    """A log line could not be parsed."""


@dataclass(frozen=True)
class DecodedEvent:
    """An event emitted by the program; name is None when it is not recognised."""

    name: Optional[str]
    discriminator: bytes
    data: bytes

    def __str__(self) -> str:
        label = self.name or "unknown event"
        return f"{label} {{ data: {self.data.hex()} }}"


def event_discriminator(name: str) -> bytes:
    """The 8-byte prefix identifying an event by name."""
    return hashlib.sha256(f"event:{name}".encode()).digest()[:DISCRIMINATOR_LENGTH]


_EVENTS_BY_DISCRIMINATOR = {event_discriminator(name): name for name in KNOWN_EVENTS}


class Execution:
    """Stack of programs currently executing, innermost last."""

    def __init__(self, program: str) -> None:
        self._stack: List[str] = [program]

    def current(self) -> str:
        if not self._stack:
            raise IndexError("no program is executing")
        return self._stack[-1]

    def is_empty(self) -> bool:
        return not self._stack

    def push(self, program: str) -> None:
        self._stack.append(program)

    def pop(self) -> str:
        if not self._stack:
            raise IndexError("no program is executing")
        return self._stack.pop()


def handle_system_log(program_id: str, log: str) -> Tuple[Optional[str], bool]:
    """Return (program invoked or None, whether a program returned)."""
    if log.startswith(f"Program {program_id} invoke"):
        return program_id, False
    if "invoke" in log:
        return "cpi", False
    return None, _SUCCESS_RE.fullmatch(log) is not None


def _decode_event(encoded: str) -> Optional[DecodedEvent]:
    try:
        raw = base64.b64decode(encoded, validate=True)
    except binascii.Error:
        return None
    if len(raw) < DISCRIMINATOR_LENGTH:
        raise LogParseError(f"event data is shorter than its discriminator: {encoded}")
    disc = raw[:DISCRIMINATOR_LENGTH]
    return DecodedEvent(
        name=_EVENTS_BY_DISCRIMINATOR.get(disc),
        discriminator=disc,
        data=raw[DISCRIMINATOR_LENGTH:],
    )


def handle_program_log(
    program_id: str, line: str, with_prefix: bool
) -> Tuple[Optional[DecodedEvent], Optional[str], bool]:
    """Handle a line logged by the program.

    Returns (event or None, program invoked or None, whether a program returned).
    Lines that are not base64 are skipped; plain "Program log:" lines carry no event.
    """
    if with_prefix:
        if line.startswith(PROGRAM_LOG):
            payload: Optional[str] = line[len(PROGRAM_LOG):]
        elif line.startswith(PROGRAM_DATA):
            payload = line[len(PROGRAM_DATA):]
        else:
            payload = None
    else:
        payload = line

    if payload is None:
        program, did_pop = handle_system_log(program_id, line)
        return None, program, did_pop
    if line.startswith("Program log:"):
        return None, None, False
    return _decode_event(payload), None, False


def parse_program_logs(program_id: str, logs: Iterable[str]) -> List[DecodedEvent]:
    """Collect the events the program emitted in a transaction's log lines."""
    lines = list(logs)
    if not lines:
        return []
    match = _INVOKE_RE.fullmatch(lines[0])
    if match is None:
        return []
    execution = Execution(match.group(1))
    events: List[DecodedEvent] = []
    for line in lines[1:]:
        if not execution.is_empty() and execution.current() == program_id:
            event, new_program, did_pop = handle_program_log(program_id, line, True)
            if event is not None:
                events.append(event)
        else:
            new_program, did_pop = handle_system_log(program_id, line)
        if new_program is not None:
            execution.push(new_program)
        if did_pop:
            try:
                execution.pop()
            except IndexError:
                raise LogParseError(f"program returned with none executing: {line}") from None
    return events