import base64

import pytest

from gammakit.logs import (
    DecodedEvent,
    Execution,
    LogParseError,
    event_discriminator,
    handle_program_log,
    handle_system_log,
    parse_program_logs,
)

PID = "Fc9eSn5QpAiPAmT3UFpDd6ExTeQ4MP7X8R3qcfUCFG1T"
OTHER = "N4CdHcZYMj7DufSu89m1gi3RFxt8NiJQ9PmfNg8kc8P"


def _event_b64(name, payload):
    return base64.b64encode(event_discriminator(name) + payload).decode()


def test_event_discriminators_distinct():
    swap = event_discriminator("SwapEvent")
    lp = event_discriminator("LpChangeEvent")
    assert len(swap) == 8
    assert swap != lp


def test_execution_stack():
    execution = Execution("a")
    execution.push("b")
    assert execution.current() == "b"
    assert execution.pop() == "b"
    assert execution.current() == "a"
    execution.pop()
    assert execution.is_empty()
    with pytest.raises(IndexError):
        execution.pop()
    with pytest.raises(IndexError):
        execution.current()


@pytest.mark.parametrize(
    "log, expected",
    [
        (f"Program {PID} invoke [1]", (PID, False)),
        (f"Program {OTHER} invoke [2]", ("cpi", False)),
        (f"Program {OTHER} success", (None, True)),
        (f"Program {OTHER} succes", (None, True)),
        ("Program log: hello", (None, False)),
        (f"Program {OTHER} failed", (None, False)),
    ],
)
def test_handle_system_log(log, expected):
    assert handle_system_log(PID, log) == expected


def test_program_log_line_is_not_an_event():
    assert handle_program_log(PID, "Program log: Instruction: Deposit", True) == (None, None, False)


def test_program_data_known_event():
    payload = b"\x01\x02\x03"
    line = "Program data: " + _event_b64("LpChangeEvent", payload)
    event, program, did_pop = handle_program_log(PID, line, True)
    assert event == DecodedEvent("LpChangeEvent", event_discriminator("LpChangeEvent"), payload)
    assert (program, did_pop) == (None, False)


def test_without_prefix_decodes_whole_line():
    event, _, _ = handle_program_log(PID, _event_b64("SwapEvent", b"\xaa"), False)
    assert event.name == "SwapEvent"
    assert event.data == b"\xaa"


def test_unknown_event_has_no_name():
    raw = b"\x00" * 8 + b"\x05"
    event, _, _ = handle_program_log(PID, base64.b64encode(raw).decode(), False)
    assert event.name is None
    assert event.data == b"\x05"


def test_invalid_base64_yields_no_event():
    assert handle_program_log(PID, "Program data: !!!", True) == (None, None, False)


def test_short_event_data_raises():
    with pytest.raises(LogParseError):
        handle_program_log(PID, "Program data: " + base64.b64encode(b"\x01").decode(), True)


def test_system_line_falls_through():
    assert handle_program_log(PID, f"Program {OTHER} invoke [2]", True) == (None, "cpi", False)


def test_parse_program_logs_collects_own_events():
    payload = b"\x10\x20"
    logs = [
        f"Program {PID} invoke [1]",
        "Program log: Instruction: SwapBaseInput",
        "Program data: " + _event_b64("SwapEvent", payload),
        f"Program {OTHER} invoke [2]",
        "Program data: " + _event_b64("LpChangeEvent", b"\x99"),
        f"Program {OTHER} success",
        f"Program {PID} success",
    ]
    events = parse_program_logs(PID, logs)
    assert events == [DecodedEvent("SwapEvent", event_discriminator("SwapEvent"), payload)]


def test_parse_ignores_other_programs():
    logs = [
        f"Program {OTHER} invoke [1]",
        "Program data: " + _event_b64("SwapEvent", b"\x01"),
        f"Program {OTHER} success",
    ]
    assert parse_program_logs(PID, logs) == []


def test_parse_empty_and_unmatched_first_line():
    assert parse_program_logs(PID, []) == []
    assert parse_program_logs(PID, ["Program log: hi", "Program data: " + _event_b64("SwapEvent", b"")]) == []


def test_parse_unbalanced_return_raises():
    logs = [
        f"Program {PID} invoke [1]",
        f"Program {PID} success",
        f"Program {OTHER} success",
    ]
    with pytest.raises(LogParseError):
        parse_program_logs(PID, logs)