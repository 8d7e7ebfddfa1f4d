"""UTF-8 validation with an encoded finite state machine."""

from __future__ import annotations

# Maps every byte to a character class, which keeps the transition table small.
_BYTE_TO_CHAR_CLASS = bytes(
    [0] * 128
    + [1] * 16
    + [9] * 16
    + [7] * 32
    + [8, 8]
    + [2] * 30
    + [10]
    + [3] * 12
    + [4]
    + [3, 3]
    + [11]
    + [6, 6, 6]
    + [5]
    + [8] * 11
)

# Maps (state + char class) to the next state. State 0 accepts; 12 rejects.
_TRANSITIONS = bytes(
    [
        0, 12, 24, 36, 60, 96, 84, 12, 12, 12, 48, 72, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12,
        12, 0, 12, 12, 12, 12, 12, 0, 12, 0, 12, 12, 12, 24, 12, 12, 12, 12, 12, 24, 12, 24, 12, 12,
        12, 12, 12, 12, 12, 12, 12, 24, 12, 12, 12, 12, 12, 24, 12, 12, 12, 12, 12, 12, 12, 24, 12, 12,
        12, 12, 12, 12, 12, 12, 12, 36, 12, 36, 12, 12, 12, 36, 12, 12, 12, 12, 12, 36, 12, 36, 12, 12,
        12, 36, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12,
    ]
)

_ACCEPT = 0
_REJECT = 12


def _run(data: bytes) -> int:
    state = _ACCEPT
    for byte in data:
        state = _TRANSITIONS[state + _BYTE_TO_CHAR_CLASS[byte]]
        if state == _REJECT:
            break
    return state


def is_utf8(data: bytes | bytearray | memoryview | str) -> bool:
    """Return whether ``data`` is well-formed UTF-8.

    The input is split at a character boundary near its middle and each half
    is run through the state machine; both must end in the accepting state.
    A ``str`` is checked as its UTF-8 encoding.
    """
    if isinstance(data, str):
        data = data.encode("utf-8", "surrogatepass")
    data = bytes(data)
    if not data:
        return True
    half = len(data) // 2
    while half > 0 and 0x80 <= data[half] <= 0xBF:
        half -= 1
    return _run(data[:half]) == _ACCEPT and _run(data[half:]) == _ACCEPT