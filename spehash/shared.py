import sys
from typing import Any


_debug_trace = False


def set_debug_trace(b: bool):
    global _debug_trace
    _debug_trace = b


def debug_trace() -> bool:
    return _debug_trace


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)
