from __future__ import annotations

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; good generic highlight

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"


def c(s: str, code: str, enabled: bool = True) -> str:
    if not enabled:
        return s
    return f"{code}{s}{RESET}"
