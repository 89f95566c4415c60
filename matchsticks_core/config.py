from __future__ import annotations

import os
import sys

_TRUTHY = ('1', 'true', 'yes', 'on')


def env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def debug_enabled() -> bool:
    """Set MATCHSTICKS_DEBUG=1 to print engine and AI traces to stderr."""
    return env_flag('MATCHSTICKS_DEBUG')


def trace(channel: str, msg: str) -> None:
    if debug_enabled():
        print(f"[{channel}] {msg}", file=sys.stderr)


def ai_delay_ms() -> int:
    return max(0, env_int('MATCHSTICKS_AI_DELAY_MS', 500))


def max_stacks() -> int:
    return env_int('MATCHSTICKS_MAX_STACKS', 64)
