from __future__ import annotations
import os
from dataclasses import dataclass


_TRUTHY = {"1", "true", "yes", "on"}

_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    recursion_limit: int = _DEFAULT_RECURSION_LIMIT
    strict_arity: bool = False
    log_level: str = _DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            recursion_limit=int_from_env("LITTLELISP_RECURSION_LIMIT", _DEFAULT_RECURSION_LIMIT),
            strict_arity=flag_from_env("LITTLELISP_STRICT_ARITY"),
            log_level=os.environ.get("LITTLELISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper(),
        )
