from __future__ import annotations
import os

_TRUTHY = {"1", "true", "yes", "on"}


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_strict_lexing() -> bool:
    return flag_from_env('MINILISP_STRICT_LEX', False)


def resolve_strict(strict: bool | None) -> bool:
    # explicit argument wins over the environment
    return get_strict_lexing() if strict is None else strict
