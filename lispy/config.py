from __future__ import annotations
import os

_DEFAULT_WORD_BITS = 64
_SUPPORTED_WORD_BITS = (8, 16, 32, 64)
_DEFAULT_PROMPT = "lispy> "


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_word_bits() -> int:
    bits = int_from_env('LISPY_WORD_BITS', _DEFAULT_WORD_BITS)
    # only widths a signed machine word can have
    return bits if bits in _SUPPORTED_WORD_BITS else _DEFAULT_WORD_BITS


def get_prompt() -> str:
    return os.environ.get('LISPY_PROMPT') or _DEFAULT_PROMPT
