import os
import subprocess
import sys

import pytest

from lispy.config import get_prompt, get_word_bits


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, 64),
        ("32", 32),
        ("8", 8),
        ("12", 64),
        ("wide", 64),
    ]
)
def test_word_bits(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("LISPY_WORD_BITS", raising=False)
    else:
        monkeypatch.setenv("LISPY_WORD_BITS", raw)
    assert get_word_bits() == expected


def test_default_prompt(monkeypatch):
    monkeypatch.delenv("LISPY_PROMPT", raising=False)
    assert get_prompt() == "lispy> "


@pytest.mark.parametrize(
    "code,expected",
    [
        ("127", "127"),
        ("200", "Error: invalid number"),
        ("-129", "Error: invalid number"),
        ("(+ 127 1)", "-128"),
        ("(- -128)", "-128"),
        ("(* 16 16)", "0"),
    ]
)
def test_word_bits_sets_number_range(code, expected):
    # the width is fixed when lispy.types.number is imported, so use a fresh process
    env = dict(os.environ, LISPY_WORD_BITS="8")
    proc = subprocess.run(
        [sys.executable, "-m", "lispy", "-e", code],
        env=env, capture_output=True, text=True,
        cwd=os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    )
    assert proc.stdout == expected + "\n"
