"""Splitting source text into numbered lines.

Every analyzer numbers lines the same way: only ``\\n`` ends a line, and a
``\\r`` left at the end of a line by CRLF endings is dropped. Other
characters that ``str.splitlines`` treats as breaks (form feed, vertical
tab, ``\\u2028`` ...) stay inside their line.
"""

from __future__ import annotations


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n``, stripping one trailing ``\\r`` per line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
