"""Translate raw user input into the query string the API expects."""

from __future__ import annotations

from typing import Mapping

# Exact, case-sensitive inputs that are expanded before encoding.
DEFAULT_SHORTCUTS: Mapping[str, str] = {
    "isr": "Illinois Street Residence Hall",
}


def expand_shortcut(raw_text: str, shortcuts: Mapping[str, str] = DEFAULT_SHORTCUTS) -> str:
    return shortcuts.get(raw_text, raw_text)


def normalize_query(raw_text: str, shortcuts: Mapping[str, str] = DEFAULT_SHORTCUTS) -> str:
    """Expand known shortcuts, encode spaces as ``+`` and lowercase.

    Only the space character is encoded; the result is appended to the base
    endpoint as-is.
    """

    text = expand_shortcut(raw_text or "", shortcuts)
    return text.replace(" ", "+").lower()


__all__ = ["DEFAULT_SHORTCUTS", "expand_shortcut", "normalize_query"]
