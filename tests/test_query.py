"""Query normalization."""

import pytest

from stopsearch.services.query import expand_shortcut, normalize_query


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("main ", "main+"),
        ("Green St", "green+st"),
        ("  Lincoln  Square ", "++lincoln++square+"),
        ("", ""),
        ("Main&3rd", "main&3rd"),
    ],
)
def test_normalize_query_encodes_spaces_and_lowercases(raw, expected):
    assert normalize_query(raw) == expected


def test_isr_shortcut_expands_before_encoding():
    assert normalize_query("isr") == "illinois+street+residence+hall"


def test_shortcut_is_exact_and_case_sensitive():
    assert normalize_query("ISR") == "isr"
    assert normalize_query("isr ") == "isr+"
    assert expand_shortcut("is") == "is"


def test_custom_shortcuts_replace_defaults():
    shortcuts = {"par": "Pennsylvania Avenue Residence"}
    assert normalize_query("par", shortcuts) == "pennsylvania+avenue+residence"
    assert normalize_query("isr", shortcuts) == "isr"


def test_tabs_and_newlines_are_not_encoded():
    assert normalize_query("Main\tSt") == "main\tst"
