import pytest

from examcsv.utils.text import blank_to_none, normalize_boolean, normalize_cell, strip_bom


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, ""),
        ("", ""),
        ("  plain  ", "plain"),
        ("\ufeffprompt", "prompt"),
        ('"quoted"', "quoted"),
        ('"""triple"""', "triple"),
        ('  "spaced"  ', '"spaced"'),
        ('"\ufeff"', "\ufeff"),
        ('say "hi" now', 'say "hi" now'),
    ],
)
def test_normalize_cell(raw, expected):
    assert normalize_cell(raw) == expected


def test_strip_bom_only_leading():
    assert strip_bom("\ufeffa\ufeff") == "a\ufeff"
    assert strip_bom(None) == ""


@pytest.mark.parametrize("raw", ["true", "TRUE", " True ", "1", "y", "Y"])
def test_normalize_boolean_true(raw):
    assert normalize_boolean(raw) is True


@pytest.mark.parametrize("raw", [None, "", "false", "0", "yes", "benar", "n", "2"])
def test_normalize_boolean_false(raw):
    assert normalize_boolean(raw) is False


def test_blank_to_none():
    assert blank_to_none("  ") is None
    assert blank_to_none(None) is None
    assert blank_to_none(" /img/a.png ") == "/img/a.png"
