from __future__ import annotations

import pytest

from fedi_hearts.naming import canonical_name, derive_name, output_filename


@pytest.mark.parametrize(
    ("filename", "alias", "expected"),
    [
        ("Hearts/whatever.gif", "Gay Pride", "gay_pride"),
        ("x.gif", "Trans-Rights Pride", "trans_rights_pride"),
        ("Gay Pride.gif", None, "gay_pride"),
        ("Non-Binary (not made by me).gif", None, "non_binary"),
        ("Pride(test).gif", None, "pride"),
        ("ch_Lesbian.gif", None, "lesbian"),
        ("celeste_hearts_Ace.GIF", None, "ace"),
        ("celeste_hearts_ch_Bi.gif", None, "bi"),
        ("../Hearts/MLM.png", "", "mlm"),
    ],
)
def test_derive_name(filename: str, alias: str | None, expected: str) -> None:
    assert derive_name(filename, alias) == expected


def test_only_first_space_and_hyphen_are_replaced() -> None:
    assert derive_name("x.gif", "A B C") == "a_b c"
    assert derive_name("x.gif", "a-b-c") == "a_b-c"
    assert derive_name("Two Spirit Pride.gif") == "two_spirit pride"


def test_parenthesized_text_is_only_stripped_at_the_end() -> None:
    assert derive_name("a (b) c.gif") == "a_(b) c"


def test_prefix_removal_applies_to_first_occurrence() -> None:
    # "ch_" is removed wherever it first appears, not only at the start.
    assert derive_name("march_hearts.gif") == "marhearts"


def test_canonical_name_and_output_filename() -> None:
    name = derive_name("Ace.GIF", "Ace Pride")

    assert canonical_name(name) == "celeste_hearts_ace_pride"
    assert output_filename("Hearts/Ace.GIF", name) == "celeste_hearts_ace_pride.GIF"


def test_canonical_name_is_lowercase_and_prefixed() -> None:
    for filename, alias in [("Gay Pride.gif", None), ("y.png", "Big-Heart One")]:
        name = canonical_name(derive_name(filename, alias))
        assert name == name.lower()
        assert name.startswith("celeste_hearts_")
