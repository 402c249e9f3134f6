import pytest

from strata.names import (
    escape_component,
    join_components,
    split_components,
    unescape_component,
)
from strata.spec import IllegalArgumentError, InvalidStateError


def test_escape_masks_delimiter_and_escape_character():
    assert escape_component("a.b", ".") == "a\\.b"
    assert escape_component("a\\b", ".") == "a\\\\b"
    # Escape characters are doubled before delimiters get masked
    assert escape_component("\\.", ".") == "\\\\\\."
    assert escape_component("plain", ".") == "plain"


def test_escape_with_custom_escape_character():
    assert escape_component("a#b!c", "#", escape="!") == "a!#b!!c"


def test_split_follows_escape_state_machine():
    assert split_components("a\\.b.c", ".") == ["a.b", "c"]
    assert split_components("a\\\\.b", ".") == ["a\\", "b"]
    assert split_components("a.b.c", "/") == ["a.b.c"]
    assert split_components("a/b", "/") == ["a", "b"]


def test_split_keeps_empty_components():
    assert split_components(".", ".") == ["", ""]
    assert split_components("a..b", ".") == ["a", "", "b"]
    assert split_components("a.", ".") == ["a", ""]


def test_split_of_empty_string_has_no_components():
    assert split_components("", ".") == []


def test_split_rejects_dangling_escape():
    with pytest.raises(InvalidStateError, match="dangling escape"):
        split_components("abc\\", ".")


def test_escaped_escape_at_end_is_not_dangling():
    assert split_components("abc\\\\", ".") == ["abc\\"]


@pytest.mark.parametrize("delimiter", [".", "/", "#", " "])
@pytest.mark.parametrize(
    "components",
    [
        ["a", "b", "c"],
        ["a.b", "c/d", "e#f"],
        ["\\", "\\\\", "x\\"],
        ["", "x", ""],
        ["only"],
    ],
)
def test_join_then_split_reproduces_components(components, delimiter):
    joined = join_components(components, delimiter)
    assert split_components(joined, delimiter) == components


@pytest.mark.parametrize(
    "value", ["", "plain", "a.b", "a\\b", "\\.\\", "..", "é.ü"]
)
def test_unescape_inverts_escape(value):
    assert unescape_component(escape_component(value, "."), ".") == value


CUSTOM_PAIRS = [("#", "!"), (".", "/"), ("a", "b"), ("\\", ".")]


def _components_for(delimiter, escape):
    d, e = delimiter, escape
    return [
        ["x", "y"],
        [f"x{d}y", "z"],
        [f"x{e}y", f"{e}{e}"],
        [f"{e}{d}", f"{d}{e}", ""],
        ["", ""],
        [f"{e}"],
    ]


@pytest.mark.parametrize("delimiter, escape", CUSTOM_PAIRS)
def test_round_trip_with_custom_escape_character(delimiter, escape):
    for components in _components_for(delimiter, escape):
        joined = join_components(components, delimiter, escape)
        assert split_components(joined, delimiter, escape) == components
        for component in components:
            masked = escape_component(component, delimiter, escape)
            assert unescape_component(masked, delimiter, escape) == component


def test_unescape_rejects_unmasked_delimiter():
    with pytest.raises(IllegalArgumentError, match="unmasked delimiter"):
        unescape_component("a.b", ".")


@pytest.mark.parametrize(
    "delimiter, escape",
    [("", "\\"), ("ab", "\\"), (".", ""), (".", "."), ("\\", "\\")],
)
def test_control_characters_are_preconditions(delimiter, escape):
    with pytest.raises(IllegalArgumentError):
        split_components("a", delimiter, escape)
    with pytest.raises(IllegalArgumentError):
        escape_component("a", delimiter, escape)
