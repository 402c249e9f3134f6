import pytest

from strata.names import (
    NameKind,
    StringArrayName,
    StringName,
    name_from_components,
    name_from_string,
)
from strata.spec import IllegalArgumentError, InvalidStateError


@pytest.mark.parametrize(
    "kind, expected_type",
    [
        (NameKind.ARRAY, StringArrayName),
        (NameKind.STRING, StringName),
        ("array", StringArrayName),
        ("string", StringName),
    ],
)
def test_factories_build_requested_representation(kind, expected_type):
    from_string = name_from_string("a\\.b.c", ".", kind)
    from_components = name_from_components(["a.b", "c"], ".", kind)

    assert type(from_string) is expected_type
    assert type(from_components) is expected_type
    assert list(from_string) == ["a.b", "c"]
    assert from_string.is_equal(from_components)


def test_factories_default_to_dot_delimiter():
    assert name_from_string("a.b").get_delimiter_character() == "."
    assert name_from_components(["a"]).get_delimiter_character() == "."


def test_unknown_kind_is_a_precondition_violation():
    with pytest.raises(IllegalArgumentError, match="unknown name kind"):
        name_from_string("a", ".", "linked")


@pytest.mark.parametrize("kind", list(NameKind))
def test_dangling_escape_in_source(kind):
    with pytest.raises(InvalidStateError):
        name_from_string("a.b\\", ".", kind)


@pytest.mark.parametrize("delimiter", ["", "ab"])
@pytest.mark.parametrize("kind", list(NameKind))
def test_factories_reject_invalid_delimiter(kind, delimiter):
    with pytest.raises(IllegalArgumentError):
        name_from_components(["a"], delimiter, kind)
    with pytest.raises(IllegalArgumentError):
        name_from_string("a.b", delimiter, kind)
