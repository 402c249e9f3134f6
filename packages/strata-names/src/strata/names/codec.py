from typing import Iterable, List

from strata.spec import ESCAPE_CHARACTER, IllegalArgumentError, InvalidStateError


def _check_control_characters(delimiter: str, escape: str) -> None:
    IllegalArgumentError.check(
        isinstance(delimiter, str) and len(delimiter) == 1,
        f"delimiter must be a single character, got {delimiter!r}",
    )
    IllegalArgumentError.check(
        isinstance(escape, str) and len(escape) == 1,
        f"escape character must be a single character, got {escape!r}",
    )
    IllegalArgumentError.check(
        delimiter != escape, "delimiter and escape character must differ"
    )


def escape_component(
    component: str, delimiter: str, escape: str = ESCAPE_CHARACTER
) -> str:
    """
    Masks a single component for use inside a `delimiter`-joined string.

    Escape characters are doubled first, then each delimiter gets one escape
    character in front of it.
    """
    _check_control_characters(delimiter, escape)
    return component.replace(escape, escape + escape).replace(
        delimiter, escape + delimiter
    )


def split_components(
    data: str, delimiter: str, escape: str = ESCAPE_CHARACTER
) -> List[str]:
    """
    Splits an escaped string into its unescaped components.

    The empty string has no components at all. A trailing, unmatched escape
    character means the data is corrupted and raises InvalidStateError.

    Example: split_components("a\\.b.c", ".") -> ["a.b", "c"]
    """
    _check_control_characters(delimiter, escape)
    if not data:
        return []

    components: List[str] = []
    current: List[str] = []
    escape_active = False
    for ch in data:
        if escape_active:
            current.append(ch)
            escape_active = False
        elif ch == escape:
            escape_active = True
        elif ch == delimiter:
            components.append("".join(current))
            current = []
        else:
            current.append(ch)

    InvalidStateError.check(
        not escape_active, f"dangling escape sequence in {data!r}"
    )
    components.append("".join(current))
    return components


def join_components(
    components: Iterable[str], delimiter: str, escape: str = ESCAPE_CHARACTER
) -> str:
    return delimiter.join(
        escape_component(component, delimiter, escape) for component in components
    )


def unescape_component(
    data: str, delimiter: str, escape: str = ESCAPE_CHARACTER
) -> str:
    """
    Inverse of `escape_component`.

    The input must describe exactly one component: an unmasked delimiter is
    rejected, since it would split the data into several.
    """
    components = split_components(data, delimiter, escape)
    if not components:
        return ""
    IllegalArgumentError.check(
        len(components) == 1,
        f"unmasked delimiter {delimiter!r} in component data {data!r}",
    )
    return components[0]
