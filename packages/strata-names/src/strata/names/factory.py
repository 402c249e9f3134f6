from enum import Enum
from typing import Iterable, Optional, Union

from strata.spec import DEFAULT_DELIMITER, ESCAPE_CHARACTER, IllegalArgumentError
from .array_name import StringArrayName
from .base import AbstractName
from .codec import split_components
from .string_name import StringName


class NameKind(str, Enum):
    ARRAY = "array"  # StringArrayName
    STRING = "string"  # StringName


def _resolve_kind(kind: Union[NameKind, str]) -> NameKind:
    try:
        return NameKind(kind)
    except ValueError:
        valid = ", ".join(k.value for k in NameKind)
        raise IllegalArgumentError(
            f"unknown name kind {kind!r}, expected one of: {valid}"
        ) from None


def name_from_components(
    components: Iterable[str],
    delimiter: Optional[str] = None,
    kind: Union[NameKind, str] = NameKind.ARRAY,
) -> AbstractName:
    if delimiter is None:
        delimiter = DEFAULT_DELIMITER
    if _resolve_kind(kind) is NameKind.STRING:
        return StringName("", delimiter).concat(StringArrayName(components, delimiter))
    return StringArrayName(components, delimiter)


def name_from_string(
    source: str,
    delimiter: Optional[str] = None,
    kind: Union[NameKind, str] = NameKind.ARRAY,
) -> AbstractName:
    """
    Parses an escaped source string into a name of the requested kind.

    Example: name_from_string("a\\.b.c") -> StringArrayName(["a.b", "c"])
    """
    if delimiter is None:
        delimiter = DEFAULT_DELIMITER
    if _resolve_kind(kind) is NameKind.STRING:
        return StringName(source, delimiter)
    IllegalArgumentError.check(isinstance(source, str), "source string must be provided")
    return StringArrayName(
        split_components(source, delimiter, ESCAPE_CHARACTER), delimiter
    )
